"""Region listing command"""

from regionpedia.cli.output import get_formatter
from regionpedia.exceptions import RegionpediaError
from regionpedia.models.region_mapping import get_region_list, get_region_name
from regionpedia.services.region_service import RegionService
from .base import load_settings, print_error, status, write_output


def cmd_regions(args) -> int:
    """List known regions command"""
    try:
        settings = load_settings()
        formatter = get_formatter(args.format or settings.output_format)

        if args.source == "static":
            codes = [code for code, _ in get_region_list()]
        else:
            service = RegionService(args.profile or settings.aws_profile)
            if args.source == "account":
                status("Fetching regions enabled for your account...", args.quiet)
                codes = service.get_accessible_regions()
            else:
                codes = service.get_partition_regions(args.service)

        regions = [
            {"code": code, "name": get_region_name(code)}
            for code in sorted(codes)
        ]
        write_output(formatter.format_regions(regions), args.output, args.quiet)
        return 0

    except (RegionpediaError, IOError) as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
