"""Region expansion command"""

import logging

from regionpedia.cli.output import get_formatter
from regionpedia.exceptions import RegionExpansionError, RegionpediaError
from regionpedia.models.region import expand_region
from regionpedia.models.region_mapping import get_region_name, is_known_region
from regionpedia.services.region_service import RegionService
from .base import load_settings, print_error, write_output

logger = logging.getLogger("regionpedia")


def cmd_expand(args) -> int:
    """Expand shorthand regions command"""
    try:
        settings = load_settings()
        default = args.default_region or settings.default_region
        strict = settings.strict if args.strict is None else args.strict
        formatter = get_formatter(args.format or settings.output_format)
        service = RegionService(args.profile or settings.aws_profile) if strict else None

        results = []
        for value in args.regions or [""]:
            region = expand_region(value, default)
            logger.debug(f"Expanded '{value}' to '{region}'")
            if service is not None:
                service.check_region(region)
            results.append({
                "input": value,
                "region": region,
                "name": get_region_name(region),
                "known": is_known_region(region),
            })

        write_output(formatter.format_expansions(results), args.output, args.quiet)
        return 0

    except RegionExpansionError as e:
        print_error(f"Cannot expand '{value}': {e}", debug=args.debug, exception=e)
        return 1
    except RegionpediaError as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
    except IOError as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1
