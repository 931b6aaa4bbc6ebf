"""Command line argument parser"""

import argparse
from typing import Optional, Sequence

from regionpedia import __version__
from regionpedia.cli.commands import cmd_config, cmd_expand, cmd_regions
from regionpedia.exceptions import RegionExpansionError
from regionpedia.models.region import expand_region


def region_type(value: str) -> str:
    """argparse type that accepts shorthand or fully qualified regions.

    Returns:
        The expanded region (e.g., 'ue1' -> 'us-east-1')

    Raises:
        argparse.ArgumentTypeError: If the shorthand cannot be expanded
    """
    try:
        return expand_region(value)
    except RegionExpansionError as e:
        raise argparse.ArgumentTypeError(
            f"Invalid region '{value}': {e}. "
            "Use shorthand such as 'ue1' or a full region such as 'us-east-1'."
        ) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the top level argument parser"""
    parser = argparse.ArgumentParser(
        prog="regionpedia",
        description="Expand shorthand AWS region codes (ue1 -> us-east-1)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write debug logs to this file")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress status messages")
    parser.add_argument("--profile", help="AWS profile name")

    subparsers = parser.add_subparsers(dest="command")

    # Output options shared by commands that print data
    output_parent = argparse.ArgumentParser(add_help=False)
    output_parent.add_argument(
        "--format", "-f",
        choices=["table", "json", "csv"],
        default=None,
        help="Output format (default: from settings, usually table)",
    )
    output_parent.add_argument("--output", "-o", help="Write output to a file instead of stdout")

    expand_parser = subparsers.add_parser(
        "expand",
        parents=[output_parent],
        help="Expand shorthand region codes",
        description="Expand shorthand region codes. Regions containing '-' are passed through unchanged; "
                    "an empty region expands to the default region.",
    )
    expand_parser.add_argument(
        "regions",
        nargs="*",
        metavar="REGION",
        help="Shorthand or full region codes (e.g., ue1 apse2 eu-west-1)",
    )
    expand_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail if an expanded region is not a known AWS region",
    )
    expand_parser.add_argument(
        "--default-region",
        type=region_type,
        help="Region used for empty input (shorthand accepted)",
    )
    expand_parser.set_defaults(func=cmd_expand)

    regions_parser = subparsers.add_parser(
        "regions",
        parents=[output_parent],
        help="List known AWS regions",
    )
    regions_parser.add_argument(
        "--source",
        choices=["static", "botocore", "account"],
        default="static",
        help="Where to read regions from: built-in table, botocore endpoint data, "
             "or regions enabled for your account (needs credentials)",
    )
    regions_parser.add_argument(
        "--service",
        default="ec2",
        help="Service whose endpoints are listed with --source botocore (default: ec2)",
    )
    regions_parser.set_defaults(func=cmd_regions)

    config_parser = subparsers.add_parser("config", help="Show or create the config file")
    config_parser.add_argument("--init", action="store_true", help="Write a default config file")
    config_parser.add_argument("--force", action="store_true", help="Overwrite an existing config file")
    config_parser.set_defaults(func=cmd_config)

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = create_parser()
    return parser.parse_args(argv)
