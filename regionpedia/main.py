"""Entry point for the application"""

import sys
from regionpedia.cli.parser import create_parser
from regionpedia.cli.commands import run_cli
from regionpedia.logging_config import setup_logging


def main(argv=None):
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(sys.stderr)
        sys.exit(1)

    log_level = "DEBUG" if args.debug else "INFO"
    setup_logging(level=log_level, log_file=args.log_file)

    try:
        exit_code = run_cli(args)
    except KeyboardInterrupt:
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
