"""Config file command"""

from regionpedia.config.settings import create_default_config, get_config_path
from regionpedia.exceptions import RegionpediaError
from .base import load_settings, print_error, safe_write_file, status


def cmd_config(args) -> int:
    """Show the effective settings or write a default config file"""
    config_path = get_config_path()

    if args.init:
        if config_path.exists() and not args.force:
            print_error(f"Config file already exists at {config_path} (use --force to overwrite)")
            return 1
        try:
            safe_write_file(str(config_path), create_default_config())
        except IOError as e:
            print_error(str(e), debug=args.debug, exception=e)
            return 1
        status(f"Wrote default config to {config_path}", args.quiet)
        return 0

    try:
        settings = load_settings()
    except RegionpediaError as e:
        print_error(str(e), debug=args.debug, exception=e)
        return 1

    exists = "" if config_path.exists() else " (not found)"
    print(f"Config file: {config_path}{exists}")
    for name, value in settings.model_dump().items():
        print(f"{name} = {value!r}")
    return 0
