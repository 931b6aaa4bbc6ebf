"""CLI command handlers

This package organizes CLI commands into logical modules:
- expand_commands: Shorthand region expansion
- region_commands: Known region listing
- config_commands: Config file management
"""

import sys

from .expand_commands import cmd_expand
from .region_commands import cmd_regions
from .config_commands import cmd_config
from .base import (
    print_error,
    status,
    write_output,
)


def run_cli(args) -> int:
    """Run CLI command based on args"""
    if hasattr(args, 'func'):
        return args.func(args)
    else:
        print("Error: No command specified", file=sys.stderr)
        return 1


__all__ = [
    'cmd_expand',
    'cmd_regions',
    'cmd_config',
    'print_error',
    'status',
    'write_output',
    'run_cli',
]
