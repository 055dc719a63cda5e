"""CLI command implementations for the campus application.

This package contains subcommands for the campus CLI, including:
- validate: Validate a configuration file and its campus data
- check-door: Check a door placement against a configured campus
"""

from campus.cli.commands.doors import check_door_command
from campus.cli.commands.validate import configure_logging, validate_command

__all__ = ["check_door_command", "configure_logging", "validate_command"]
