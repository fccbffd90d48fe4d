"""CLI command implementations for the screenfit application.

This package contains subcommands for the screenfit CLI, including:
- validate: Validate a configuration file
"""

from screenfit.cli.commands.validate import validate_command

__all__ = ["validate_command"]
