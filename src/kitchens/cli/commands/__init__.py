"""CLI command implementations for the kitchens application.

This package contains subcommands for the kitchens CLI, including:
- validate: Validate a configuration file
- generate: Synthesize the layout of a configuration file
- templates: Manage predefined kitchen templates
- catalog: Browse the material and module catalogs
"""

from kitchens.cli.commands.catalog import catalog_app
from kitchens.cli.commands.generate import generate_command
from kitchens.cli.commands.templates import templates_app
from kitchens.cli.commands.validate import validate_command

__all__ = ["catalog_app", "generate_command", "templates_app", "validate_command"]
