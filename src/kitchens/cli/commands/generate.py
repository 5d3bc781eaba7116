"""Generate command: synthesize a kitchen layout to JSON."""

from pathlib import Path
from typing import Annotated

import typer

from kitchens.application import get_factory
from kitchens.application.config import ConfigError, config_to_domain, load_config
from kitchens.cli.commands.errors import display_load_error


def generate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the layout JSON to this file"),
    ] = None,
    compact: Annotated[
        bool,
        typer.Option("--compact", help="Emit JSON without indentation"),
    ] = False,
) -> None:
    """Generate the renderable modules of a kitchen configuration.

    The configuration is validated first; nothing is generated when it has
    errors. Warnings are printed to stderr and do not block generation.

    Examples:
        kitchens generate my-kitchen.json
        kitchens generate my-kitchen.json -o layout.json --compact
    """
    try:
        config = config_to_domain(load_config(config_file))
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    factory = get_factory()
    result = factory.create_generate_command().execute(config)

    for warning in result.validation.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}", err=True)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    exporter = factory.get_json_exporter(indent=None if compact else 2)
    if output is None:
        typer.echo(exporter.export_string(result))
        return

    try:
        exporter.export(result, output)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {result.module_count} modules to {output}")
