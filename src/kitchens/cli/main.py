"""Typer CLI for kitchen layout validation and generation."""

import logging
from typing import Annotated

import typer

from kitchens.cli.commands import (
    catalog_app,
    generate_command,
    templates_app,
    validate_command,
)

app = typer.Typer(
    name="kitchens",
    help="Validate and generate kitchen layouts from JSON configurations.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Kitchen layout synthesis and validation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="validate")(validate_command)
app.command(name="generate")(generate_command)
app.add_typer(templates_app, name="templates")
app.add_typer(catalog_app, name="catalog")


if __name__ == "__main__":
    app()
