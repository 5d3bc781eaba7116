"""Catalog commands for browsing materials and module types."""

import json
from typing import Annotated, Any

import typer

from kitchens.application import get_factory

catalog_app = typer.Typer(
    name="catalog",
    help="Browse the material and module catalogs.",
)


def _emit(payload: dict[str, Any]) -> None:
    if "error" in payload:
        typer.echo(f"Error: {payload['error']}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(payload, indent=2))


@catalog_app.command(name="materials")
def materials(
    category: Annotated[
        str,
        typer.Option(
            "--category", "-c", help="facades, countertops, handles or all"
        ),
    ] = "all",
) -> None:
    """Show the material library."""
    _emit(get_factory().get_toolkit().get_material_library(category))


@catalog_app.command(name="modules")
def modules(
    module_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Module type to show, or all"),
    ] = "all",
) -> None:
    """Show the module library with variants and width bounds."""
    _emit(get_factory().get_toolkit().get_module_library(module_type))
