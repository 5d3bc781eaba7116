"""``kitchens templates``: browse and copy the predefined kitchens."""

from pathlib import Path
from typing import Annotated, NoReturn

import typer

from kitchens.application import get_factory
from kitchens.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="Manage predefined kitchen templates.",
)


def _manager() -> TemplateManager:
    return get_factory().get_template_manager()


def _abort(*lines: str) -> NoReturn:
    for line in lines:
        typer.echo(line, err=True)
    raise typer.Exit(code=1)


def _unknown_template(name: str) -> NoReturn:
    names = ", ".join(known for known, _ in _manager().list_templates())
    _abort(f"Error: Template not found: {name}", f"Available templates: {names}")


@templates_app.command(name="list")
def list_templates() -> None:
    """List the bundled templates with their descriptions."""
    entries = _manager().list_templates()
    width = max((len(name) for name, _ in entries), default=0)

    typer.echo("Available templates:")
    typer.echo()
    for name, description in entries:
        typer.echo(f"  {name.ljust(width)}  - {description}")
    typer.echo()
    typer.echo("Run 'kitchens templates init <name>' to start from one.")


@templates_app.command(name="show")
def show_template(
    name: Annotated[str, typer.Argument(help="Template to print")],
) -> None:
    """Print the JSON content of a template."""
    try:
        typer.echo(_manager().get_template(name))
    except TemplateNotFoundError:
        _unknown_template(name)


@templates_app.command(name="init")
def init_template(
    name: Annotated[str, typer.Argument(help="Template to copy")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Destination file (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Replace the destination if it exists"),
    ] = False,
) -> None:
    """Copy a template to a new configuration file.

    Examples:
        kitchens templates init l-shaped-kitchen
        kitchens templates init compact-kitchen -o studio.json --force
    """
    target = output or Path(f"{name}.json")
    try:
        _manager().init_template(name, target, overwrite=force)
    except TemplateNotFoundError:
        _unknown_template(name)
    except FileExistsError:
        _abort(
            f"Error: File already exists: {target}",
            "Pass --force to overwrite it.",
        )
    except OSError as e:
        _abort(f"Error: Could not write {target}: {e}")
    typer.echo(f"Created: {target}")
