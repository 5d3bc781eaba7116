"""``kitchens validate``: check a configuration without generating it."""

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from kitchens.application import get_factory
from kitchens.application.config import ConfigError, config_to_domain, load_config
from kitchens.cli.commands.errors import display_load_error
from kitchens.domain import ValidationResult


def _print_findings(title: str, findings: Sequence, err: bool) -> None:
    if not findings:
        return
    typer.echo(f"{title}:", err=err)
    for finding in findings:
        typer.echo(f"  {finding.path}: {finding.message}", err=err)
        extra = getattr(finding, "suggestion", None)
        if extra:
            typer.echo(f"    Suggestion: {extra}", err=err)
        elif getattr(finding, "value", None) is not None:
            typer.echo(f"    Value: {finding.value!r}", err=err)
    typer.echo()


def _verdict(result: ValidationResult) -> tuple[str, bool]:
    errors, warnings = len(result.errors), len(result.warnings)
    if errors:
        return f"Validation failed: {errors} error(s), {warnings} warning(s)", True
    if warnings:
        return f"Validation passed with {warnings} warning(s)", False
    return "Validation passed. Configuration is valid.", False


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Kitchen configuration JSON file"),
    ],
) -> None:
    """Validate a kitchen configuration file.

    Schema problems are reported first. A document that parses is then run
    through every layout check (widths, line lengths, module types,
    materials, alignment, corners, structures, handles).

    Exit codes: 0 valid, 1 errors, 2 valid with warnings.

    Example:
        kitchens validate my-kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = config_to_domain(load_config(config_file))
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = get_factory().get_validator().validate(config)
    _print_findings("Errors", result.errors, err=True)
    _print_findings("Warnings", result.warnings, err=False)
    message, err = _verdict(result)
    typer.echo(message, err=err)
    raise typer.Exit(code=result.exit_code)
