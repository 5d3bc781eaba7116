"""Configuration loading with error reporting by JSON path.

A kitchen document goes through three stages: reading the file, decoding
the JSON and validating it against the schema. Each stage has its own
``error_type`` so callers (CLI, HTTP, agent tools) can react to the
category without parsing messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from kitchens.application.config.schema import KitchenConfiguration

# Tags pydantic adds to locations inside the structure discriminated union.
_UNION_TAGS = frozenset({"door-and-shelf", "drawers"})


class ConfigError(Exception):
    """A kitchen configuration could not be loaded.

    Attributes:
        message: Human readable summary.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: Source file, when the document came from disk.
        details: For json_parse a single line/column entry, for validation
            one path/message/value entry per rejected field.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = list(details or ())

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "error_type": self.error_type,
            "details": self.details,
        }


def json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it reads in the document.

    >>> json_path(("layoutLines", 0, "modules", 1, "width"))
    'layoutLines[0].modules[1].width'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif segment not in _UNION_TAGS:
            path += f".{segment}" if path else str(segment)
    return path


def _field_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    details = []
    for item in error.errors():
        received = item.get("input")
        details.append(
            {
                "path": json_path(item["loc"]),
                "message": item["msg"],
                # Whole objects are noise in a report; only scalars are echoed.
                "value": None if isinstance(received, (dict, list)) else received,
                "error_type": item["type"],
            }
        )
    return details


def _summary(details: list[dict[str, Any]]) -> str:
    noun = "field" if len(details) == 1 else "fields"
    report = [f"Kitchen configuration has {len(details)} invalid {noun}:"]
    for detail in details:
        entry = f"  {detail['path'] or '<root>'}: {detail['message']}"
        if detail["value"] is not None:
            entry += f" (got {detail['value']!r})"
        report.append(entry)
    return "\n".join(report)


def _read(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", "file_not_found", path=path
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as exc:
        raise ConfigError(
            f"Cannot read config file {path}: permission denied",
            "permission_denied",
            path=path,
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read config file {path}: {exc}", "file_read_error", path=path
        ) from exc


def _decode(text: str, path: Path) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"{path} is not valid JSON: {exc.msg} at line {exc.lineno}, "
            f"column {exc.colno}",
            "json_parse",
            path=path,
            details=[{"line": exc.lineno, "column": exc.colno, "message": exc.msg}],
        ) from exc


def _validate(data: Any, path: Path | None = None) -> KitchenConfiguration:
    try:
        return KitchenConfiguration.model_validate(data)
    except PydanticValidationError as exc:
        details = _field_errors(exc)
        raise ConfigError(
            _summary(details), "validation", path=path, details=details
        ) from exc


def load_config(path: Path) -> KitchenConfiguration:
    """Load a kitchen configuration from a JSON file.

    Raises:
        ConfigError: If any stage fails; ``error_type`` names the stage.
    """
    return _validate(_decode(_read(path), path), path)


def load_config_from_dict(data: Any) -> KitchenConfiguration:
    """Validate an already decoded document (HTTP bodies, tool arguments)."""
    return _validate(data)
