"""Validation result structures for kitchen configurations.

Errors are typed: each kind of finding is its own dataclass with a stable
``code``, a JSON path into the configuration document, a human-readable
message and the fields that describe the violation. Warnings are
non-blocking and untyped.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

_BASE_FIELDS = frozenset({"path", "message", "value"})


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _jsonable(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_jsonable(item) for item in value]
    return value


@dataclass(frozen=True)
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field
            (e.g. "layoutLines[0].modules[1].width").
        message: Human-readable description of the error.
        value: The invalid value that caused the error.
    """

    path: str
    message: str
    value: Any = None
    code: ClassVar[str] = "invalid"

    def details(self) -> dict[str, Any]:
        """Typed fields of this error, keyed in camelCase."""
        return {
            _camel(f.name): _jsonable(getattr(self, f.name))
            for f in fields(self)
            if f.name not in _BASE_FIELDS
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "path": self.path,
            "message": self.message,
            **self.details(),
        }


@dataclass(frozen=True, kw_only=True)
class OutOfRangeWidth(ValidationError):
    module_id: str
    width: float
    bounds: tuple[float, float]
    code: ClassVar[str] = "out_of_range_width"


@dataclass(frozen=True, kw_only=True)
class InvalidLineLength(ValidationError):
    line_id: str
    length: float
    code: ClassVar[str] = "invalid_line_length"


@dataclass(frozen=True, kw_only=True)
class InvalidDirection(ValidationError):
    line_id: str
    code: ClassVar[str] = "invalid_direction"


@dataclass(frozen=True, kw_only=True)
class UnknownModuleType(ValidationError):
    module_id: str
    module_type: str
    code: ClassVar[str] = "unknown_module_type"


@dataclass(frozen=True, kw_only=True)
class DuplicateModuleId(ValidationError):
    module_id: str
    first_path: str
    code: ClassVar[str] = "duplicate_module_id"


@dataclass(frozen=True, kw_only=True)
class UnknownMaterialId(ValidationError):
    ref: str
    slot: str
    code: ClassVar[str] = "unknown_material_id"


@dataclass(frozen=True, kw_only=True)
class LineLengthMismatch(ValidationError):
    line_id: str
    required: float
    available: float
    code: ClassVar[str] = "line_length_mismatch"


@dataclass(frozen=True, kw_only=True)
class UnknownAlignmentTarget(ValidationError):
    module_id: str
    target: str
    code: ClassVar[str] = "unknown_alignment_target"


@dataclass(frozen=True, kw_only=True)
class InvalidCornerAdjacency(ValidationError):
    module_id: str
    reason: str
    code: ClassVar[str] = "invalid_corner_adjacency"


@dataclass(frozen=True, kw_only=True)
class StructureOverflow(ValidationError):
    module_id: str
    required: float
    available: float
    code: ClassVar[str] = "structure_overflow"


@dataclass(frozen=True, kw_only=True)
class HandleTooCloseToEdge(ValidationError):
    module_id: str
    clearance: float
    required: float
    code: ClassVar[str] = "handle_too_close_to_edge"


@dataclass(frozen=True)
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field.
        message: Human-readable description of the concern.
        suggestion: Optional suggested remediation.
        code: Short machine-readable kind.
    """

    path: str
    message: str
    suggestion: str | None = None
    code: str = "warning"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "code": self.code,
            "path": self.path,
            "message": self.message,
        }
        if self.suggestion:
            data["suggestion"] = self.suggestion
        return data


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Collects every finding of a validation pass in the order found.

    Attributes:
        errors: Blocking validation errors.
        warnings: Non-blocking validation warnings.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    @property
    def error_codes(self) -> list[str]:
        return [error.code for error in self.errors]

    def add(self, error: ValidationError) -> ValidationResult:
        """Add a typed validation error and return self for chaining."""
        self.errors.append(error)
        return self

    def add_warning(
        self,
        path: str,
        message: str,
        suggestion: str | None = None,
        code: str = "warning",
    ) -> ValidationResult:
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(
                path=path, message=message, suggestion=suggestion, code=code
            )
        )
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
