"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from kitchens.domain import RenderableModule, ValidationResult


@dataclass
class LayoutOutput:
    """Output DTO containing the synthesized layout.

    Attributes:
        kitchen_id: Id of the kitchen the layout was generated for.
        modules: Top-level renderable modules; empty when generation failed.
        validation: Findings of the validation pass run before synthesis.
        errors: Error messages if generation failed.
        error_code: Machine-readable code of the synthesis error, if any.
    """

    kitchen_id: str
    modules: list[RenderableModule] = field(default_factory=list)
    validation: ValidationResult = field(default_factory=ValidationResult)
    errors: list[str] = field(default_factory=list)
    error_code: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the layout was generated successfully."""
        return len(self.errors) == 0

    @property
    def module_count(self) -> int:
        return len(self.modules)
