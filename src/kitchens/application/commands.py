"""Application commands for kitchen layout generation."""

from __future__ import annotations

import logging

from kitchens.application.dtos import LayoutOutput
from kitchens.domain import (
    ConfigValidator,
    KitchenConfig,
    LayoutEngine,
    LayoutError,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class ValidateKitchenCommand:
    """Command to validate a kitchen configuration."""

    def __init__(self, validator: ConfigValidator) -> None:
        self.validator = validator

    def execute(self, config: KitchenConfig) -> ValidationResult:
        return self.validator.validate(config)


class GenerateKitchenCommand:
    """Command to validate a configuration and synthesize its layout.

    Validation always runs first. Any blocking validation error stops the
    command before synthesis so no partial geometry is ever produced. A
    synthesis error is reported in the output instead of being raised.
    """

    def __init__(self, validator: ConfigValidator, engine: LayoutEngine) -> None:
        self.validator = validator
        self.engine = engine

    def execute(self, config: KitchenConfig) -> LayoutOutput:
        """Execute the generation command.

        Args:
            config: The kitchen configuration.

        Returns:
            LayoutOutput with the modules, or with errors and no modules.
        """
        validation = self.validator.validate(config)
        output = LayoutOutput(kitchen_id=config.kitchen_id, validation=validation)

        if not validation.is_valid:
            output.errors = [
                f"{error.path}: {error.message}" for error in validation.errors
            ]
            output.error_code = "validation"
            logger.info(
                f"Generation blocked for '{config.kitchen_id}': "
                f"{len(validation.errors)} validation errors"
            )
            return output

        try:
            output.modules = self.engine.generate(config)
        except LayoutError as e:
            output.errors = [str(e)]
            output.error_code = e.code
            logger.info(f"Generation failed for '{config.kitchen_id}': {e}")
        return output
