"""Tool surface for the conversational agent layer.

Every tool takes and returns JSON-ready values. Bad input never raises:
parse failures, validation errors and unknown ids come back in the payload
so the agent can show them to the user and retry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from kitchens.application.commands import GenerateKitchenCommand
from kitchens.application.config import (
    ConfigError,
    config_to_domain,
    load_config_from_dict,
)
from kitchens.domain import ConfigValidator, LayoutEngine
from kitchens.domain.catalogs import MATERIAL_CATEGORIES, MaterialCatalog, ModuleCatalog
from kitchens.infrastructure.exporters import modules_to_list
from kitchens.infrastructure.store import KitchenConfigNotFoundError, KitchenConfigStore

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "AI-generated kitchen design"


def _schema_errors(error: ConfigError) -> list[dict[str, Any]]:
    if not error.details:
        return [{"code": error.error_type, "path": "", "message": error.message}]
    return [
        {
            "code": "schema",
            "path": detail.get("path", ""),
            "message": detail.get("message", error.message),
        }
        for detail in error.details
    ]


class KitchenToolkit:
    """The tools offered to the agent.

    Example:
        toolkit = get_factory().get_toolkit()
        tools = toolkit.as_tools()
        result = tools["generateLayout"](config)
    """

    def __init__(
        self,
        material_catalog: MaterialCatalog,
        module_catalog: ModuleCatalog,
        validator: ConfigValidator,
        engine: LayoutEngine,
        store: KitchenConfigStore,
    ) -> None:
        self.material_catalog = material_catalog
        self.module_catalog = module_catalog
        self.validator = validator
        self.engine = engine
        self.store = store

    def get_material_library(self, category: str = "all") -> dict[str, Any]:
        """Materials by category: facades, countertops, handles or all."""
        if category != "all" and category not in MATERIAL_CATEGORIES:
            return {"error": f'Material category "{category}" not found'}
        return self.material_catalog.to_dict(category)

    def get_module_library(self, module_type: str = "all") -> dict[str, Any]:
        """Module types with their variants and width bounds."""
        if module_type != "all" and not self.module_catalog.has_type(module_type):
            return {"error": f'Module type "{module_type}" not found'}
        return self.module_catalog.to_dict(module_type)

    def validate_kitchen_config(self, config: dict[str, Any]) -> dict[str, Any]:
        """Validate a configuration document.

        Returns:
            {"isValid", "errors", "warnings"}; errors carry code, path and
            message plus typed fields.
        """
        try:
            kitchen = config_to_domain(load_config_from_dict(config))
        except ConfigError as e:
            return {"isValid": False, "errors": _schema_errors(e), "warnings": []}
        return self.validator.validate(kitchen).to_dict()

    def generate_layout(self, config: dict[str, Any]) -> dict[str, Any]:
        """Validate a configuration document and synthesize its modules.

        Returns:
            {"success", "errors", "warnings", "modules"}. modules is empty
            whenever success is False.
        """
        try:
            kitchen = config_to_domain(load_config_from_dict(config))
        except ConfigError as e:
            return {
                "success": False,
                "errors": _schema_errors(e),
                "warnings": [],
                "modules": [],
            }

        output = GenerateKitchenCommand(self.validator, self.engine).execute(kitchen)
        if output.validation.errors:
            errors = [error.to_dict() for error in output.validation.errors]
        else:
            errors = [
                {"code": output.error_code, "path": "", "message": message}
                for message in output.errors
            ]
        return {
            "success": output.is_valid,
            "errors": errors,
            "warnings": [w.to_dict() for w in output.validation.warnings],
            "modules": modules_to_list(output.modules),
        }

    def save_kitchen_config(
        self,
        config: dict[str, Any],
        modules: list[Any],
        description: str | None = None,
    ) -> dict[str, Any]:
        """Persist a configuration and its modules verbatim."""
        description = description or DEFAULT_DESCRIPTION
        entry = self.store.save(config, modules, description)
        return {
            "success": True,
            "configId": entry.config_id,
            "description": description,
            "timestamp": entry.timestamp,
        }

    def get_kitchen_config(self, config_id: str) -> dict[str, Any]:
        """Retrieve a saved configuration, or {"error": ...} if unknown."""
        try:
            return self.store.get(config_id).to_dict()
        except KitchenConfigNotFoundError as e:
            return {"error": str(e)}

    def as_tools(self) -> dict[str, Callable[..., dict[str, Any]]]:
        """The tools keyed by the names the agent calls them by."""
        return {
            "getMaterialLibrary": self.get_material_library,
            "getModuleLibrary": self.get_module_library,
            "validateKitchenConfig": self.validate_kitchen_config,
            "generateLayout": self.generate_layout,
            "saveKitchenConfig": self.save_kitchen_config,
            "getKitchenConfig": self.get_kitchen_config,
        }
