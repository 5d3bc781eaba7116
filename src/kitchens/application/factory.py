"""Service factory for dependency injection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kitchens.infrastructure.store import DEFAULT_CAPACITY, DEFAULT_TTL_SECONDS

if TYPE_CHECKING:
    from kitchens.application.commands import GenerateKitchenCommand
    from kitchens.application.templates import TemplateManager
    from kitchens.application.tools import KitchenToolkit
    from kitchens.domain import (
        ConfigValidator,
        LayoutEngine,
        MaterialCatalog,
        ModuleCatalog,
    )
    from kitchens.infrastructure.exporters import JsonExporter
    from kitchens.infrastructure.store import KitchenConfigStore

logger = logging.getLogger(__name__)

TTL_ENV_VAR = "KITCHENS_STORE_TTL_SECONDS"
CAPACITY_ENV_VAR = "KITCHENS_STORE_CAPACITY"


@dataclass
class ServiceFactory:
    """Factory for creating and caching service instances.

    Catalogs, validator, engine and store are created on first use and
    shared afterwards; commands and exporters are created per call.

    Attributes:
        store_ttl_seconds: Lifetime of saved configurations (0 = no expiry).
        store_capacity: Maximum number of saved configurations.
    """

    store_ttl_seconds: float = DEFAULT_TTL_SECONDS
    store_capacity: int = DEFAULT_CAPACITY

    _material_catalog: MaterialCatalog | None = field(
        default=None, init=False, repr=False
    )
    _module_catalog: ModuleCatalog | None = field(default=None, init=False, repr=False)
    _validator: ConfigValidator | None = field(default=None, init=False, repr=False)
    _engine: LayoutEngine | None = field(default=None, init=False, repr=False)
    _store: KitchenConfigStore | None = field(default=None, init=False, repr=False)

    def get_material_catalog(self) -> MaterialCatalog:
        """Get or load the material catalog."""
        if self._material_catalog is None:
            from kitchens.application.catalogs import load_material_catalog

            self._material_catalog = load_material_catalog()
        return self._material_catalog

    def get_module_catalog(self) -> ModuleCatalog:
        """Get or load the module catalog."""
        if self._module_catalog is None:
            from kitchens.application.catalogs import load_module_catalog

            self._module_catalog = load_module_catalog()
        return self._module_catalog

    def get_validator(self) -> ConfigValidator:
        if self._validator is None:
            from kitchens.domain import ConfigValidator

            self._validator = ConfigValidator(
                self.get_material_catalog(), self.get_module_catalog()
            )
        return self._validator

    def get_layout_engine(self) -> LayoutEngine:
        if self._engine is None:
            from kitchens.domain import LayoutEngine

            self._engine = LayoutEngine(self.get_material_catalog())
        return self._engine

    def get_store(self) -> KitchenConfigStore:
        if self._store is None:
            from kitchens.infrastructure.store import KitchenConfigStore

            self._store = KitchenConfigStore(
                ttl_seconds=self.store_ttl_seconds, capacity=self.store_capacity
            )
        return self._store

    def create_generate_command(self) -> GenerateKitchenCommand:
        from kitchens.application.commands import GenerateKitchenCommand

        return GenerateKitchenCommand(self.get_validator(), self.get_layout_engine())

    def get_toolkit(self) -> KitchenToolkit:
        from kitchens.application.tools import KitchenToolkit

        return KitchenToolkit(
            material_catalog=self.get_material_catalog(),
            module_catalog=self.get_module_catalog(),
            validator=self.get_validator(),
            engine=self.get_layout_engine(),
            store=self.get_store(),
        )

    def get_template_manager(self) -> TemplateManager:
        from kitchens.application.templates import TemplateManager

        return TemplateManager()

    def get_json_exporter(self, indent: int | None = 2) -> JsonExporter:
        from kitchens.infrastructure.exporters import JsonExporter

        return JsonExporter(indent=indent)

    @classmethod
    def from_env(cls) -> ServiceFactory:
        """Create a factory configured from environment variables.

        Reads KITCHENS_STORE_TTL_SECONDS and KITCHENS_STORE_CAPACITY; unset
        or malformed values fall back to the defaults.
        """
        return cls(
            store_ttl_seconds=_env_number(TTL_ENV_VAR, DEFAULT_TTL_SECONDS, float),
            store_capacity=_env_number(
                CAPACITY_ENV_VAR, DEFAULT_CAPACITY, int, minimum=1
            ),
        )


def _env_number(name, default, convert, minimum=0):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = convert(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default
    if value < minimum:
        logger.warning(f"Ignoring out-of-range {name}={raw!r}, using {default}")
        return default
    return value


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory, configured from the environment."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory.from_env()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
