"""Carcass builder registry keyed by module type."""

from __future__ import annotations

from typing import Callable, TypeVar

from ..value_objects import ModuleType
from .protocol import CarcassBuilder

B = TypeVar("B", bound=CarcassBuilder)


class CarcassRegistry:
    """Singleton registry for carcass builder types.

    Builder IDs must follow the format 'carcass.<module type>', e.g.
    'carcass.base' or 'carcass.corner'. Every ModuleType member is expected
    to have exactly one registered builder.

    Example:
        @carcass_registry.register("carcass.base")
        class BaseCabinetBuilder:
            ...

        builder = carcass_registry.for_type(ModuleType.BASE)
    """

    _instance: CarcassRegistry | None = None
    _builders: dict[str, type[CarcassBuilder]]

    def __new__(cls) -> CarcassRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._builders = {}
        return cls._instance

    def register(self, builder_id: str) -> Callable[[type[B]], type[B]]:
        """Decorator to register a builder class.

        Args:
            builder_id: Unique identifier, 'carcass.<module type>'.

        Returns:
            A decorator function that registers the class and returns it unchanged.

        Raises:
            ValueError: If builder_id is already registered or has invalid format.
        """

        def decorator(cls: type[B]) -> type[B]:
            if builder_id in self._builders:
                raise ValueError(f"Builder '{builder_id}' already registered")
            self._validate_id(builder_id)
            self._builders[builder_id] = cls
            return cls

        return decorator

    def get(self, builder_id: str) -> type[CarcassBuilder]:
        """Get a builder class by ID.

        Raises:
            KeyError: If no builder is registered with the given ID.
        """
        if builder_id not in self._builders:
            raise KeyError(f"Unknown builder: {builder_id}")
        return self._builders[builder_id]

    def for_type(self, module_type: ModuleType) -> CarcassBuilder:
        """Instantiate the builder registered for a module type."""
        return self.get(f"carcass.{module_type.value}")()

    def list(self) -> list[str]:
        """List all registered builder IDs, sorted."""
        return sorted(self._builders.keys())

    def _validate_id(self, builder_id: str) -> None:
        parts = builder_id.split(".")
        if len(parts) != 2 or parts[0] != "carcass":
            raise ValueError(
                f"Invalid builder ID '{builder_id}': must be 'carcass.<type>'"
            )

    def clear(self) -> None:
        """Remove all registered builders. Intended for tests only."""
        self._builders = {}


# Singleton instance for convenient access
carcass_registry = CarcassRegistry()
