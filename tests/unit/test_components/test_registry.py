"""Tests for the carcass builder registry."""

import pytest

from kitchens.domain import ModuleType
from kitchens.domain.components import (
    BaseCabinetBuilder,
    CarcassRegistry,
    CornerCabinetBuilder,
    carcass_registry,
)


class TestCarcassRegistry:
    def test_singleton(self) -> None:
        assert CarcassRegistry() is carcass_registry

    def test_every_module_type_has_a_builder(self) -> None:
        assert carcass_registry.list() == sorted(
            f"carcass.{t.value}" for t in ModuleType
        )

    def test_for_type_instantiates_builder(self) -> None:
        assert isinstance(carcass_registry.for_type(ModuleType.BASE), BaseCabinetBuilder)
        assert isinstance(
            carcass_registry.for_type(ModuleType.CORNER), CornerCabinetBuilder
        )

    def test_get_unknown_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="carcass.island"):
            carcass_registry.get("carcass.island")

    def test_duplicate_registration_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):

            @carcass_registry.register("carcass.base")
            class Duplicate:
                pass

    def test_invalid_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be 'carcass.<type>'"):

            @carcass_registry.register("builder-without-namespace")
            class Invalid:
                pass

        assert "builder-without-namespace" not in carcass_registry.list()
