"""Pytest configuration and shared fixtures for kitchen layout tests."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any, Callable

import pytest

from kitchens.application.catalogs import load_material_catalog, load_module_catalog
from kitchens.application.factory import ServiceFactory, reset_factory, set_factory
from kitchens.application.templates import TemplateManager
from kitchens.domain import (
    Anchor,
    ConfigValidator,
    DefaultMaterials,
    Direction,
    GlobalConstraints,
    GlobalDimensions,
    GlobalSettings,
    HandleConstraints,
    HangingModuleSpec,
    KitchenConfig,
    LayoutEngine,
    LayoutLine,
    LayoutRules,
    MaterialCatalog,
    MismatchPolicy,
    ModuleCatalog,
    ModuleConstraints,
    ModuleSpec,
    Positioning,
)


# =============================================================================
# Catalogs and services
# =============================================================================


@pytest.fixture(scope="session")
def material_catalog() -> MaterialCatalog:
    return load_material_catalog()


@pytest.fixture(scope="session")
def module_catalog() -> ModuleCatalog:
    return load_module_catalog()


@pytest.fixture
def validator(
    material_catalog: MaterialCatalog, module_catalog: ModuleCatalog
) -> ConfigValidator:
    return ConfigValidator(material_catalog, module_catalog)


@pytest.fixture
def engine(material_catalog: MaterialCatalog) -> LayoutEngine:
    return LayoutEngine(material_catalog)


@pytest.fixture
def service_factory() -> Iterator[ServiceFactory]:
    """Install a fresh ServiceFactory as the default and reset it afterwards."""
    factory = ServiceFactory()
    set_factory(factory)
    yield factory
    reset_factory()


# =============================================================================
# Domain builders
# =============================================================================


@pytest.fixture
def dimensions() -> GlobalDimensions:
    """The canonical 220 cm room used throughout the tests."""
    return GlobalDimensions(
        height=220,
        countertop_height=90,
        countertop_depth=60,
        countertop_thickness=2,
        wall_gap=50,
        base_cabinet_height=90,
        wall_cabinet_height=70,
        wall_cabinet_depth=35,
        plinth_height=12,
        plinth_depth=50,
    )


@pytest.fixture
def make_module() -> Callable[..., ModuleSpec]:
    """Build a ModuleSpec with floor anchoring and base type by default."""

    def _make(
        module_id: str,
        width: float = 60,
        module_type: str = "base",
        anchor: Anchor = Anchor.FLOOR,
        offset_y: float = 0.0,
        **kwargs: Any,
    ) -> ModuleSpec:
        return ModuleSpec(
            id=module_id,
            type=module_type,
            width=width,
            positioning=Positioning(anchor=anchor, offset_y=offset_y),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_hanging() -> Callable[..., HangingModuleSpec]:
    def _make(
        module_id: str,
        align_with: str,
        width: float | str = "auto",
        module_type: str = "wall",
        anchor: Anchor = Anchor.WALL,
        offset_y: float = 0.0,
        **kwargs: Any,
    ) -> HangingModuleSpec:
        return HangingModuleSpec(
            id=module_id,
            type=module_type,
            width=width,
            align_with_module=align_with,
            positioning=Positioning(anchor=anchor, offset_y=offset_y),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_line() -> Callable[..., LayoutLine]:
    def _make(
        modules: list[ModuleSpec],
        length: float,
        line_id: str = "main_wall",
        direction: Direction = Direction(1, 0),
        origin_x: float = 0.0,
        origin_z: float = 0.0,
    ) -> LayoutLine:
        return LayoutLine(
            id=line_id,
            name=line_id,
            length=length,
            direction=direction,
            modules=tuple(modules),
            origin_x=origin_x,
            origin_z=origin_z,
        )

    return _make


@pytest.fixture
def make_config(dimensions: GlobalDimensions) -> Callable[..., KitchenConfig]:
    """Build a KitchenConfig around the canonical dimensions."""

    def _make(
        lines: list[LayoutLine],
        hanging: list[HangingModuleSpec] | None = None,
        policy: MismatchPolicy = MismatchPolicy.AUTO_FIX,
        gap: float = 0.0,
        min_width: float = 30,
        max_width: float = 120,
        min_handle_distance: float = 0.0,
        facade: str = "cabinet_blue.matte",
        countertop: str = "quartz_grey",
        handle: str = "minimalist_bar_black",
        dims: GlobalDimensions | None = None,
    ) -> KitchenConfig:
        return KitchenConfig(
            kitchen_id="test_kitchen",
            name="Test Kitchen",
            style="modern",
            settings=GlobalSettings(
                dimensions=dims or dimensions,
                rules=LayoutRules(mismatch_policy=policy, gap_between_modules=gap),
            ),
            constraints=GlobalConstraints(
                modules=ModuleConstraints(min_width=min_width, max_width=max_width),
                handles=HandleConstraints(min_distance_from_edge=min_handle_distance),
            ),
            default_materials=DefaultMaterials(
                facade=facade, countertop=countertop, handle=handle
            ),
            layout_lines=tuple(lines),
            hanging_modules=tuple(hanging or ()),
        )

    return _make


# =============================================================================
# Configuration documents
# =============================================================================


@pytest.fixture(scope="session")
def _template_documents() -> dict[str, dict[str, Any]]:
    manager = TemplateManager()
    return {name: manager.get_template_data(name) for name, _ in manager.list_templates()}


@pytest.fixture
def straight_kitchen_doc(_template_documents: dict[str, dict[str, Any]]) -> dict[str, Any]:
    """A fresh copy of the straight kitchen document, safe to mutate."""
    return copy.deepcopy(_template_documents["straight-kitchen"])


@pytest.fixture
def l_shaped_doc(_template_documents: dict[str, dict[str, Any]]) -> dict[str, Any]:
    return copy.deepcopy(_template_documents["l-shaped-kitchen"])


@pytest.fixture
def minimal_doc() -> dict[str, Any]:
    """Smallest valid document: one base module filling a 60 cm line."""
    return {
        "kitchenId": "minimal",
        "globalSettings": {
            "dimensions": {
                "height": 220,
                "countertopHeight": 90,
                "countertopDepth": 60,
                "countertopThickness": 2,
                "wallGap": 50,
                "baseCabinetHeight": 90,
                "wallCabinetHeight": 70,
                "wallCabinetDepth": 35,
                "plinthHeight": 12,
                "plinthDepth": 50,
            },
            "rules": {"mismatchPolicy": "reject", "gapBetweenModules": 0},
        },
        "globalConstraints": {"modules": {"minWidth": 30, "maxWidth": 120}},
        "defaultMaterials": {
            "facade": "cabinet_blue",
            "countertop": "concrete_grey",
            "handle": "minimalist_bar_black",
        },
        "layoutLines": [
            {
                "id": "main_wall",
                "length": 60,
                "direction": {"x": 1, "z": 0},
                "modules": [
                    {
                        "id": "base-1",
                        "type": "base",
                        "width": 60,
                        "positioning": {"anchor": "floor"},
                    }
                ],
            }
        ],
    }
