"""Tall (pantry) cabinet builder."""

from __future__ import annotations

from ..entities import (
    CarcassGeometry,
    DoorShelfStructure,
    GlobalDimensions,
    RenderableModule,
    Structure,
)
from .context import BuildContext
from .parts import plinth_part
from .registry import carcass_registry
from .results import CarcassResult

# Shelves in the default pantry template, evenly spaced
DEFAULT_TALL_SHELVES = 4


@carcass_registry.register("carcass.tall")
class TallCabinetBuilder:
    """Full-height cabinet running continuously from the plinth to the top.

    Height is the overall height minus the plinth height, so a floor-anchored
    tall unit ends flush with the room height. Depth follows the countertop
    so the unit lines up with adjacent base cabinets.
    """

    def carcass_height(self, dimensions: GlobalDimensions) -> float:
        return dimensions.height - dimensions.plinth_height

    def carcass_depth(self, dimensions: GlobalDimensions) -> float:
        return dimensions.countertop_depth

    def default_structure(self, carcass_height: float) -> Structure:
        step = carcass_height / (DEFAULT_TALL_SHELVES + 1)
        return DoorShelfStructure(
            door_count=2,
            shelf_positions=tuple(step * i for i in range(1, DEFAULT_TALL_SHELVES + 1)),
        )

    def build(self, context: BuildContext) -> CarcassResult:
        geometry = CarcassGeometry(
            width=context.width,
            height=self.carcass_height(context.dimensions),
            depth=self.carcass_depth(context.dimensions),
            thickness=context.carcass_spec.thickness,
            back_panel_thickness=context.carcass_spec.back_panel_thickness,
        )
        children: list[RenderableModule] = []
        plinth = plinth_part(context)
        if plinth is not None:
            children.append(plinth)
        return CarcassResult(geometry=geometry, children=tuple(children))
