"""Wall cabinet builder."""

from __future__ import annotations

from ..entities import (
    CarcassGeometry,
    DoorShelfStructure,
    GlobalDimensions,
    Structure,
)
from .context import BuildContext
from .registry import carcass_registry
from .results import CarcassResult


@carcass_registry.register("carcass.wall")
class WallCabinetBuilder:
    """Wall-hung cabinet: wall cabinet height and depth, no countertop."""

    def carcass_height(self, dimensions: GlobalDimensions) -> float:
        return dimensions.wall_cabinet_height

    def carcass_depth(self, dimensions: GlobalDimensions) -> float:
        return dimensions.wall_cabinet_depth

    def default_structure(self, carcass_height: float) -> Structure:
        return DoorShelfStructure(door_count=1, shelf_positions=(carcass_height / 2,))

    def build(self, context: BuildContext) -> CarcassResult:
        geometry = CarcassGeometry(
            width=context.width,
            height=self.carcass_height(context.dimensions),
            depth=self.carcass_depth(context.dimensions),
            thickness=context.carcass_spec.thickness,
            back_panel_thickness=context.carcass_spec.back_panel_thickness,
        )
        return CarcassResult(geometry=geometry)
