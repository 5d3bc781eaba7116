"""Base-level cabinet builders: standard base units and sink units.

Base units sit on the plinth and carry the countertop. The carcass stops
below the slab, so its height is the base cabinet height minus the
countertop thickness, and its depth is the countertop depth.
"""

from __future__ import annotations

from ..entities import (
    CarcassGeometry,
    DoorShelfStructure,
    GlobalDimensions,
    RenderableModule,
    Structure,
)
from .context import BuildContext
from .parts import countertop_part, plinth_part
from .registry import carcass_registry
from .results import CarcassResult


@carcass_registry.register("carcass.base")
class BaseCabinetBuilder:
    """Floor-standing cabinet under the countertop.

    This builder generates:
    - Carcass of height baseCabinetHeight - countertopThickness
    - Exactly one countertop slab child on the carcass top face
    - A recessed plinth child when floor-anchored
    """

    def carcass_height(self, dimensions: GlobalDimensions) -> float:
        return dimensions.base_cabinet_height - dimensions.countertop_thickness

    def carcass_depth(self, dimensions: GlobalDimensions) -> float:
        return dimensions.countertop_depth

    def default_structure(self, carcass_height: float) -> Structure:
        return DoorShelfStructure(door_count=1, shelf_positions=(carcass_height / 2,))

    def build(self, context: BuildContext) -> CarcassResult:
        height = self.carcass_height(context.dimensions)
        geometry = CarcassGeometry(
            width=context.width,
            height=height,
            depth=self.carcass_depth(context.dimensions),
            thickness=context.carcass_spec.thickness,
            back_panel_thickness=context.carcass_spec.back_panel_thickness,
        )
        children: list[RenderableModule] = [countertop_part(context, height)]
        plinth = plinth_part(context)
        if plinth is not None:
            children.append(plinth)
        return CarcassResult(geometry=geometry, children=tuple(children))


@carcass_registry.register("carcass.sink")
class SinkCabinetBuilder(BaseCabinetBuilder):
    """Base cabinet housing a sink: double doors and no shelves by default."""

    def default_structure(self, carcass_height: float) -> Structure:
        return DoorShelfStructure(door_count=2)
