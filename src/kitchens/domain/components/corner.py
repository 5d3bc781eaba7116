"""Corner cabinet builder.

A corner module joins two perpendicular layout lines. Its footprint is an
L-shaped envelope with one leg along its own line (the module width) and
one leg along the neighbouring line (the neighbouring module's carcass
depth, so the corner's front lines up with the adjoining run).

This is the only builder whose geometry depends on adjacency; the engine
resolves the neighbouring module and passes it in the build context.
"""

from __future__ import annotations

from ..entities import (
    CarcassGeometry,
    CornerEnvelope,
    DoorShelfStructure,
    GlobalDimensions,
    RenderableModule,
    Structure,
)
from ..errors import CornerAdjacencyError
from .context import BuildContext
from .parts import countertop_part, plinth_part
from .registry import carcass_registry
from .results import CarcassResult

# Maximum |cos| between the two line directions still treated as perpendicular
PERPENDICULAR_TOLERANCE = 1e-6


@carcass_registry.register("carcass.corner")
class CornerCabinetBuilder:
    """Base-level corner cabinet spanning two perpendicular lines.

    This builder generates:
    - Carcass at base height whose local depth covers both legs
    - A CornerEnvelope with both leg extents and axes
    - A countertop slab over the primary leg and a plinth when floor-anchored
    """

    def carcass_height(self, dimensions: GlobalDimensions) -> float:
        return dimensions.base_cabinet_height - dimensions.countertop_thickness

    def carcass_depth(self, dimensions: GlobalDimensions) -> float:
        return dimensions.countertop_depth

    def default_structure(self, carcass_height: float) -> Structure:
        return DoorShelfStructure(door_count=1, shelf_positions=(carcass_height / 2,))

    def build(self, context: BuildContext) -> CarcassResult:
        neighbor = context.neighbor
        if neighbor is None:
            raise CornerAdjacencyError(
                context.module_id, "no adjoining line to turn the corner onto"
            )
        primary_axis = context.line_direction.unit()
        secondary_axis = neighbor.direction.unit()
        if abs(primary_axis.dot(secondary_axis)) > PERPENDICULAR_TOLERANCE:
            raise CornerAdjacencyError(
                context.module_id,
                f"line direction is not perpendicular to line of '{neighbor.module_id}'",
            )

        envelope = CornerEnvelope(
            primary_extent=context.width,
            secondary_extent=neighbor.depth,
            primary_axis=primary_axis,
            secondary_axis=secondary_axis,
        )
        height = self.carcass_height(context.dimensions)
        geometry = CarcassGeometry(
            width=context.width,
            height=height,
            depth=max(self.carcass_depth(context.dimensions), neighbor.depth),
            thickness=context.carcass_spec.thickness,
            back_panel_thickness=context.carcass_spec.back_panel_thickness,
            envelope=envelope,
        )
        children: list[RenderableModule] = [countertop_part(context, height)]
        plinth = plinth_part(context)
        if plinth is not None:
            children.append(plinth)
        return CarcassResult(geometry=geometry, children=tuple(children))
