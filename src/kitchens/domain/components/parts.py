"""Shared child parts emitted by several carcass builders."""

from __future__ import annotations

from ..entities import RenderableModule
from ..value_objects import Anchor, Dimensions, MaterialSlot, Rotation, Vector3
from .context import BuildContext


def countertop_part(context: BuildContext, carcass_height: float) -> RenderableModule:
    """Countertop slab resting on the top face of the carcass.

    The slab spans the module width and the countertop depth.
    """
    dims = context.dimensions
    materials = {}
    if MaterialSlot.COUNTERTOP.value in context.materials:
        materials[MaterialSlot.COUNTERTOP.value] = context.materials[
            MaterialSlot.COUNTERTOP.value
        ]
    return RenderableModule(
        id=f"{context.module_id}-countertop",
        type="countertop",
        variant="slab",
        position=Vector3(0.0, carcass_height, 0.0),
        rotation=Rotation(),
        dimensions=Dimensions(
            width=context.width,
            height=dims.countertop_thickness,
            depth=dims.countertop_depth,
        ),
        materials=materials,
    )


def plinth_part(context: BuildContext) -> RenderableModule | None:
    """Recessed plinth strip below a floor-anchored carcass.

    Returns None when the module is not floor-anchored or the plinth has no
    height. The strip is measured from the back, so its front face sits
    behind the carcass front.
    """
    dims = context.dimensions
    if context.anchor is not Anchor.FLOOR or dims.plinth_height <= 0:
        return None
    materials = {}
    if MaterialSlot.FACADE.value in context.materials:
        materials[MaterialSlot.FACADE.value] = context.materials[
            MaterialSlot.FACADE.value
        ]
    return RenderableModule(
        id=f"{context.module_id}-plinth",
        type="plinth",
        variant="recessed",
        position=Vector3(0.0, -dims.plinth_height, 0.0),
        rotation=Rotation(),
        dimensions=Dimensions(
            width=context.width,
            height=dims.plinth_height,
            depth=dims.plinth_depth,
        ),
        materials=materials,
    )
