"""Carcass geometry service: type dispatch plus fit-out and handle children.

The per-type builders in the components package produce the carcass box
and the parts only some types have (countertop, plinth). This service adds
what every module has: the fronts and shelves or drawers from the module's
structure (or the type's default template) and the handle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..components import BuildContext, CarcassRegistry, carcass_registry
from ..entities import (
    DEFAULT_CARCASS_THICKNESS,
    CarcassGeometry,
    DoorShelfStructure,
    DrawerStructure,
    GlobalDimensions,
    HandleConstraints,
    MaterialDefinition,
    RenderableModule,
    Structure,
)
from ..errors import StructureOverflowError, UnknownModuleTypeError
from ..value_objects import Dimensions, MaterialSlot, ModuleType, Rotation, Vector3
from .handle_resolver import HandleGeometry, HandlePlacementResolver

logger = logging.getLogger(__name__)

FRONT_THICKNESS = DEFAULT_CARCASS_THICKNESS
# Gap between adjacent fronts
FACADE_GAP = 0.05
MAX_DOORS = 2


def module_type_of(module_id: str, type_name: str) -> ModuleType:
    """Parse a configured type string.

    Raises:
        UnknownModuleTypeError: If the type is not a known module kind.
    """
    try:
        return ModuleType(type_name)
    except ValueError:
        raise UnknownModuleTypeError(module_id, type_name) from None


def check_carcass_width(module_id: str, geometry: CarcassGeometry) -> None:
    """Check that the carcass is wider than its two side panels.

    Raises:
        StructureOverflowError: If no inner width is left for shelves and
            drawer boxes.
    """
    sides = 2 * geometry.thickness
    if geometry.width <= sides + 1e-9:
        raise StructureOverflowError(
            module_id,
            sides,
            geometry.width,
            f"carcass width {geometry.width:.2f} cm leaves no room between "
            f"two {geometry.thickness:.2f} cm side panels",
        )


def check_structure(
    module_id: str, structure: Structure, geometry: CarcassGeometry
) -> None:
    """Check that a carcass and its fit-out are buildable.

    Raises:
        StructureOverflowError: On the first part that does not fit.
    """
    check_carcass_width(module_id, geometry)
    if isinstance(structure, DoorShelfStructure):
        if not 1 <= structure.door_count <= MAX_DOORS:
            raise StructureOverflowError(
                module_id,
                structure.door_count,
                MAX_DOORS,
                f"door count must be between 1 and {MAX_DOORS}, "
                f"got {structure.door_count}",
            )
        for position in structure.shelf_positions:
            if position <= 0 or position + geometry.thickness >= geometry.height:
                raise StructureOverflowError(
                    module_id,
                    position,
                    geometry.height,
                    f"shelf at {position:.2f} cm is outside the carcass "
                    f"height {geometry.height:.2f} cm",
                )
        return

    total = sum(structure.drawer_heights)
    if total > geometry.height + 1e-9:
        raise StructureOverflowError(
            module_id,
            total,
            geometry.height,
            f"drawers need {total:.2f} cm but the carcass is "
            f"{geometry.height:.2f} cm high",
        )
    if structure.internal_depth > geometry.depth + 1e-9:
        raise StructureOverflowError(
            module_id,
            structure.internal_depth,
            geometry.depth,
            f"drawer depth {structure.internal_depth:.2f} cm exceeds the "
            f"carcass depth {geometry.depth:.2f} cm",
        )


@dataclass(frozen=True)
class CarcassBuild:
    """Output of CarcassGeometryBuilder.build_carcass().

    Attributes:
        geometry: Carcass box and panel thicknesses.
        structure: The fit-out actually built (declared or default).
        children: All child nodes in the module's frame.
        handle: Resolved handle, or None when the module has none.
    """

    geometry: CarcassGeometry
    structure: Structure
    children: tuple[RenderableModule, ...]
    handle: HandleGeometry | None = None


class CarcassGeometryBuilder:
    """Expand a module into its carcass geometry and child sub-components."""

    def __init__(
        self,
        registry: CarcassRegistry | None = None,
        handle_resolver: HandlePlacementResolver | None = None,
    ) -> None:
        self._registry = registry or carcass_registry
        self._handles = handle_resolver or HandlePlacementResolver()

    def carcass_height(
        self, module_type: ModuleType, dimensions: GlobalDimensions
    ) -> float:
        return self._registry.for_type(module_type).carcass_height(dimensions)

    def carcass_depth(
        self, module_type: ModuleType, dimensions: GlobalDimensions
    ) -> float:
        return self._registry.for_type(module_type).carcass_depth(dimensions)

    def default_structure(
        self, module_type: ModuleType, carcass_height: float
    ) -> Structure:
        """Fit-out built when a module does not declare one."""
        return self._registry.for_type(module_type).default_structure(carcass_height)

    def build_carcass(
        self,
        context: BuildContext,
        handle_constraints: HandleConstraints | None = None,
    ) -> CarcassBuild:
        """Build one module's carcass and its children.

        Args:
            context: Effective width, global rules, anchor, requested
                structure and handle, resolved materials and, for corner
                modules, the neighbouring module.
            handle_constraints: Edge-distance constraint for the handle.

        Returns:
            CarcassBuild with geometry, structure and ordered children.

        Raises:
            CornerAdjacencyError: For a corner without a perpendicular neighbour.
            StructureOverflowError: If the fit-out does not fit.
            HandleTooCloseToEdgeError: If the handle cannot keep its clearance.
        """
        builder = self._registry.for_type(context.module_type)
        result = builder.build(context)
        geometry = result.geometry

        structure = context.structure or builder.default_structure(geometry.height)
        check_structure(context.module_id, structure, geometry)

        children = list(result.children)
        children.extend(self._fitout(context, geometry, structure))

        handle = self._handles.resolve_handle(
            context.module_id,
            geometry,
            context.anchor,
            context.handle,
            handle_constraints or HandleConstraints(),
            front_thickness=FRONT_THICKNESS,
        )
        resolved_handle = handle if isinstance(handle, HandleGeometry) else None
        if resolved_handle is not None:
            children.append(self._handle_part(context, resolved_handle))

        logger.debug(
            f"Built {context.module_type.value} '{context.module_id}' "
            f"({geometry.width:.2f} x {geometry.height:.2f} x {geometry.depth:.2f}) "
            f"with {len(children)} children"
        )
        return CarcassBuild(
            geometry=geometry,
            structure=structure,
            children=tuple(children),
            handle=resolved_handle,
        )

    def _fitout(
        self,
        context: BuildContext,
        geometry: CarcassGeometry,
        structure: Structure,
    ) -> list[RenderableModule]:
        facade = _slot(context.materials, MaterialSlot.FACADE)
        if isinstance(structure, DrawerStructure):
            return self._drawers(context.module_id, geometry, structure, facade)
        return self._doors(context.module_id, geometry, structure, facade) + (
            self._shelves(context.module_id, geometry, structure)
        )

    def _doors(
        self,
        module_id: str,
        geometry: CarcassGeometry,
        structure: DoorShelfStructure,
        facade: dict[str, MaterialDefinition],
    ) -> list[RenderableModule]:
        count = structure.door_count
        door_width = (geometry.width - (count - 1) * FACADE_GAP) / count
        return [
            RenderableModule(
                id=f"{module_id}-door-{index}",
                type="door",
                variant="left" if index == 0 else "right",
                position=Vector3(index * (door_width + FACADE_GAP), 0.0, geometry.depth),
                rotation=Rotation(),
                dimensions=Dimensions(
                    width=door_width, height=geometry.height, depth=FRONT_THICKNESS
                ),
                materials=dict(facade),
            )
            for index in range(count)
        ]

    def _shelves(
        self,
        module_id: str,
        geometry: CarcassGeometry,
        structure: DoorShelfStructure,
    ) -> list[RenderableModule]:
        inner_width = geometry.width - 2 * geometry.thickness
        inner_depth = geometry.depth - geometry.back_panel_thickness
        return [
            RenderableModule(
                id=f"{module_id}-shelf-{index}",
                type="shelf",
                variant="fixed",
                position=Vector3(
                    geometry.thickness, position, geometry.back_panel_thickness
                ),
                rotation=Rotation(),
                dimensions=Dimensions(
                    width=inner_width, height=geometry.thickness, depth=inner_depth
                ),
            )
            for index, position in enumerate(structure.shelf_positions)
        ]

    def _drawers(
        self,
        module_id: str,
        geometry: CarcassGeometry,
        structure: DrawerStructure,
        facade: dict[str, MaterialDefinition],
    ) -> list[RenderableModule]:
        drawers: list[RenderableModule] = []
        inner_width = geometry.width - 2 * geometry.thickness
        box_z = geometry.depth - structure.internal_depth
        cursor = 0.0
        for index, drawer_height in enumerate(structure.drawer_heights):
            drawer_id = f"{module_id}-drawer-{index}"
            front = RenderableModule(
                id=f"{drawer_id}-front",
                type="drawer-front",
                variant="slab",
                position=Vector3(-geometry.thickness, 0.0, structure.internal_depth),
                rotation=Rotation(),
                dimensions=Dimensions(
                    width=geometry.width,
                    height=max(drawer_height - FACADE_GAP, FACADE_GAP),
                    depth=FRONT_THICKNESS,
                ),
                materials=dict(facade),
            )
            drawers.append(
                RenderableModule(
                    id=drawer_id,
                    type="drawer",
                    variant="box",
                    position=Vector3(geometry.thickness, cursor, box_z),
                    rotation=Rotation(),
                    dimensions=Dimensions(
                        width=inner_width,
                        height=drawer_height,
                        depth=structure.internal_depth,
                    ),
                    children=(front,),
                )
            )
            cursor += drawer_height
        return drawers

    def _handle_part(
        self, context: BuildContext, handle: HandleGeometry
    ) -> RenderableModule:
        return RenderableModule(
            id=f"{context.module_id}-handle",
            type="handle",
            variant=handle.orientation.value,
            position=handle.origin,
            rotation=Rotation(),
            dimensions=handle.dimensions,
            materials=_slot(context.materials, MaterialSlot.HANDLE),
        )


def _slot(
    materials: dict[str, MaterialDefinition], slot: MaterialSlot
) -> dict[str, MaterialDefinition]:
    if slot.value in materials:
        return {slot.value: materials[slot.value]}
    return {}
