"""Handle placement on a module's front face.

Handle positions are computed in the module's own frame: x along the module
width, y up from the carcass bottom, z towards the front. Clearance is the
distance from the handle bar's bounding box to the nearest module edge,
which also bounds the distance from the handle centre to that edge.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..entities import CarcassGeometry, HandleConstraints, HandleSpec
from ..errors import HandleTooCloseToEdgeError
from ..value_objects import (
    Anchor,
    Dimensions,
    HandleOrientation,
    HandlePlacementType,
    Vector3,
)

HANDLE_LENGTH = 15.0
HANDLE_THICKNESS = 1.5
HANDLE_PROJECTION = 3.0
# Height of a centred handle as a fraction of the carcass height
CENTERED_HEIGHT_RATIO = 0.5
# Template distance of an offset handle from its reference edge
OFFSET_FROM_EDGE = 5.0


@dataclass(frozen=True)
class HandleGeometry:
    """Resolved handle bar.

    Attributes:
        center: Centre of the bar on the front face, module frame.
        dimensions: Bar bounding box (width along x, height along y,
            depth is the projection from the front).
        orientation: Bar orientation.
        horizontal_clearance: Gap between the bar and the nearer side edge.
        vertical_clearance: Gap between the bar and the nearer top/bottom edge.
    """

    center: Vector3
    dimensions: Dimensions
    orientation: HandleOrientation
    horizontal_clearance: float
    vertical_clearance: float

    @property
    def origin(self) -> Vector3:
        """Bottom-back-left corner of the bar's bounding box."""
        return Vector3(
            self.center.x - self.dimensions.width / 2,
            self.center.y - self.dimensions.height / 2,
            self.center.z,
        )

    @property
    def clearance(self) -> float:
        return min(self.horizontal_clearance, self.vertical_clearance)


@dataclass(frozen=True)
class HandleOmitted:
    """Returned when a module declares no handle."""


HANDLE_OMITTED = HandleOmitted()


def _bar_extents(orientation: HandleOrientation) -> tuple[float, float]:
    if orientation is HandleOrientation.HORIZONTAL:
        return HANDLE_LENGTH, HANDLE_THICKNESS
    return HANDLE_THICKNESS, HANDLE_LENGTH


class HandlePlacementResolver:
    """Compute handle geometry and enforce the edge-distance constraint.

    A horizontal shift could collide with the adjacent module, so the
    resolver never moves a handle sideways: a module too narrow for the
    template fails. Offset handles may be moved vertically away from their
    reference edge until they honour the minimum distance.
    """

    def resolve_handle(
        self,
        module_id: str,
        geometry: CarcassGeometry,
        anchor: Anchor,
        handle: HandleSpec | None,
        constraints: HandleConstraints,
        front_thickness: float = 0.0,
    ) -> HandleGeometry | HandleOmitted:
        """Resolve the handle for one module.

        Args:
            module_id: Id of the module, used in error reports.
            geometry: The module's carcass geometry.
            anchor: Anchor of the module; offset handles are measured from
                the top edge for floor anchors and from the bottom edge
                otherwise.
            handle: Requested handle, or None.
            constraints: Minimum distance from the module edges.
            front_thickness: Thickness of the fronts the handle is mounted on.

        Returns:
            HandleGeometry, or HANDLE_OMITTED when no handle is declared.

        Raises:
            HandleTooCloseToEdgeError: If the handle cannot keep its clearance.
        """
        if handle is None:
            return HANDLE_OMITTED

        required = constraints.min_distance_from_edge
        bar_x, bar_y = _bar_extents(handle.orientation)
        width, height = geometry.width, geometry.height

        center_x = width / 2
        horizontal = center_x - bar_x / 2
        if horizontal < required:
            raise HandleTooCloseToEdgeError(module_id, horizontal, required, "side")

        if handle.placement is HandlePlacementType.CENTERED:
            center_y = height * CENTERED_HEIGHT_RATIO
        else:
            edge_offset = (
                handle.offset_from_edge
                if handle.offset_from_edge is not None
                else OFFSET_FROM_EDGE
            )
            edge_offset = max(edge_offset, required)
            if anchor is Anchor.FLOOR:
                center_y = height - edge_offset - bar_y / 2
            else:
                center_y = edge_offset + bar_y / 2

        to_bottom = center_y - bar_y / 2
        to_top = height - (center_y + bar_y / 2)
        vertical = min(to_bottom, to_top)
        if vertical < required:
            edge = "bottom" if to_bottom < to_top else "top"
            raise HandleTooCloseToEdgeError(module_id, vertical, required, edge)

        return HandleGeometry(
            center=Vector3(center_x, center_y, geometry.depth + front_thickness),
            dimensions=Dimensions(width=bar_x, height=bar_y, depth=HANDLE_PROJECTION),
            orientation=handle.orientation,
            horizontal_clearance=horizontal,
            vertical_clearance=vertical,
        )
