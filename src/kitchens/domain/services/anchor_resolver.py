"""Vertical placement of modules from their anchor and the global rules.

The resolver is a pure lookup keyed on the anchor kind:

- floor:   y = plinthHeight + offset
- wall:    y = overallHeight - wallCabinetHeight - wallGap + offset
- ceiling: y = overallHeight - offset (the module hangs down from this line)

No clamping is done here. A module placed outside the room is a design
error for the room-bounds check at render time, not for this resolver.
"""

from __future__ import annotations

from ..entities import GlobalDimensions, Positioning
from ..value_objects import Anchor


class AnchorResolver:
    """Convert an anchor spec plus global dimensions into an absolute height."""

    def resolve_vertical(
        self, positioning: Positioning, dimensions: GlobalDimensions
    ) -> float:
        """Resolve the absolute vertical reference of a module.

        For floor and wall anchors the value is the module's bottom edge.
        For the ceiling anchor it is the top edge the module hangs from;
        callers subtract the module height to get its bottom edge.

        Args:
            positioning: Anchor kind and vertical offset.
            dimensions: Global dimensional rules.

        Returns:
            Absolute height in centimetres.
        """
        anchor = positioning.anchor
        offset = positioning.offset_y
        if anchor is Anchor.FLOOR:
            return dimensions.plinth_height + offset
        if anchor is Anchor.WALL:
            return (
                dimensions.height
                - dimensions.wall_cabinet_height
                - dimensions.wall_gap
                + offset
            )
        if anchor is Anchor.CEILING:
            return dimensions.height - offset
        raise ValueError(f"Unsupported anchor: {anchor!r}")

    def hangs_from_top(self, positioning: Positioning) -> bool:
        """True when resolve_vertical() returns a top edge rather than a bottom edge."""
        return positioning.anchor is Anchor.CEILING
