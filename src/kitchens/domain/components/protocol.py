"""Protocol definition for carcass builders."""

from __future__ import annotations

from typing import Protocol

from ..entities import GlobalDimensions, Structure
from .context import BuildContext
from .results import CarcassResult


class CarcassBuilder(Protocol):
    """Protocol for per-type carcass builders.

    Each module type has exactly one builder, registered with the
    CarcassRegistry under 'carcass.<type>'. Builders are deterministic and
    side-effect free: the same context always yields the same result.

    Example:
        @carcass_registry.register("carcass.wall")
        class WallCabinetBuilder:
            def carcass_height(self, dimensions: GlobalDimensions) -> float:
                return dimensions.wall_cabinet_height

            def carcass_depth(self, dimensions: GlobalDimensions) -> float:
                return dimensions.wall_cabinet_depth

            def default_structure(self, carcass_height: float) -> Structure:
                return DoorShelfStructure(door_count=1)

            def build(self, context: BuildContext) -> CarcassResult:
                ...
    """

    def carcass_height(self, dimensions: GlobalDimensions) -> float:
        """Return the carcass height this type derives from the global rules."""
        ...

    def carcass_depth(self, dimensions: GlobalDimensions) -> float:
        """Return the carcass depth this type derives from the global rules.

        Also used to size a corner's secondary leg when this type is the
        corner's neighbour.
        """
        ...

    def default_structure(self, carcass_height: float) -> Structure:
        """Return the fit-out template used when the module declares none."""
        ...

    def build(self, context: BuildContext) -> CarcassResult:
        """Build the carcass geometry and type-specific children.

        Args:
            context: Effective width, global rules, anchor and adjacency.

        Returns:
            CarcassResult with geometry and children in parent coordinates.
        """
        ...
