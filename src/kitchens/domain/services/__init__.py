"""Synthesis and validation services."""

from .adjacency import CornerNeighbor, corner_problem, find_corner_neighbor
from .anchor_resolver import AnchorResolver
from .carcass_builder import (
    CarcassBuild,
    CarcassGeometryBuilder,
    check_carcass_width,
    check_structure,
    module_type_of,
)
from .config_validator import ConfigValidator
from .handle_resolver import (
    HANDLE_OMITTED,
    HandleGeometry,
    HandleOmitted,
    HandlePlacementResolver,
)
from .layout_engine import LayoutEngine
from .line_resolver import (
    LayoutLineResolver,
    PlacedModule,
    ResolvedLine,
    naive_total_length,
    scale_factor_for,
)
from .material_resolver import MaterialResolver, slots_for

__all__ = [
    "AnchorResolver",
    "CarcassBuild",
    "CarcassGeometryBuilder",
    "ConfigValidator",
    "CornerNeighbor",
    "HANDLE_OMITTED",
    "HandleGeometry",
    "HandleOmitted",
    "HandlePlacementResolver",
    "LayoutEngine",
    "LayoutLineResolver",
    "MaterialResolver",
    "PlacedModule",
    "ResolvedLine",
    "check_carcass_width",
    "check_structure",
    "corner_problem",
    "find_corner_neighbor",
    "module_type_of",
    "naive_total_length",
    "scale_factor_for",
    "slots_for",
]
