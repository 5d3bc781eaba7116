"""Carcass builders, one per module type.

Importing this package registers every builder with the carcass registry.
"""

from .base import BaseCabinetBuilder, SinkCabinetBuilder
from .context import BuildContext, NeighborContext
from .corner import CornerCabinetBuilder
from .protocol import CarcassBuilder
from .registry import CarcassRegistry, carcass_registry
from .results import CarcassResult
from .tall import TallCabinetBuilder
from .wall import WallCabinetBuilder

__all__ = [
    "BaseCabinetBuilder",
    "BuildContext",
    "CarcassBuilder",
    "CarcassRegistry",
    "CarcassResult",
    "CornerCabinetBuilder",
    "NeighborContext",
    "SinkCabinetBuilder",
    "TallCabinetBuilder",
    "WallCabinetBuilder",
    "carcass_registry",
]
