"""Build context handed to carcass builders."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..entities import (
    CarcassSpec,
    GlobalDimensions,
    HandleSpec,
    MaterialDefinition,
    Structure,
)
from ..value_objects import Anchor, Direction, ModuleType


@dataclass(frozen=True)
class NeighborContext:
    """The resolved module on the adjoining line of a corner.

    Attributes:
        module_id: Id of the neighbouring module.
        module_type: Its resolved type.
        direction: Unit direction of the neighbouring line.
        depth: Carcass depth of the neighbouring module.
    """

    module_id: str
    module_type: ModuleType
    direction: Direction
    depth: float


@dataclass(frozen=True)
class BuildContext:
    """Immutable context for building one module's carcass.

    Provides everything a builder needs without exposing the rest of the
    configuration: the effective width after line resolution, the global
    dimensional rules, the anchor, the line direction and, for corners only,
    the neighbouring module.

    Attributes:
        module_id: Id of the module being built (children derive their ids).
        module_type: Resolved module type.
        variant: Catalog variant name.
        width: Effective width after line resolution.
        dimensions: Global dimensional rules.
        anchor: Anchor plane of the module.
        line_direction: Unit direction of the module's line.
        carcass_spec: Panel thicknesses.
        structure: Requested fit-out, or None for the per-type default.
        handle: Requested handle, or None.
        materials: Resolved materials by slot name.
        neighbor: Adjoining module, supplied only for corner modules.
    """

    module_id: str
    module_type: ModuleType
    width: float
    dimensions: GlobalDimensions
    anchor: Anchor
    line_direction: Direction = Direction(1.0, 0.0)
    variant: str = "default"
    carcass_spec: CarcassSpec = field(default_factory=CarcassSpec)
    structure: Structure | None = None
    handle: HandleSpec | None = None
    materials: dict[str, MaterialDefinition] = field(default_factory=dict)
    neighbor: NeighborContext | None = None
