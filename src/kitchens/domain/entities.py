"""Domain entities for kitchen configurations and synthesized modules.

The configuration side (KitchenConfig and everything it owns) is an
immutable description produced by a user or agent. The output side
(RenderableModule) is produced only by the layout engine and is replaced
wholesale on every synthesis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Union

from .value_objects import (
    Anchor,
    Dimensions,
    Direction,
    HandleOrientation,
    HandlePlacementType,
    MaterialSlot,
    MismatchPolicy,
    Rotation,
    StructureKind,
    Vector3,
)

DEFAULT_CARCASS_THICKNESS = 1.8
DEFAULT_BACK_PANEL_THICKNESS = 0.5


# --- Global settings ---------------------------------------------------------


@dataclass(frozen=True)
class GlobalDimensions:
    """Room-wide dimensional rules.

    Attributes:
        height: Overall room (floor to ceiling) height.
        countertop_height: Finished countertop height above the floor.
        countertop_depth: Countertop depth, also the base carcass depth.
        countertop_thickness: Countertop slab thickness.
        wall_gap: Clearance between the wall cabinets and the ceiling line.
        base_cabinet_height: Base cabinet height including the countertop.
        wall_cabinet_height: Wall cabinet carcass height.
        wall_cabinet_depth: Wall cabinet carcass depth.
        plinth_height: Height of the recessed plinth strip.
        plinth_depth: Depth of the plinth strip measured from the back.
    """

    height: float
    countertop_height: float
    countertop_depth: float
    countertop_thickness: float
    wall_gap: float
    base_cabinet_height: float
    wall_cabinet_height: float
    wall_cabinet_depth: float
    plinth_height: float
    plinth_depth: float


@dataclass(frozen=True)
class LayoutRules:
    """Line-level rules: mismatch policy and inter-module gap."""

    mismatch_policy: MismatchPolicy = MismatchPolicy.AUTO_FIX
    gap_between_modules: float = 0.0


@dataclass(frozen=True)
class GlobalSettings:
    dimensions: GlobalDimensions
    rules: LayoutRules = field(default_factory=LayoutRules)


@dataclass(frozen=True)
class ModuleConstraints:
    min_width: float
    max_width: float


@dataclass(frozen=True)
class HandleConstraints:
    min_distance_from_edge: float = 0.0


@dataclass(frozen=True)
class GlobalConstraints:
    modules: ModuleConstraints
    handles: HandleConstraints = field(default_factory=HandleConstraints)


@dataclass(frozen=True)
class DefaultMaterials:
    facade: str
    countertop: str
    handle: str

    def get(self, slot: MaterialSlot) -> str:
        return getattr(self, slot.value)


@dataclass(frozen=True)
class MaterialOverrides:
    facade: str | None = None
    countertop: str | None = None
    handle: str | None = None

    def get(self, slot: MaterialSlot) -> str | None:
        return getattr(self, slot.value)


# --- Module specifications ---------------------------------------------------


@dataclass(frozen=True)
class Positioning:
    """Anchor plane plus vertical offset from it."""

    anchor: Anchor
    offset_y: float = 0.0


@dataclass(frozen=True)
class HandleSpec:
    """Requested handle placement.

    Attributes:
        placement: Placement template (centered or offset from an edge).
        orientation: Bar orientation.
        offset_from_edge: Overrides the offset template distance, measured
            from the top edge (floor/tall modules) or the bottom edge
            (wall/ceiling modules). Only used by offset placement.
    """

    placement: HandlePlacementType
    orientation: HandleOrientation
    offset_from_edge: float | None = None


@dataclass(frozen=True)
class CarcassSpec:
    thickness: float = DEFAULT_CARCASS_THICKNESS
    back_panel_thickness: float = DEFAULT_BACK_PANEL_THICKNESS


@dataclass(frozen=True)
class DoorShelfStructure:
    """Door fronts with shelves behind them."""

    door_count: int = 1
    shelf_positions: tuple[float, ...] = ()
    kind: ClassVar[StructureKind] = StructureKind.DOOR_AND_SHELF

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "doorCount": self.door_count,
            "shelves": [{"positionFromBottom": p} for p in self.shelf_positions],
        }


@dataclass(frozen=True)
class DrawerStructure:
    """A stack of drawers, listed bottom to top."""

    drawer_heights: tuple[float, ...]
    internal_depth: float
    kind: ClassVar[StructureKind] = StructureKind.DRAWERS

    @property
    def count(self) -> int:
        return len(self.drawer_heights)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "count": self.count,
            "drawerHeights": list(self.drawer_heights),
            "internalDepth": self.internal_depth,
        }


Structure = Union[DoorShelfStructure, DrawerStructure]


@dataclass(frozen=True)
class ModuleSpec:
    """One cabinet instance on a layout line.

    The type is kept as the raw string from the configuration; the validator
    reports unknown types and the engine refuses to build them.
    """

    id: str
    type: str
    width: float
    positioning: Positioning
    variant: str = "default"
    handle: HandleSpec | None = None
    material_overrides: MaterialOverrides = field(default_factory=MaterialOverrides)
    structure: Structure | None = None
    carcass: CarcassSpec = field(default_factory=CarcassSpec)


@dataclass(frozen=True)
class HangingModuleSpec:
    """A wall-hung module aligned with a module on a layout line."""

    id: str
    type: str
    width: float | Literal["auto"]
    align_with_module: str
    positioning: Positioning = field(
        default_factory=lambda: Positioning(anchor=Anchor.WALL)
    )
    variant: str = "default"
    handle: HandleSpec | None = None
    material_overrides: MaterialOverrides = field(default_factory=MaterialOverrides)
    structure: Structure | None = None
    carcass: CarcassSpec = field(default_factory=CarcassSpec)


@dataclass(frozen=True)
class LayoutLine:
    """A straight run along which modules are placed in declared order."""

    id: str
    name: str
    length: float
    direction: Direction
    modules: tuple[ModuleSpec, ...] = ()
    origin_x: float = 0.0
    origin_z: float = 0.0


@dataclass(frozen=True)
class KitchenConfig:
    """Root kitchen description. Never mutated by the core."""

    kitchen_id: str
    name: str
    style: str
    settings: GlobalSettings
    constraints: GlobalConstraints
    default_materials: DefaultMaterials
    layout_lines: tuple[LayoutLine, ...] = ()
    hanging_modules: tuple[HangingModuleSpec, ...] = ()

    @property
    def dimensions(self) -> GlobalDimensions:
        return self.settings.dimensions

    @property
    def rules(self) -> LayoutRules:
        return self.settings.rules

    def find_module(self, module_id: str) -> ModuleSpec | None:
        """Find a layout-line module by id."""
        for line in self.layout_lines:
            for module in line.modules:
                if module.id == module_id:
                    return module
        return None


# --- Synthesis output --------------------------------------------------------


@dataclass(frozen=True)
class CornerEnvelope:
    """L-shaped footprint of a corner module.

    Attributes:
        primary_extent: Leg length along the module's own line.
        secondary_extent: Leg length along the neighbouring line.
        primary_axis: Unit direction of the module's line.
        secondary_axis: Unit direction of the neighbouring line.
    """

    primary_extent: float
    secondary_extent: float
    primary_axis: Direction
    secondary_axis: Direction

    @property
    def world_extent_x(self) -> float:
        return abs(self.primary_axis.x * self.primary_extent) + abs(
            self.secondary_axis.x * self.secondary_extent
        )

    @property
    def world_extent_z(self) -> float:
        return abs(self.primary_axis.z * self.primary_extent) + abs(
            self.secondary_axis.z * self.secondary_extent
        )


@dataclass(frozen=True)
class CarcassGeometry:
    """Structural box of a module, excluding countertop, fronts and handle."""

    width: float
    height: float
    depth: float
    thickness: float = DEFAULT_CARCASS_THICKNESS
    back_panel_thickness: float = DEFAULT_BACK_PANEL_THICKNESS
    envelope: CornerEnvelope | None = None

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(width=self.width, height=self.height, depth=self.depth)


@dataclass(frozen=True)
class MaterialDefinition:
    """Visual material definition from the material catalog."""

    id: str
    type: str
    properties: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, **self.properties}


@dataclass(frozen=True)
class RenderableModule:
    """A placed, dimensioned node of the synthesized scene graph.

    Top-level modules carry absolute positions. Each child's position is
    relative to its parent's frame (x along the line, y up, z towards the
    front). Every position is the bottom-back-left corner of the node's
    bounding box.
    """

    id: str
    type: str
    variant: str
    position: Vector3
    rotation: Rotation
    dimensions: Dimensions
    materials: dict[str, MaterialDefinition] = field(default_factory=dict)
    carcass: CarcassGeometry | None = None
    structure: Structure | None = None
    children: tuple[RenderableModule, ...] = ()

    def find_child(self, child_type: str) -> RenderableModule | None:
        """Return the first direct child of the given type."""
        for child in self.children:
            if child.type == child_type:
                return child
        return None

    def children_of_type(self, child_type: str) -> list[RenderableModule]:
        return [child for child in self.children if child.type == child_type]

    @property
    def depth_of_tree(self) -> int:
        """Number of levels in this subtree, counting this node."""
        if not self.children:
            return 1
        return 1 + max(child.depth_of_tree for child in self.children)
