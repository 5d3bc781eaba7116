"""Core geometry and classification value objects for kitchen layouts.

All lengths are in centimetres. The layout frame is Y-up: x and z span the
floor plane, y is height above the floor.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class ModuleType(str, Enum):
    """Module kinds the synthesis engine knows how to build."""

    BASE = "base"
    SINK = "sink"
    WALL = "wall"
    TALL = "tall"
    CORNER = "corner"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Anchor(str, Enum):
    """Reference plane a module's vertical position is measured from."""

    FLOOR = "floor"
    WALL = "wall"
    CEILING = "ceiling"


class MismatchPolicy(str, Enum):
    """How a line reconciles its module widths with its declared length.

    - AUTO_FIX: widths and gaps are scaled uniformly to fill the line exactly
    - REJECT: overflowing lines are an error, slack is left unused
    """

    AUTO_FIX = "auto_fix"
    REJECT = "reject"


class HandlePlacementType(str, Enum):
    """Handle placement templates."""

    CENTERED = "centered"
    OFFSET = "offset"


class HandleOrientation(str, Enum):
    """Handle bar orientation on the module front."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class StructureKind(str, Enum):
    """Internal fit-out of a module."""

    DOOR_AND_SHELF = "door-and-shelf"
    DRAWERS = "drawers"


class MaterialSlot(str, Enum):
    """Material slots a module can reference in the catalog."""

    FACADE = "facade"
    COUNTERTOP = "countertop"
    HANDLE = "handle"


@dataclass(frozen=True)
class Vector3:
    """3D point or offset in the layout frame.

    Unlike Dimensions, components may be negative: children can sit below
    their parent's origin (plinths) and lines can run towards -x or -z.
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def is_close(self, other: Vector3, tolerance: float = 1e-9) -> bool:
        """Check component-wise equality within an absolute tolerance."""
        return (
            abs(self.x - other.x) <= tolerance
            and abs(self.y - other.y) <= tolerance
            and abs(self.z - other.z) <= tolerance
        )


@dataclass(frozen=True)
class Rotation:
    """Euler rotation in degrees."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Dimensions:
    """Immutable bounding-box dimensions in centimetres."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def volume(self) -> float:
        """Bounding-box volume in cubic centimetres."""
        return self.width * self.height * self.depth


@dataclass(frozen=True)
class Direction:
    """Direction of a layout line on the floor plane (x, z)."""

    x: float
    z: float

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.z)

    @property
    def is_degenerate(self) -> bool:
        """True when the vector cannot be normalized."""
        return self.length <= 1e-12

    def unit(self) -> Direction:
        """Return the normalized direction.

        Raises:
            ValueError: If the direction is the zero vector.
        """
        length = self.length
        if length <= 1e-12:
            raise ValueError("Direction vector must be non-zero")
        return Direction(self.x / length, self.z / length)

    def dot(self, other: Direction) -> float:
        return self.x * other.x + self.z * other.z

    def yaw_degrees(self) -> float:
        """Rotation about the Y axis that maps +x onto this direction.

        (1, 0) -> 0, (0, -1) -> 90, (-1, 0) -> 180, (0, 1) -> 270.
        """
        unit = self.unit()
        angle = math.degrees(math.atan2(-unit.z, unit.x)) % 360.0
        # atan2 returns -0.0 for some inputs; normalize so output is stable
        return 0.0 if abs(angle) < 1e-12 or abs(angle - 360.0) < 1e-12 else angle
