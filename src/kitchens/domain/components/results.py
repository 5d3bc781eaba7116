"""Result type for carcass builders."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..entities import CarcassGeometry, RenderableModule


@dataclass(frozen=True)
class CarcassResult:
    """Geometry plus the type-specific children a builder emits.

    Type-specific children are the parts that only some module kinds have
    (countertop slab, plinth). Fronts, shelves and handles are generated
    from the fit-out templates by the carcass geometry service.

    Attributes:
        geometry: The carcass bounding box and panel thicknesses.
        children: Type-specific child nodes in parent-relative coordinates.
    """

    geometry: CarcassGeometry
    children: tuple[RenderableModule, ...] = field(default_factory=tuple)
