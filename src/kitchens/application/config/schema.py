"""Pydantic models for kitchen configuration documents.

Documents use camelCase keys. Every model accepts both the camelCase alias
and the snake_case field name, and rejects unknown keys so typos surface
as errors instead of being silently ignored.

Parse-time checks cover shape and types only, plus the rules that make a
document meaningless (non-positive dimensions, inverted bounds, unknown
enum values). Cross-field feasibility (widths, line lengths, materials,
adjacency) is left to the domain ConfigValidator, which reports every
problem at once.
"""

from typing import Annotated, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from kitchens.domain.entities import (
    DEFAULT_BACK_PANEL_THICKNESS,
    DEFAULT_CARCASS_THICKNESS,
)
from kitchens.domain.value_objects import (
    Anchor,
    HandleOrientation,
    HandlePlacementType,
    MismatchPolicy,
)


class CamelModel(BaseModel):
    """Base model with camelCase aliases and strict keys."""

    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )


# =============================================================================
# Global settings
# =============================================================================


class DimensionsSchema(CamelModel):
    """Global dimensional rules, all in centimetres."""

    height: float = Field(..., gt=0, description="Overall room height")
    countertop_height: float = Field(..., gt=0)
    countertop_depth: float = Field(..., gt=0)
    countertop_thickness: float = Field(..., gt=0)
    wall_gap: float = Field(..., gt=0)
    base_cabinet_height: float = Field(..., gt=0)
    wall_cabinet_height: float = Field(..., gt=0)
    wall_cabinet_depth: float = Field(..., gt=0)
    plinth_height: float = Field(..., gt=0)
    plinth_depth: float = Field(..., gt=0)

    @model_validator(mode="after")
    def validate_countertop_below_ceiling(self) -> "DimensionsSchema":
        if self.countertop_height > self.height:
            raise ValueError(
                f"countertopHeight ({self.countertop_height}) must not exceed "
                f"height ({self.height})"
            )
        return self


class RulesSchema(CamelModel):
    mismatch_policy: MismatchPolicy = MismatchPolicy.AUTO_FIX
    gap_between_modules: float = Field(default=0.0, ge=0)


class GlobalSettingsSchema(CamelModel):
    dimensions: DimensionsSchema
    rules: RulesSchema = Field(default_factory=RulesSchema)


class ModuleConstraintsSchema(CamelModel):
    min_width: float = Field(..., gt=0)
    max_width: float = Field(..., gt=0)

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "ModuleConstraintsSchema":
        if self.min_width > self.max_width:
            raise ValueError(
                f"minWidth ({self.min_width}) must not exceed maxWidth "
                f"({self.max_width})"
            )
        return self


class HandleConstraintsSchema(CamelModel):
    min_distance_from_edge: float = Field(default=0.0, ge=0)


class GlobalConstraintsSchema(CamelModel):
    modules: ModuleConstraintsSchema
    handles: HandleConstraintsSchema = Field(default_factory=HandleConstraintsSchema)


class DefaultMaterialsSchema(CamelModel):
    """Material ids used when a module does not override a slot."""

    facade: str = Field(..., min_length=1)
    countertop: str = Field(..., min_length=1)
    handle: str = Field(..., min_length=1)


class MaterialOverridesSchema(CamelModel):
    facade: str | None = Field(default=None, min_length=1)
    countertop: str | None = Field(default=None, min_length=1)
    handle: str | None = Field(default=None, min_length=1)


# =============================================================================
# Modules
# =============================================================================


class OffsetSchema(CamelModel):
    y: float = 0.0


class PositioningSchema(CamelModel):
    anchor: Anchor
    offset: OffsetSchema = Field(default_factory=OffsetSchema)


class HangingPositioningSchema(CamelModel):
    """Positioning of a hanging module, aligned with a line module."""

    anchor: Anchor = Anchor.WALL
    offset: OffsetSchema = Field(default_factory=OffsetSchema)
    align_with_module: str = Field(..., min_length=1)

    @field_validator("anchor")
    @classmethod
    def validate_not_floor(cls, v: Anchor) -> Anchor:
        if v is Anchor.FLOOR:
            raise ValueError("hanging modules must be anchored to 'wall' or 'ceiling'")
        return v


class HandlePlacementSchema(CamelModel):
    type: HandlePlacementType
    orientation: HandleOrientation
    offset_from_edge: float | None = Field(
        default=None,
        ge=0,
        description="Distance of an offset handle from its reference edge",
    )


class HandleSchema(CamelModel):
    placement: HandlePlacementSchema


class ShelfSchema(CamelModel):
    position_from_bottom: float


class DoorShelfStructureSchema(CamelModel):
    type: Literal["door-and-shelf"]
    door_count: int = Field(default=1, ge=1)
    shelves: list[ShelfSchema] = Field(default_factory=list)


class DrawerStructureSchema(CamelModel):
    type: Literal["drawers"]
    count: int = Field(..., ge=1)
    drawer_heights: list[Annotated[float, Field(gt=0)]] = Field(..., min_length=1)
    internal_depth: float = Field(..., gt=0)

    @model_validator(mode="after")
    def validate_count_matches_heights(self) -> "DrawerStructureSchema":
        if self.count != len(self.drawer_heights):
            raise ValueError(
                f"count ({self.count}) must match the number of drawerHeights "
                f"({len(self.drawer_heights)})"
            )
        return self


StructureSchema = Annotated[
    Union[DoorShelfStructureSchema, DrawerStructureSchema],
    Field(discriminator="type"),
]


class CarcassSchema(CamelModel):
    thickness: float = Field(default=DEFAULT_CARCASS_THICKNESS, gt=0)
    back_panel_thickness: float = Field(default=DEFAULT_BACK_PANEL_THICKNESS, gt=0)


class ModuleSchema(CamelModel):
    """One module on a layout line.

    The type is a free string here; unknown types are reported by the
    validator together with every other problem in the document.
    """

    id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    variant: str = "default"
    width: float = Field(..., gt=0)
    positioning: PositioningSchema
    handle: HandleSchema | None = None
    material_overrides: MaterialOverridesSchema = Field(
        default_factory=MaterialOverridesSchema
    )
    structure: StructureSchema | None = None
    carcass: CarcassSchema = Field(default_factory=CarcassSchema)


class HangingModuleSchema(CamelModel):
    id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    variant: str = "default"
    width: float | Literal["auto"] = "auto"
    positioning: HangingPositioningSchema
    handle: HandleSchema | None = None
    material_overrides: MaterialOverridesSchema = Field(
        default_factory=MaterialOverridesSchema
    )
    structure: StructureSchema | None = None
    carcass: CarcassSchema = Field(default_factory=CarcassSchema)

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: float | str) -> float | str:
        if isinstance(v, (int, float)) and v <= 0:
            raise ValueError("width must be positive or 'auto'")
        return v


class DirectionSchema(CamelModel):
    x: float
    z: float


class OriginSchema(CamelModel):
    x: float = 0.0
    z: float = 0.0


class LayoutLineSchema(CamelModel):
    """A straight run of modules.

    Length and direction are checked by the validator so that every line
    problem is reported alongside the module problems.
    """

    id: str = Field(..., min_length=1)
    name: str = ""
    length: float
    direction: DirectionSchema
    origin: OriginSchema = Field(default_factory=OriginSchema)
    modules: list[ModuleSchema] = Field(default_factory=list)


# =============================================================================
# Root
# =============================================================================


class KitchenConfiguration(CamelModel):
    """Root configuration model for a kitchen.

    Attributes:
        kitchen_id: Identifier of the kitchen design.
        name: Display name.
        style: Free-form style tag (e.g. "modern").
        global_settings: Dimensions and line rules.
        global_constraints: Width bounds and handle clearance.
        default_materials: Material id per slot.
        layout_lines: Ordered layout lines.
        hanging_modules: Wall-hung modules aligned with line modules.
    """

    kitchen_id: str = Field(..., min_length=1)
    name: str = ""
    style: str = "modern"
    global_settings: GlobalSettingsSchema
    global_constraints: GlobalConstraintsSchema
    default_materials: DefaultMaterialsSchema
    layout_lines: list[LayoutLineSchema] = Field(default_factory=list)
    hanging_modules: list[HangingModuleSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_module_ids(self) -> "KitchenConfiguration":
        """Module ids are back-references in the output and must be unique."""
        seen: set[str] = set()
        ids = [m.id for line in self.layout_lines for m in line.modules]
        ids.extend(m.id for m in self.hanging_modules)
        for module_id in ids:
            if module_id in seen:
                raise ValueError(f"Duplicate module id '{module_id}'")
            seen.add(module_id)
        return self
