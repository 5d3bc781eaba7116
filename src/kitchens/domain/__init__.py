"""Domain layer - kitchen layout synthesis and validation."""

from .catalogs import MaterialCatalog, ModuleCatalog, ModuleTypeEntry, VariantSpec
from .entities import (
    CarcassGeometry,
    CarcassSpec,
    CornerEnvelope,
    DefaultMaterials,
    DoorShelfStructure,
    DrawerStructure,
    GlobalConstraints,
    GlobalDimensions,
    GlobalSettings,
    HandleConstraints,
    HandleSpec,
    HangingModuleSpec,
    KitchenConfig,
    LayoutLine,
    LayoutRules,
    MaterialDefinition,
    MaterialOverrides,
    ModuleConstraints,
    ModuleSpec,
    Positioning,
    RenderableModule,
    Structure,
)
from .errors import (
    CornerAdjacencyError,
    HandleTooCloseToEdgeError,
    LayoutError,
    LayoutInvariantError,
    LineLengthMismatchError,
    StructureOverflowError,
    UnknownAlignmentTargetError,
    UnknownMaterialError,
    UnknownModuleTypeError,
)
from .services import ConfigValidator, LayoutEngine
from .validation import ValidationError, ValidationResult, ValidationWarning
from .value_objects import (
    Anchor,
    Dimensions,
    Direction,
    HandleOrientation,
    HandlePlacementType,
    MaterialSlot,
    MismatchPolicy,
    ModuleType,
    Rotation,
    StructureKind,
    Vector3,
)

__all__ = [
    "Anchor",
    "CarcassGeometry",
    "CarcassSpec",
    "ConfigValidator",
    "CornerAdjacencyError",
    "CornerEnvelope",
    "DefaultMaterials",
    "Dimensions",
    "Direction",
    "DoorShelfStructure",
    "DrawerStructure",
    "GlobalConstraints",
    "GlobalDimensions",
    "GlobalSettings",
    "HandleConstraints",
    "HandleOrientation",
    "HandlePlacementType",
    "HandleSpec",
    "HandleTooCloseToEdgeError",
    "HangingModuleSpec",
    "KitchenConfig",
    "LayoutEngine",
    "LayoutError",
    "LayoutInvariantError",
    "LayoutLine",
    "LayoutRules",
    "LineLengthMismatchError",
    "MaterialCatalog",
    "MaterialDefinition",
    "MaterialOverrides",
    "MaterialSlot",
    "MismatchPolicy",
    "ModuleCatalog",
    "ModuleConstraints",
    "ModuleSpec",
    "ModuleType",
    "ModuleTypeEntry",
    "Positioning",
    "RenderableModule",
    "Rotation",
    "Structure",
    "StructureKind",
    "StructureOverflowError",
    "UnknownAlignmentTargetError",
    "UnknownMaterialError",
    "UnknownModuleTypeError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "VariantSpec",
    "Vector3",
]
