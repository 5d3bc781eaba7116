"""Convert a parsed KitchenConfiguration into domain entities.

The domain works on frozen dataclasses; this adapter is the only place that
knows about the document shape.
"""

from kitchens.application.config.schema import (
    CarcassSchema,
    DoorShelfStructureSchema,
    HandleSchema,
    HangingModuleSchema,
    KitchenConfiguration,
    LayoutLineSchema,
    MaterialOverridesSchema,
    ModuleSchema,
    StructureSchema,
)
from kitchens.domain.entities import (
    CarcassSpec,
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
    MaterialOverrides,
    ModuleConstraints,
    ModuleSpec,
    Positioning,
    Structure,
)
from kitchens.domain.value_objects import Direction


def config_to_domain(config: KitchenConfiguration) -> KitchenConfig:
    """Convert a parsed configuration into a domain KitchenConfig.

    Args:
        config: A KitchenConfiguration from load_config() or
            load_config_from_dict().

    Returns:
        The equivalent immutable KitchenConfig.

    Example:
        >>> config = load_config(Path("kitchen.json"))
        >>> kitchen = config_to_domain(config)
        >>> modules = engine.generate(kitchen)
    """
    dims = config.global_settings.dimensions
    rules = config.global_settings.rules
    constraints = config.global_constraints
    return KitchenConfig(
        kitchen_id=config.kitchen_id,
        name=config.name,
        style=config.style,
        settings=GlobalSettings(
            dimensions=GlobalDimensions(
                height=dims.height,
                countertop_height=dims.countertop_height,
                countertop_depth=dims.countertop_depth,
                countertop_thickness=dims.countertop_thickness,
                wall_gap=dims.wall_gap,
                base_cabinet_height=dims.base_cabinet_height,
                wall_cabinet_height=dims.wall_cabinet_height,
                wall_cabinet_depth=dims.wall_cabinet_depth,
                plinth_height=dims.plinth_height,
                plinth_depth=dims.plinth_depth,
            ),
            rules=LayoutRules(
                mismatch_policy=rules.mismatch_policy,
                gap_between_modules=rules.gap_between_modules,
            ),
        ),
        constraints=GlobalConstraints(
            modules=ModuleConstraints(
                min_width=constraints.modules.min_width,
                max_width=constraints.modules.max_width,
            ),
            handles=HandleConstraints(
                min_distance_from_edge=constraints.handles.min_distance_from_edge
            ),
        ),
        default_materials=DefaultMaterials(
            facade=config.default_materials.facade,
            countertop=config.default_materials.countertop,
            handle=config.default_materials.handle,
        ),
        layout_lines=tuple(_line(line) for line in config.layout_lines),
        hanging_modules=tuple(_hanging(m) for m in config.hanging_modules),
    )


def _line(line: LayoutLineSchema) -> LayoutLine:
    return LayoutLine(
        id=line.id,
        name=line.name or line.id,
        length=line.length,
        direction=Direction(line.direction.x, line.direction.z),
        modules=tuple(_module(m) for m in line.modules),
        origin_x=line.origin.x,
        origin_z=line.origin.z,
    )


def _module(module: ModuleSchema) -> ModuleSpec:
    return ModuleSpec(
        id=module.id,
        type=module.type,
        width=module.width,
        positioning=Positioning(
            anchor=module.positioning.anchor,
            offset_y=module.positioning.offset.y,
        ),
        variant=module.variant,
        handle=_handle(module.handle),
        material_overrides=_overrides(module.material_overrides),
        structure=_structure(module.structure),
        carcass=_carcass(module.carcass),
    )


def _hanging(module: HangingModuleSchema) -> HangingModuleSpec:
    return HangingModuleSpec(
        id=module.id,
        type=module.type,
        width=module.width,
        align_with_module=module.positioning.align_with_module,
        positioning=Positioning(
            anchor=module.positioning.anchor,
            offset_y=module.positioning.offset.y,
        ),
        variant=module.variant,
        handle=_handle(module.handle),
        material_overrides=_overrides(module.material_overrides),
        structure=_structure(module.structure),
        carcass=_carcass(module.carcass),
    )


def _handle(handle: HandleSchema | None) -> HandleSpec | None:
    if handle is None:
        return None
    return HandleSpec(
        placement=handle.placement.type,
        orientation=handle.placement.orientation,
        offset_from_edge=handle.placement.offset_from_edge,
    )


def _overrides(overrides: MaterialOverridesSchema) -> MaterialOverrides:
    return MaterialOverrides(
        facade=overrides.facade,
        countertop=overrides.countertop,
        handle=overrides.handle,
    )


def _structure(structure: StructureSchema | None) -> Structure | None:
    if structure is None:
        return None
    if isinstance(structure, DoorShelfStructureSchema):
        return DoorShelfStructure(
            door_count=structure.door_count,
            shelf_positions=tuple(s.position_from_bottom for s in structure.shelves),
        )
    return DrawerStructure(
        drawer_heights=tuple(structure.drawer_heights),
        internal_depth=structure.internal_depth,
    )


def _carcass(carcass: CarcassSchema) -> CarcassSpec:
    return CarcassSpec(
        thickness=carcass.thickness,
        back_panel_thickness=carcass.back_panel_thickness,
    )
