"""Configuration validator for kitchen configurations.

Runs every check over the whole configuration and accumulates all findings
in one pass, so a caller sees every independent problem at once. Checks run
in a fixed order and the errors come out in that order:

1. module widths against the global bounds, then the catalogued variant
2. line length and direction
3. module types, then module id uniqueness
4. material ids, defaults and overrides
5. line length mismatch under the reject policy
6. hanging module alignment targets
7. corner adjacency
8. carcass width and structure fit (declared or default template)
9. handle clearance on the effective width
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from ..catalogs import MaterialCatalog, ModuleCatalog
from ..entities import (
    CarcassGeometry,
    HangingModuleSpec,
    KitchenConfig,
    ModuleSpec,
)
from ..errors import HandleTooCloseToEdgeError, StructureOverflowError
from ..validation import (
    DuplicateModuleId,
    HandleTooCloseToEdge,
    InvalidCornerAdjacency,
    InvalidDirection,
    InvalidLineLength,
    LineLengthMismatch,
    OutOfRangeWidth,
    StructureOverflow,
    UnknownAlignmentTarget,
    UnknownMaterialId,
    UnknownModuleType,
    ValidationResult,
)
from ..value_objects import MaterialSlot, MismatchPolicy, ModuleType
from .adjacency import corner_problem
from .carcass_builder import (
    CarcassGeometryBuilder,
    check_carcass_width,
    check_structure,
)
from .handle_resolver import HandlePlacementResolver
from .line_resolver import LINE_TOLERANCE, naive_total_length, scale_factor_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    """A module together with its JSON path and effective width."""

    path: str
    module: ModuleSpec | HangingModuleSpec
    width: float | None


class ConfigValidator:
    """Certify that a KitchenConfig is physically realizable.

    Example:
        validator = ConfigValidator(material_catalog, module_catalog)
        result = validator.validate(config)
        if not result.is_valid:
            for error in result.errors:
                print(error.path, error.message)
    """

    def __init__(
        self,
        material_catalog: MaterialCatalog,
        module_catalog: ModuleCatalog | None = None,
        carcass_builder: CarcassGeometryBuilder | None = None,
        handle_resolver: HandlePlacementResolver | None = None,
    ) -> None:
        self._materials = material_catalog
        self._modules = module_catalog or ModuleCatalog()
        self._carcass = carcass_builder or CarcassGeometryBuilder()
        self._handles = handle_resolver or HandlePlacementResolver()

    def validate(self, config: KitchenConfig) -> ValidationResult:
        """Validate a configuration without modifying it.

        Args:
            config: The kitchen configuration to check.

        Returns:
            ValidationResult with every error and warning found.
        """
        result = ValidationResult()
        entries = self._entries(config)

        self._check_widths(config, entries, result)
        self._check_lines(config, result)
        self._check_types(entries, result)
        self._check_unique_ids(entries, result)
        self._check_materials(config, result)
        self._check_line_lengths(config, result)
        self._check_alignment(config, result)
        self._check_corners(config, result)
        self._check_structures(config, entries, result)
        self._check_handles(config, entries, result)

        logger.debug(
            f"Validated '{config.kitchen_id}': {len(result.errors)} errors, "
            f"{len(result.warnings)} warnings"
        )
        return result

    # --- module enumeration --------------------------------------------------

    def _entries(self, config: KitchenConfig) -> list[_Entry]:
        """All modules in document order with their effective widths.

        Line modules get the width auto_fix would give them. Hanging modules
        with width "auto" take the width of their aligned module; their
        width is None when the target does not exist.
        """
        entries: list[_Entry] = []
        effective: dict[str, float] = {}
        for i, line in enumerate(config.layout_lines):
            factor = 1.0
            if line.length > 0:
                factor = scale_factor_for(line, config.rules)
            for j, module in enumerate(line.modules):
                width = module.width * factor
                effective.setdefault(module.id, width)
                entries.append(_Entry(f"layoutLines[{i}].modules[{j}]", module, width))

        for k, hanging in enumerate(config.hanging_modules):
            if hanging.width == "auto":
                width = effective.get(hanging.align_with_module)
            else:
                width = hanging.width
            entries.append(_Entry(f"hangingModules[{k}]", hanging, width))
        return entries

    # --- checks --------------------------------------------------------------

    def _check_widths(
        self, config: KitchenConfig, entries: list[_Entry], result: ValidationResult
    ) -> None:
        bounds = config.constraints.modules
        for entry in entries:
            module = entry.module
            if module.width == "auto":
                continue
            width = module.width
            path = f"{entry.path}.width"
            if not bounds.min_width <= width <= bounds.max_width:
                result.add(
                    OutOfRangeWidth(
                        path=path,
                        message=(
                            f"Module '{module.id}' width {width:g} is outside "
                            f"[{bounds.min_width:g}, {bounds.max_width:g}]"
                        ),
                        value=width,
                        module_id=module.id,
                        width=width,
                        bounds=(bounds.min_width, bounds.max_width),
                    )
                )
                continue

            if not self._modules.has_type(module.type):
                continue
            variant = self._modules.variant(module.type, module.variant)
            if variant is None:
                result.add_warning(
                    f"{entry.path}.variant",
                    f"Variant '{module.variant}' is not catalogued for "
                    f"module type '{module.type}'",
                    suggestion="Only the global width bounds are enforced",
                    code="uncatalogued_variant",
                )
            elif not variant.allows(width):
                result.add(
                    OutOfRangeWidth(
                        path=path,
                        message=(
                            f"Module '{module.id}' width {width:g} is outside "
                            f"[{variant.min_width:g}, {variant.max_width:g}] "
                            f"for {module.type} variant '{variant.name}'"
                        ),
                        value=width,
                        module_id=module.id,
                        width=width,
                        bounds=(variant.min_width, variant.max_width),
                    )
                )

    def _check_lines(self, config: KitchenConfig, result: ValidationResult) -> None:
        for i, line in enumerate(config.layout_lines):
            if line.length <= 0:
                result.add(
                    InvalidLineLength(
                        path=f"layoutLines[{i}].length",
                        message=f"Line '{line.id}' length must be positive",
                        value=line.length,
                        line_id=line.id,
                        length=line.length,
                    )
                )
            if line.direction.is_degenerate:
                result.add(
                    InvalidDirection(
                        path=f"layoutLines[{i}].direction",
                        message=f"Line '{line.id}' direction must be non-zero",
                        value={"x": line.direction.x, "z": line.direction.z},
                        line_id=line.id,
                    )
                )

    def _check_types(self, entries: list[_Entry], result: ValidationResult) -> None:
        known = ModuleType.values()
        for entry in entries:
            module = entry.module
            if module.type not in known:
                result.add(
                    UnknownModuleType(
                        path=f"{entry.path}.type",
                        message=(
                            f"Module '{module.id}' has unknown type "
                            f"'{module.type}' (expected one of {', '.join(known)})"
                        ),
                        value=module.type,
                        module_id=module.id,
                        module_type=module.type,
                    )
                )

    def _check_unique_ids(
        self, entries: list[_Entry], result: ValidationResult
    ) -> None:
        first_seen: dict[str, str] = {}
        for entry in entries:
            module_id = entry.module.id
            if module_id not in first_seen:
                first_seen[module_id] = entry.path
                continue
            result.add(
                DuplicateModuleId(
                    path=f"{entry.path}.id",
                    message=(
                        f"Module id '{module_id}' is already used at "
                        f"{first_seen[module_id]}"
                    ),
                    value=module_id,
                    module_id=module_id,
                    first_path=first_seen[module_id],
                )
            )

    def _check_materials(
        self, config: KitchenConfig, result: ValidationResult
    ) -> None:
        references: list[tuple[str, MaterialSlot, str]] = [
            (f"defaultMaterials.{slot.value}", slot, config.default_materials.get(slot))
            for slot in MaterialSlot
        ]
        modules: list[tuple[str, ModuleSpec | HangingModuleSpec]] = [
            (f"layoutLines[{i}].modules[{j}]", module)
            for i, line in enumerate(config.layout_lines)
            for j, module in enumerate(line.modules)
        ]
        modules.extend(
            (f"hangingModules[{k}]", hanging)
            for k, hanging in enumerate(config.hanging_modules)
        )
        for path, module in modules:
            for slot in MaterialSlot:
                override = module.material_overrides.get(slot)
                if override:
                    references.append(
                        (f"{path}.materialOverrides.{slot.value}", slot, override)
                    )

        seen: set[tuple[MaterialSlot, str]] = set()
        for path, slot, material_id in references:
            if (slot, material_id) in seen:
                continue
            seen.add((slot, material_id))
            if not self._materials.contains(slot, material_id):
                result.add(
                    UnknownMaterialId(
                        path=path,
                        message=(
                            f"Unknown {slot.value} material '{material_id}' "
                            f"(not in {MaterialCatalog.category_for(slot)})"
                        ),
                        value=material_id,
                        ref=material_id,
                        slot=slot.value,
                    )
                )

    def _check_line_lengths(
        self, config: KitchenConfig, result: ValidationResult
    ) -> None:
        rules = config.rules
        bounds = config.constraints.modules
        for i, line in enumerate(config.layout_lines):
            if line.length <= 0 or not line.modules:
                continue
            required = naive_total_length(line, rules.gap_between_modules)
            overflow = required - line.length > LINE_TOLERANCE * line.length

            if rules.mismatch_policy is MismatchPolicy.REJECT:
                if overflow:
                    result.add(
                        LineLengthMismatch(
                            path=f"layoutLines[{i}]",
                            message=(
                                f"Line '{line.id}' needs {required:g} cm but "
                                f"is {line.length:g} cm long"
                            ),
                            value=required,
                            line_id=line.id,
                            required=required,
                            available=line.length,
                        )
                    )
                continue

            factor = scale_factor_for(line, rules)
            if factor == 1.0:
                continue
            kind = "Overflow" if overflow else "Underflow"
            result.add_warning(
                f"layoutLines[{i}]",
                f"{kind} on line '{line.id}': {required:g} cm of modules for "
                f"{line.length:g} cm; widths scaled by {factor:.4f}",
                code="auto_fix_scaled",
            )
            for j, module in enumerate(line.modules):
                scaled = module.width * factor
                if bounds.min_width <= scaled <= bounds.max_width:
                    continue
                logger.warning(
                    f"Module '{module.id}' scaled to {scaled:.2f} cm, outside "
                    f"[{bounds.min_width:g}, {bounds.max_width:g}]"
                )
                result.add_warning(
                    f"layoutLines[{i}].modules[{j}].width",
                    f"Module '{module.id}' is scaled to {scaled:.2f} cm, outside "
                    f"[{bounds.min_width:g}, {bounds.max_width:g}]",
                    suggestion="Adjust module widths to match the line length",
                    code="scaled_width_out_of_bounds",
                )

    def _check_alignment(
        self, config: KitchenConfig, result: ValidationResult
    ) -> None:
        for k, hanging in enumerate(config.hanging_modules):
            target = hanging.align_with_module
            if config.find_module(target) is None:
                result.add(
                    UnknownAlignmentTarget(
                        path=f"hangingModules[{k}].positioning.alignWithModule",
                        message=(
                            f"Hanging module '{hanging.id}' aligns with unknown "
                            f"module '{target}'"
                        ),
                        value=target,
                        module_id=hanging.id,
                        target=target,
                    )
                )

    def _check_corners(self, config: KitchenConfig, result: ValidationResult) -> None:
        corner = ModuleType.CORNER.value
        for i, line in enumerate(config.layout_lines):
            for j, module in enumerate(line.modules):
                if module.type != corner:
                    continue
                problem = corner_problem(config, i, j)
                if problem is not None:
                    result.add(
                        InvalidCornerAdjacency(
                            path=f"layoutLines[{i}].modules[{j}]",
                            message=f"Corner module '{module.id}' {problem}",
                            module_id=module.id,
                            reason=problem,
                        )
                    )
        for k, hanging in enumerate(config.hanging_modules):
            if hanging.type == corner:
                reason = "must sit on a layout line"
                result.add(
                    InvalidCornerAdjacency(
                        path=f"hangingModules[{k}].type",
                        message=f"Corner module '{hanging.id}' {reason}",
                        module_id=hanging.id,
                        reason=reason,
                    )
                )

    def _geometry(
        self, config: KitchenConfig, entry: _Entry
    ) -> CarcassGeometry | None:
        """Carcass box of a module as the engine would build it, if known."""
        module = entry.module
        if module.type not in ModuleType.values():
            return None
        if entry.width is None or entry.width <= 0:
            return None
        module_type = ModuleType(module.type)
        return CarcassGeometry(
            width=entry.width,
            height=self._carcass.carcass_height(module_type, config.dimensions),
            depth=self._carcass.carcass_depth(module_type, config.dimensions),
            thickness=module.carcass.thickness,
            back_panel_thickness=module.carcass.back_panel_thickness,
        )

    def _check_structures(
        self, config: KitchenConfig, entries: list[_Entry], result: ValidationResult
    ) -> None:
        for entry in entries:
            module = entry.module
            geometry = self._geometry(config, entry)
            if geometry is None:
                continue
            try:
                check_carcass_width(module.id, geometry)
            except StructureOverflowError as exc:
                result.add(_structure_overflow(f"{entry.path}.width", module.id, exc))
                continue

            if module.structure is None:
                structure = self._carcass.default_structure(
                    ModuleType(module.type), geometry.height
                )
                path = entry.path
            else:
                structure = module.structure
                path = f"{entry.path}.structure"
            try:
                check_structure(module.id, structure, geometry)
            except StructureOverflowError as exc:
                result.add(_structure_overflow(path, module.id, exc))

    def _check_handles(
        self, config: KitchenConfig, entries: list[_Entry], result: ValidationResult
    ) -> None:
        constraints = config.constraints.handles
        for entry in entries:
            module = entry.module
            if module.handle is None:
                continue
            geometry = self._geometry(config, entry)
            if geometry is None:
                continue
            try:
                self._handles.resolve_handle(
                    module.id,
                    geometry,
                    module.positioning.anchor,
                    module.handle,
                    constraints,
                )
            except HandleTooCloseToEdgeError as exc:
                result.add(
                    HandleTooCloseToEdge(
                        path=f"{entry.path}.handle",
                        message=str(exc),
                        module_id=module.id,
                        clearance=exc.clearance,
                        required=exc.required,
                    )
                )


def _structure_overflow(
    path: str, module_id: str, exc: StructureOverflowError
) -> StructureOverflow:
    return StructureOverflow(
        path=path,
        message=str(exc),
        module_id=module_id,
        required=exc.required,
        available=exc.available,
    )
