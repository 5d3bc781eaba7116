"""Layout synthesis: KitchenConfig in, placed RenderableModule trees out.

Synthesis is a pure function of the configuration. Lines are resolved
independently, each module is placed in world space from its line's origin,
direction and offset, and hanging modules are placed over the module they
align with. The engine assumes a validated configuration and fails fast on
the first error it meets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..catalogs import MaterialCatalog
from ..components import BuildContext, NeighborContext
from ..entities import (
    HangingModuleSpec,
    KitchenConfig,
    ModuleSpec,
    RenderableModule,
)
from ..errors import CornerAdjacencyError, UnknownAlignmentTargetError
from ..value_objects import Direction, ModuleType, Rotation, Vector3
from .adjacency import find_corner_neighbor
from .anchor_resolver import AnchorResolver
from .carcass_builder import CarcassGeometryBuilder, module_type_of
from .line_resolver import LayoutLineResolver
from .material_resolver import MaterialResolver, slots_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Placed:
    """A synthesized line module kept for hanging-module alignment."""

    module: RenderableModule
    width: float
    direction: Direction


class LayoutEngine:
    """Compose line, anchor, carcass and handle resolution into a scene graph.

    Example:
        engine = LayoutEngine(material_catalog)
        modules = engine.generate(config)
    """

    def __init__(
        self,
        material_catalog: MaterialCatalog,
        line_resolver: LayoutLineResolver | None = None,
        anchor_resolver: AnchorResolver | None = None,
        carcass_builder: CarcassGeometryBuilder | None = None,
    ) -> None:
        self._materials = MaterialResolver(material_catalog)
        self._lines = line_resolver or LayoutLineResolver()
        self._anchors = anchor_resolver or AnchorResolver()
        self._carcass = carcass_builder or CarcassGeometryBuilder()

    def generate(self, config: KitchenConfig) -> list[RenderableModule]:
        """Synthesize every module of a configuration.

        Args:
            config: A configuration that passed validation.

        Returns:
            Top-level modules in order: line modules line by line, then
            hanging modules in declared order.

        Raises:
            LayoutError: On the first configuration problem encountered.
            LayoutInvariantError: If an internal post-condition fails.
        """
        modules: list[RenderableModule] = []
        placed: dict[str, _Placed] = {}

        for line_index, line in enumerate(config.layout_lines):
            resolved = self._lines.resolve_line(line, config.rules)
            direction = line.direction.unit()
            rotation = Rotation(y=direction.yaw_degrees())
            for module_index, placement in enumerate(resolved.placements):
                neighbor = self._neighbor(config, line_index, module_index)
                module = self._build(
                    config,
                    placement.spec,
                    placement.width,
                    direction,
                    neighbor,
                    x=line.origin_x + direction.x * placement.offset,
                    z=line.origin_z + direction.z * placement.offset,
                    rotation=rotation,
                )
                modules.append(module)
                placed.setdefault(
                    module.id, _Placed(module, placement.width, direction)
                )
            logger.debug(
                f"Line '{line.id}': {len(resolved.placements)} modules, "
                f"slack {resolved.slack:.2f} cm"
            )

        for hanging in config.hanging_modules:
            modules.append(self._build_hanging(config, hanging, placed))

        logger.debug(
            f"Generated {len(modules)} modules for kitchen '{config.kitchen_id}'"
        )
        return modules

    def _neighbor(
        self, config: KitchenConfig, line_index: int, module_index: int
    ) -> NeighborContext | None:
        line = config.layout_lines[line_index]
        spec = line.modules[module_index]
        if spec.type != ModuleType.CORNER.value:
            return None
        found = find_corner_neighbor(config, line_index, module_index)
        if found is None:
            return None
        if found.line.direction.is_degenerate:
            raise CornerAdjacencyError(
                spec.id, "adjoining line direction is undefined"
            )
        neighbor_type = module_type_of(found.module.id, found.module.type)
        return NeighborContext(
            module_id=found.module.id,
            module_type=neighbor_type,
            direction=found.line.direction,
            depth=self._carcass.carcass_depth(neighbor_type, config.dimensions),
        )

    def _build_hanging(
        self,
        config: KitchenConfig,
        hanging: HangingModuleSpec,
        placed: dict[str, _Placed],
    ) -> RenderableModule:
        target = placed.get(hanging.align_with_module)
        if target is None:
            raise UnknownAlignmentTargetError(hanging.id, hanging.align_with_module)
        if hanging.type == ModuleType.CORNER.value:
            raise CornerAdjacencyError(
                hanging.id, "corner modules must sit on a layout line"
            )

        width = target.width if hanging.width == "auto" else hanging.width
        return self._build(
            config,
            hanging,
            width,
            target.direction,
            None,
            x=target.module.position.x,
            z=target.module.position.z,
            rotation=target.module.rotation,
        )

    def _build(
        self,
        config: KitchenConfig,
        spec: ModuleSpec | HangingModuleSpec,
        width: float,
        direction: Direction,
        neighbor: NeighborContext | None,
        *,
        x: float,
        z: float,
        rotation: Rotation,
    ) -> RenderableModule:
        module_type = module_type_of(spec.id, spec.type)
        materials = self._materials.resolve(
            spec.id,
            slots_for(module_type, spec.handle is not None),
            spec.material_overrides,
            config.default_materials,
        )
        context = BuildContext(
            module_id=spec.id,
            module_type=module_type,
            width=width,
            dimensions=config.dimensions,
            anchor=spec.positioning.anchor,
            line_direction=direction,
            variant=spec.variant,
            carcass_spec=spec.carcass,
            structure=spec.structure,
            handle=spec.handle,
            materials=materials,
            neighbor=neighbor,
        )
        build = self._carcass.build_carcass(context, config.constraints.handles)

        y = self._anchors.resolve_vertical(spec.positioning, config.dimensions)
        if self._anchors.hangs_from_top(spec.positioning):
            y -= build.geometry.height

        return RenderableModule(
            id=spec.id,
            type=module_type.value,
            variant=spec.variant,
            position=Vector3(x, y, z),
            rotation=rotation,
            dimensions=build.geometry.dimensions,
            materials=materials,
            carcass=build.geometry,
            structure=build.structure,
            children=build.children,
        )
