"""JSON export of synthesized kitchen layouts.

Modules are written in camelCase, matching the configuration documents the
renderer and agent layer already speak.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from kitchens.domain.entities import CarcassGeometry, CornerEnvelope, RenderableModule

if TYPE_CHECKING:
    from kitchens.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def _envelope_to_dict(envelope: CornerEnvelope) -> dict[str, Any]:
    return {
        "primaryExtent": envelope.primary_extent,
        "secondaryExtent": envelope.secondary_extent,
        "primaryAxis": {"x": envelope.primary_axis.x, "z": envelope.primary_axis.z},
        "secondaryAxis": {
            "x": envelope.secondary_axis.x,
            "z": envelope.secondary_axis.z,
        },
        "worldExtentX": envelope.world_extent_x,
        "worldExtentZ": envelope.world_extent_z,
    }


def _carcass_to_dict(carcass: CarcassGeometry) -> dict[str, Any]:
    data: dict[str, Any] = {
        "thickness": carcass.thickness,
        "backPanelThickness": carcass.back_panel_thickness,
    }
    if carcass.envelope is not None:
        data["envelope"] = _envelope_to_dict(carcass.envelope)
    return data


def module_to_dict(module: RenderableModule) -> dict[str, Any]:
    """Convert a module tree to a JSON-ready dict."""
    data: dict[str, Any] = {
        "id": module.id,
        "type": module.type,
        "variant": module.variant,
        "position": {
            "x": module.position.x,
            "y": module.position.y,
            "z": module.position.z,
        },
        "rotation": {
            "x": module.rotation.x,
            "y": module.rotation.y,
            "z": module.rotation.z,
        },
        "dimensions": {
            "width": module.dimensions.width,
            "height": module.dimensions.height,
            "depth": module.dimensions.depth,
        },
    }
    if module.structure is not None:
        data["structure"] = module.structure.to_dict()
    if module.carcass is not None:
        data["carcass"] = _carcass_to_dict(module.carcass)
    data["materials"] = {
        slot: material.to_dict() for slot, material in module.materials.items()
    }
    data["children"] = [module_to_dict(child) for child in module.children]
    return data


def modules_to_list(modules: list[RenderableModule]) -> list[dict[str, Any]]:
    return [module_to_dict(module) for module in modules]


class JsonExporter:
    """Export a LayoutOutput as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int | None = 2, include_warnings: bool = True) -> None:
        self.indent = indent
        self.include_warnings = include_warnings

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export the layout to a file."""
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported {output.module_count} modules to {path}")

    def export_string(self, output: LayoutOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)

    def to_dict(self, output: LayoutOutput) -> dict[str, Any]:
        data: dict[str, Any] = {
            "schemaVersion": SCHEMA_VERSION,
            "kitchenId": output.kitchen_id,
            "modules": modules_to_list(output.modules),
        }
        if self.include_warnings:
            data["warnings"] = [w.to_dict() for w in output.validation.warnings]
        return data
