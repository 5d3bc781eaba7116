"""Load the bundled material and module catalogs.

Both catalogs ship as JSON package data next to this module and are read
through importlib.resources, so they work from an installed wheel as well
as from a source checkout.
"""

import json
import logging
from importlib import resources
from typing import Any

from kitchens.domain.catalogs import (
    MATERIAL_CATEGORIES,
    MaterialCatalog,
    ModuleCatalog,
    ModuleTypeEntry,
    VariantSpec,
)
from kitchens.domain.entities import MaterialDefinition

logger = logging.getLogger(__name__)

DATA_PACKAGE = "kitchens.application.catalogs.data"


def _read_json(filename: str) -> dict[str, Any]:
    content = resources.files(DATA_PACKAGE).joinpath(filename).read_text(
        encoding="utf-8"
    )
    return json.loads(content)


def material_catalog_from_dict(data: dict[str, Any]) -> MaterialCatalog:
    """Build a MaterialCatalog from the materials.json layout.

    Handles have no top-level type; they are catalogued with type "handle"
    and keep their source and material blocks as properties.
    """
    categories: dict[str, dict[str, MaterialDefinition]] = {}
    for category in MATERIAL_CATEGORIES:
        entries: dict[str, MaterialDefinition] = {}
        for material_id, raw in data.get(category, {}).items():
            properties = dict(raw)
            material_type = properties.pop("type", "handle")
            entries[material_id] = MaterialDefinition(
                id=material_id, type=material_type, properties=properties
            )
        categories[category] = entries
    return MaterialCatalog(**categories)


def module_catalog_from_dict(data: dict[str, Any]) -> ModuleCatalog:
    """Build a ModuleCatalog from the modules.json layout."""
    entries: dict[str, ModuleTypeEntry] = {}
    for module_type, raw in data.items():
        variants = {
            name: VariantSpec(
                name=name,
                min_width=spec["minWidth"],
                max_width=spec["maxWidth"],
                default_width=spec.get("defaultWidth"),
                default_height=spec.get("defaultHeight"),
            )
            for name, spec in raw.get("variants", {}).items()
        }
        entries[module_type] = ModuleTypeEntry(type=module_type, variants=variants)
    return ModuleCatalog(entries)


def load_material_catalog() -> MaterialCatalog:
    """Load the bundled material catalog."""
    catalog = material_catalog_from_dict(_read_json("materials.json"))
    logger.debug(
        "Loaded material catalog: "
        + ", ".join(f"{c}={len(catalog.ids(c))}" for c in MATERIAL_CATEGORIES)
    )
    return catalog


def load_module_catalog() -> ModuleCatalog:
    """Load the bundled module catalog."""
    catalog = module_catalog_from_dict(_read_json("modules.json"))
    logger.debug(f"Loaded module catalog: {', '.join(catalog.types())}")
    return catalog
