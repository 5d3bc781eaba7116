"""Bundled material and module catalogs."""

from kitchens.application.catalogs.loader import (
    load_material_catalog,
    load_module_catalog,
    material_catalog_from_dict,
    module_catalog_from_dict,
)

__all__ = [
    "load_material_catalog",
    "load_module_catalog",
    "material_catalog_from_dict",
    "module_catalog_from_dict",
]
