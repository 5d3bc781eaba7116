"""Read-only material and module catalogs.

The catalogs are data owned outside the synthesis core. The domain only
needs lookups: does a material id exist for a slot, and what width bounds
does a module type/variant carry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .entities import MaterialDefinition
from .value_objects import MaterialSlot

MATERIAL_CATEGORIES = ("facades", "countertops", "handles")

_SLOT_CATEGORY = {
    MaterialSlot.FACADE: "facades",
    MaterialSlot.COUNTERTOP: "countertops",
    MaterialSlot.HANDLE: "handles",
}


class MaterialCatalog:
    """Material definitions grouped by category (facades, countertops, handles)."""

    def __init__(
        self,
        facades: dict[str, MaterialDefinition] | None = None,
        countertops: dict[str, MaterialDefinition] | None = None,
        handles: dict[str, MaterialDefinition] | None = None,
    ) -> None:
        self._categories: dict[str, dict[str, MaterialDefinition]] = {
            "facades": dict(facades or {}),
            "countertops": dict(countertops or {}),
            "handles": dict(handles or {}),
        }

    @staticmethod
    def category_for(slot: MaterialSlot) -> str:
        return _SLOT_CATEGORY[slot]

    def get(self, slot: MaterialSlot, material_id: str) -> MaterialDefinition | None:
        """Look up a material for a slot; None when it is not catalogued."""
        return self._categories[_SLOT_CATEGORY[slot]].get(material_id)

    def contains(self, slot: MaterialSlot, material_id: str) -> bool:
        return self.get(slot, material_id) is not None

    def ids(self, category: str) -> list[str]:
        return list(self._categories[category])

    def to_dict(self, category: str = "all") -> dict[str, list[dict[str, Any]]]:
        """Export one category, or all of them, as JSON-ready lists.

        Raises:
            KeyError: If the category is unknown.
        """
        names = MATERIAL_CATEGORIES if category == "all" else (category,)
        return {
            name: [material.to_dict() for material in self._categories[name].values()]
            for name in names
        }


@dataclass(frozen=True)
class VariantSpec:
    """Width bounds and defaults for one module variant."""

    name: str
    min_width: float
    max_width: float
    default_width: float | None = None
    default_height: float | None = None

    def allows(self, width: float) -> bool:
        return self.min_width <= width <= self.max_width

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"minWidth": self.min_width, "maxWidth": self.max_width}
        if self.default_width is not None:
            data["defaultWidth"] = self.default_width
        if self.default_height is not None:
            data["defaultHeight"] = self.default_height
        return data


@dataclass(frozen=True)
class ModuleTypeEntry:
    type: str
    variants: dict[str, VariantSpec] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "variants": {
                name: variant.to_dict() for name, variant in self.variants.items()
            }
        }


class ModuleCatalog:
    """Module types and their catalogued variants."""

    def __init__(self, entries: dict[str, ModuleTypeEntry] | None = None) -> None:
        self._entries = dict(entries or {})

    def types(self) -> list[str]:
        return list(self._entries)

    def has_type(self, module_type: str) -> bool:
        return module_type in self._entries

    def variant(self, module_type: str, variant: str) -> VariantSpec | None:
        entry = self._entries.get(module_type)
        if entry is None:
            return None
        return entry.variants.get(variant)

    def to_dict(self, module_type: str = "all") -> dict[str, Any]:
        """Export one module type, or all of them.

        Raises:
            KeyError: If module_type is not catalogued.
        """
        if module_type == "all":
            return {name: entry.to_dict() for name, entry in self._entries.items()}
        return {module_type: self._entries[module_type].to_dict()}
