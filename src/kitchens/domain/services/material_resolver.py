"""Per-slot material resolution: module override, then kitchen default."""

from __future__ import annotations

from ..catalogs import MaterialCatalog
from ..entities import DefaultMaterials, MaterialDefinition, MaterialOverrides
from ..errors import UnknownMaterialError
from ..value_objects import MaterialSlot, ModuleType

# Module kinds that carry a countertop slab
COUNTERTOP_TYPES = frozenset({ModuleType.BASE, ModuleType.SINK, ModuleType.CORNER})


def slots_for(module_type: ModuleType, has_handle: bool) -> tuple[MaterialSlot, ...]:
    """Material slots a module of this type actually uses."""
    slots = [MaterialSlot.FACADE]
    if module_type in COUNTERTOP_TYPES:
        slots.append(MaterialSlot.COUNTERTOP)
    if has_handle:
        slots.append(MaterialSlot.HANDLE)
    return tuple(slots)


def material_id_for(
    slot: MaterialSlot, overrides: MaterialOverrides, defaults: DefaultMaterials
) -> str:
    return overrides.get(slot) or defaults.get(slot)


class MaterialResolver:
    """Resolve a module's material ids against the material catalog.

    An unresolved id is an error; no fallback material is ever substituted.
    """

    def __init__(self, catalog: MaterialCatalog) -> None:
        self._catalog = catalog

    def resolve(
        self,
        module_id: str,
        slots: tuple[MaterialSlot, ...],
        overrides: MaterialOverrides,
        defaults: DefaultMaterials,
    ) -> dict[str, MaterialDefinition]:
        """Resolve each requested slot to its catalog definition.

        Raises:
            UnknownMaterialError: If a referenced id is not in the catalog.
        """
        materials: dict[str, MaterialDefinition] = {}
        for slot in slots:
            material_id = material_id_for(slot, overrides, defaults)
            material = self._catalog.get(slot, material_id)
            if material is None:
                raise UnknownMaterialError(module_id, slot.value, material_id)
            materials[slot.value] = material
        return materials
