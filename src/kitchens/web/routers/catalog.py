"""Material and module catalog endpoints."""

from typing import Any

from fastapi import APIRouter, Query

from kitchens.web.dependencies import ToolkitDep
from kitchens.web.exceptions import CatalogEntryNotFoundError

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _checked(payload: dict[str, Any]) -> dict[str, Any]:
    if "error" in payload:
        raise CatalogEntryNotFoundError(payload["error"])
    return payload


@router.get("/materials")
async def get_materials(
    toolkit: ToolkitDep,
    category: str = Query(
        default="all", description="facades, countertops, handles or all"
    ),
) -> dict[str, Any]:
    """Get the material library, optionally filtered by category."""
    return _checked(toolkit.get_material_library(category))


@router.get("/modules")
async def get_modules(
    toolkit: ToolkitDep,
    module_type: str = Query(default="all", alias="moduleType"),
) -> dict[str, Any]:
    """Get the module library, optionally filtered by module type."""
    return _checked(toolkit.get_module_library(module_type))
