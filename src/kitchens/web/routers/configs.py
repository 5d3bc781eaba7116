"""Saved kitchen configuration endpoints."""

from fastapi import APIRouter

from kitchens.application.tools import DEFAULT_DESCRIPTION
from kitchens.web.dependencies import StoreDep
from kitchens.web.schemas.requests import SaveKitchenConfigRequest
from kitchens.web.schemas.responses import SavedConfigSchema, SaveResultSchema

router = APIRouter(prefix="/kitchen-configs", tags=["kitchen-configs"])


@router.post("", response_model=SaveResultSchema)
async def save_kitchen_config(
    request: SaveKitchenConfigRequest,
    store: StoreDep,
) -> SaveResultSchema:
    """Save a configuration with its generated modules."""
    description = request.description or DEFAULT_DESCRIPTION
    entry = store.save(request.config, request.modules, description)
    return SaveResultSchema(
        config_id=entry.config_id, description=description, timestamp=entry.timestamp
    )


@router.get("/{config_id}", response_model=SavedConfigSchema)
async def get_kitchen_config(config_id: str, store: StoreDep) -> SavedConfigSchema:
    """Retrieve a saved configuration.

    Raises:
        KitchenConfigNotFoundError: If the id is unknown or expired (404).
    """
    entry = store.get(config_id)
    return SavedConfigSchema(
        config=entry.config,
        modules=entry.modules,
        timestamp=entry.timestamp,
        description=entry.description,
    )
