"""Template endpoints."""

from fastapi import APIRouter

from kitchens.application.templates import TEMPLATE_METADATA
from kitchens.web.dependencies import TemplateManagerDep
from kitchens.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List all available templates."""
    return TemplateListSchema(
        templates=[
            TemplateListItemSchema(name=name, description=desc)
            for name, desc in manager.list_templates()
        ]
    )


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Get the content of a template.

    Raises:
        TemplateNotFoundError: If the template does not exist (404).
    """
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=manager.get_template_data(name),
    )
