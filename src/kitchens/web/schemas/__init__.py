"""Pydantic request and response schemas for the REST API."""

from kitchens.web.schemas.requests import (
    ConfigValidateRequest,
    GenerateFromConfigRequest,
    SaveKitchenConfigRequest,
)
from kitchens.web.schemas.responses import (
    LayoutResponseSchema,
    SavedConfigSchema,
    SaveResultSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    "ConfigValidateRequest",
    "GenerateFromConfigRequest",
    "LayoutResponseSchema",
    "SaveKitchenConfigRequest",
    "SaveResultSchema",
    "SavedConfigSchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
