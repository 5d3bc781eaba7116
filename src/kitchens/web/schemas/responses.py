"""Pydantic response schemas for the REST API.

Responses are serialized with camelCase keys to match the configuration
documents and the JSON export.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidationResultSchema(CamelResponse):
    """Validation result response."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Blocking errors with code and path"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Non-blocking warnings"
    )


class LayoutResponseSchema(CamelResponse):
    """Generated layout response."""

    schema_version: str = Field(..., description="Export schema version")
    kitchen_id: str = Field(..., description="Id of the generated kitchen")
    modules: list[dict[str, Any]] = Field(
        default_factory=list, description="Renderable module trees"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class SaveResultSchema(CamelResponse):
    """Saved configuration acknowledgement."""

    success: bool = Field(default=True)
    config_id: str = Field(..., description="Id to retrieve the configuration by")
    description: str = Field(..., description="Description stored with the entry")
    timestamp: str = Field(..., description="ISO-8601 UTC save time")


class SavedConfigSchema(CamelResponse):
    """A retrieved configuration."""

    config: dict[str, Any]
    modules: list[Any]
    timestamp: str
    description: str | None = None


class TemplateListItemSchema(BaseModel):
    """Template list item."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    """List of available templates."""

    templates: list[TemplateListItemSchema] = Field(
        default_factory=list, description="Available templates"
    )


class TemplateContentSchema(BaseModel):
    """Template content response."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Template configuration content")
