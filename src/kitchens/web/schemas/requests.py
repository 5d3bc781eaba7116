"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Kitchen configuration JSON")


class GenerateFromConfigRequest(BaseModel):
    """Request for generating a layout from a full configuration."""

    config: dict[str, Any] = Field(..., description="Kitchen configuration JSON")


class SaveKitchenConfigRequest(BaseModel):
    """Request for saving a configuration with its generated modules."""

    config: dict[str, Any] = Field(..., description="Kitchen configuration JSON")
    modules: list[Any] = Field(..., description="Generated modules, stored verbatim")
    description: str | None = Field(default=None, description="Short description")
