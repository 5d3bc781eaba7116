"""API-level exceptions and their JSON error responses."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kitchens.application.config import ConfigError
from kitchens.application.templates import TemplateNotFoundError
from kitchens.infrastructure.store import KitchenConfigNotFoundError


class KitchenGenerationError(Exception):
    """Raised when a layout cannot be generated from a parsed configuration."""

    def __init__(self, details: list[dict[str, Any]]) -> None:
        self.details = details
        super().__init__(f"Generation failed: {details}")


class CatalogEntryNotFoundError(Exception):
    """Raised when a catalog filter names an unknown category or type."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and application errors to {error, error_type, details} bodies."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=422, content=exc.to_dict())

    @app.exception_handler(KitchenGenerationError)
    async def generation_error_handler(
        request: Request, exc: KitchenGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Kitchen generation failed",
                "error_type": "generation",
                "details": exc.details,
            },
        )

    @app.exception_handler(KitchenConfigNotFoundError)
    async def config_not_found_handler(
        request: Request, exc: KitchenConfigNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Configuration not found",
                "error_type": "not_found",
                "details": [{"configId": exc.config_id}],
            },
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(CatalogEntryNotFoundError)
    async def catalog_not_found_handler(
        request: Request, exc: CatalogEntryNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"error": exc.message, "error_type": "not_found", "details": None},
        )
