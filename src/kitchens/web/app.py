"""FastAPI application for the kitchen layout service."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kitchens.web.exceptions import register_exception_handlers
from kitchens.web.routers import (
    catalog_router,
    configs_router,
    generate_router,
    templates_router,
    validate_router,
)

API_PREFIX = "/api/v1"

ROUTERS = (
    validate_router,
    generate_router,
    catalog_router,
    configs_router,
    templates_router,
)


def create_app() -> FastAPI:
    """Build the application with every router mounted under ``/api/v1``."""
    app = FastAPI(
        title="Kitchen Layout API",
        description="Validate kitchen configurations and synthesise 3D layouts",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
