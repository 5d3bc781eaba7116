"""API routers for the REST API."""

from kitchens.web.routers.catalog import router as catalog_router
from kitchens.web.routers.configs import router as configs_router
from kitchens.web.routers.generate import router as generate_router
from kitchens.web.routers.templates import router as templates_router
from kitchens.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "configs_router",
    "generate_router",
    "templates_router",
    "validate_router",
]
