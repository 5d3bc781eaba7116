"""FastAPI REST API for kitchen layouts.

This module provides a REST API for validating configurations, generating
layouts, browsing catalogs and templates, and saving configurations.

Usage:
    uvicorn kitchens.web:app --reload
"""

from kitchens.web.app import app, create_app

__all__ = ["app", "create_app"]
