"""Predefined kitchen templates.

This package provides bundled kitchen configurations and a TemplateManager
class for accessing them.
"""

from kitchens.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
]
