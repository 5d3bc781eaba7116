"""Application layer - configuration, catalogs, templates and commands."""

from kitchens.application.commands import GenerateKitchenCommand, ValidateKitchenCommand
from kitchens.application.dtos import LayoutOutput
from kitchens.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from kitchens.application.tools import KitchenToolkit

__all__ = [
    "GenerateKitchenCommand",
    "KitchenToolkit",
    "LayoutOutput",
    "ServiceFactory",
    "ValidateKitchenCommand",
    "get_factory",
    "reset_factory",
    "set_factory",
]
