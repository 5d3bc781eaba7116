"""FastAPI dependency injection for kitchen services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from kitchens.application.commands import GenerateKitchenCommand
from kitchens.application.factory import ServiceFactory, get_factory
from kitchens.application.templates import TemplateManager
from kitchens.application.tools import KitchenToolkit
from kitchens.domain import ConfigValidator
from kitchens.infrastructure.store import KitchenConfigStore


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """One factory per process; tests replace it through dependency_overrides."""
    return get_factory()


def get_validator(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> ConfigValidator:
    return factory.get_validator()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateKitchenCommand:
    return factory.create_generate_command()


def get_toolkit(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> KitchenToolkit:
    return factory.get_toolkit()


def get_store(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> KitchenConfigStore:
    return factory.get_store()


def get_template_manager(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> TemplateManager:
    return factory.get_template_manager()


# Annotated shorthands used in router signatures
ValidatorDep = Annotated[ConfigValidator, Depends(get_validator)]
GenerateCommandDep = Annotated[GenerateKitchenCommand, Depends(get_generate_command)]
ToolkitDep = Annotated[KitchenToolkit, Depends(get_toolkit)]
StoreDep = Annotated[KitchenConfigStore, Depends(get_store)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
