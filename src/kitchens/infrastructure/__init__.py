"""Infrastructure layer - configuration store and exporters."""

from kitchens.infrastructure.exporters import (
    JsonExporter,
    module_to_dict,
    modules_to_list,
)
from kitchens.infrastructure.store import (
    KitchenConfigNotFoundError,
    KitchenConfigStore,
    StoredKitchenConfig,
)

__all__ = [
    "JsonExporter",
    "KitchenConfigNotFoundError",
    "KitchenConfigStore",
    "StoredKitchenConfig",
    "module_to_dict",
    "modules_to_list",
]
