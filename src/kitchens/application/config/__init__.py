"""Kitchen configuration schema, loading and domain conversion."""

from kitchens.application.config.adapter import config_to_domain
from kitchens.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from kitchens.application.config.schema import KitchenConfiguration

__all__ = [
    "ConfigError",
    "KitchenConfiguration",
    "config_to_domain",
    "load_config",
    "load_config_from_dict",
]
