"""Configuration: settings, YAML loading and the process-wide cache default."""

from imgur_api.config.cache_defaults import (
    CACHE_BACKENDS,
    build_cache_provider,
    cache_for_settings,
    configure_default_cache,
    default_cache_provider,
    reset_default_cache_provider,
)
from imgur_api.config.loader import load_config
from imgur_api.config.settings import Settings

__all__ = [
    "CACHE_BACKENDS",
    "Settings",
    "build_cache_provider",
    "cache_for_settings",
    "configure_default_cache",
    "default_cache_provider",
    "load_config",
    "reset_default_cache_provider",
]
