"""Process-wide default cache provider.

New clients capture whatever provider is the default at construction time;
changing the default afterwards only affects clients built later.  The
initial default is a :class:`NullCacheProvider`, restored by
:func:`reset_default_cache_provider`.
"""

from __future__ import annotations

from imgur_api.config.settings import Settings
from imgur_api.interfaces.cache_provider import ICacheProvider
from imgur_api.providers.cache import MemoryCacheProvider, NullCacheProvider
from imgur_api.utils.errors import ConfigurationError
from imgur_api.utils.logging import get_logger

logger = get_logger(__name__)

CACHE_BACKENDS = ("null", "memory")

_default_provider: ICacheProvider = NullCacheProvider()


def build_cache_provider(name: str, settings: Settings | None = None) -> ICacheProvider:
    """Instantiate the cache backend registered under *name*.

    Raises:
        ConfigurationError: If *name* is not one of :data:`CACHE_BACKENDS`.
    """
    backend = name.strip().lower()
    if backend == "null":
        return NullCacheProvider()
    if backend == "memory":
        settings = settings or Settings()
        return MemoryCacheProvider(max_size=settings.cache_max_size, ttl=settings.cache_ttl)
    raise ConfigurationError(
        message=f"Unknown cache backend {name!r} (expected one of {', '.join(CACHE_BACKENDS)})",
        provider_name="cache",
    )


def default_cache_provider(provider: ICacheProvider | str | None = None) -> ICacheProvider:
    """Set and/or return the process-wide default cache provider.

    Args:
        provider: A provider instance or a backend name to install as the
                  new default.  ``None`` leaves the default unchanged.

    Returns:
        The current default provider.
    """
    global _default_provider
    if provider is not None:
        if isinstance(provider, str):
            provider = build_cache_provider(provider)
        _default_provider = provider
        logger.debug("default_cache_provider_set", provider=provider.get_provider_name())
    return _default_provider


def reset_default_cache_provider() -> ICacheProvider:
    """Restore a fresh :class:`NullCacheProvider` as the default."""
    global _default_provider
    _default_provider = NullCacheProvider()
    return _default_provider


def configure_default_cache(settings: Settings) -> ICacheProvider:
    """Install the backend named by ``settings.cache_backend`` as the default."""
    return default_cache_provider(build_cache_provider(settings.cache_backend, settings))


def cache_for_settings(settings: Settings) -> ICacheProvider:
    """Return the cache a settings-built client should use.

    An explicitly configured ``cache_backend`` wins; the process default is
    reused when it is already that backend, so clients keep sharing it.
    Without an explicit backend the process default is returned.
    """
    current = default_cache_provider()
    if "cache_backend" not in settings.model_fields_set:
        return current
    if current.get_provider_name() == settings.cache_backend.strip().lower():
        return current
    return build_cache_provider(settings.cache_backend, settings)
