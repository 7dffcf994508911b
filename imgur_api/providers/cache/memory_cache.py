"""In-memory cache provider using cachetools.TTLCache.

Simple, fast cache for single-process use.  Entries are shared by every
client that was constructed while this provider was the process default.
"""

from __future__ import annotations

from cachetools import TTLCache

from imgur_api.interfaces.cache_provider import ICacheProvider
from imgur_api.utils.logging import get_logger

logger = get_logger(__name__)


def _key_uri(key: str) -> str:
    # Keys embed the credential after the last "|"; keep it out of the logs.
    return key.rsplit("|", 1)[0]


class MemoryCacheProvider(ICacheProvider):
    """In-memory TTL cache backed by ``cachetools.TTLCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    ttl:
        Time-to-live in seconds for every entry.
    """

    def __init__(self, max_size: int = 1000, ttl: int = 3600) -> None:
        self._cache: TTLCache[str, str] = TTLCache(maxsize=max_size, ttl=ttl)

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    def fetch(self, key: str) -> str | None:
        """Return the cached body for *key*, or ``None`` if missing/expired."""
        value = self._cache.get(key)
        if value is not None:
            logger.debug("cache_hit", uri=_key_uri(key))
        else:
            logger.debug("cache_miss", uri=_key_uri(key))
        return value

    def store(self, key: str, value: str) -> str:
        self._cache[key] = value
        logger.debug("cache_set", uri=_key_uri(key))
        return value

    def delete(self, key: str) -> None:
        """Remove *key* from the cache (no-op if absent)."""
        self._cache.pop(key, None)
        logger.debug("cache_delete", uri=_key_uri(key))

    def __len__(self) -> int:
        return len(self._cache)

    def get_provider_name(self) -> str:
        return "memory"
