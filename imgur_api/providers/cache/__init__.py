"""Cache providers.

NullCacheProvider is the default and caches nothing.  MemoryCacheProvider
is a TTL dict suitable for a single process; for anything shared across
processes, implement ICacheProvider over another store.
"""

from imgur_api.providers.cache.memory_cache import MemoryCacheProvider
from imgur_api.providers.cache.null_cache import NullCacheProvider

__all__ = ["MemoryCacheProvider", "NullCacheProvider"]
