"""No-op cache provider: every lookup misses, nothing is kept."""

from __future__ import annotations

from imgur_api.interfaces.cache_provider import ICacheProvider


class NullCacheProvider(ICacheProvider):
    """Cache that never stores anything.  The process-wide default."""

    def fetch(self, key: str) -> str | None:
        return None

    def store(self, key: str, value: str) -> str:
        return value

    def delete(self, key: str) -> None:
        return None

    def get_provider_name(self) -> str:
        return "null"
