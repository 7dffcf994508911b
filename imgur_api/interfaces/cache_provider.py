"""Abstract base class for response cache providers.

Defines the key-value contract :class:`~imgur_api.client.ImgurClient` uses
to skip redundant GET requests.  Keys have the form ``"<uri>|<credential>"``
and values are raw response bodies.  Expiry and eviction are entirely the
provider's concern; the client never invalidates entries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ICacheProvider(ABC):
    """Contract for response caches.

    All operations are synchronous; the client blocks on each call.
    """

    @abstractmethod
    def fetch(self, key: str) -> str | None:
        """Return the value stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.

        Returns
        -------
        str or None
            The cached body if present; ``None`` otherwise.
        """

    @abstractmethod
    def store(self, key: str, value: str) -> str:
        """Store *value* under *key* and return it.

        Parameters
        ----------
        key:
            The cache key.
        value:
            The raw response body.

        Returns
        -------
        str
            The value as stored, so callers can ``return cache.store(...)``.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the entry stored under *key*.

        This is a no-op if the key does not exist.
        """

    def get_provider_name(self) -> str:
        """Return a short identifier used in log lines."""
        return type(self).__name__
