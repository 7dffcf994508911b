"""Custom exception hierarchy for imgur-api.

All library exceptions inherit from :class:`ImgurError`, which carries an
optional ``provider_name`` so callers can tell which collaborator (cache
backend, transport, settings) raised the failure.

    ImgurError  (base -- catch-all for any imgur-api error)
    +-- ConfigurationError  (missing credentials / unknown cache backend)

Runtime request failures are not part of this hierarchy:
transport errors collapse to a ``None`` result from ``ImgurClient.query``
and are reported through structured log lines instead.
"""


class ImgurError(Exception):
    """Base exception for all imgur-api errors.

    ``__str__`` prefixes the provider name in brackets for log scanning,
    e.g. ``[cache] Unknown cache backend 'redis'``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ConfigurationError(ImgurError):
    """Raised when configuration is invalid or missing."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
