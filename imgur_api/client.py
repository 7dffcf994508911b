"""Imgur API client.

Issues raw requests against the versioned Imgur API and hands out
:class:`~imgur_api.models.resource.Resource` objects bound to itself.

Each request carries one ``Authorization`` credential: the explicit user
access token when one is set, otherwise the anonymous ``Client-ID``
credential.  GET responses go through the client's cache provider, keyed by
``"<uri>|<credential>"``, so repeated lookups skip the network entirely.

Request failures are not raised.  :meth:`ImgurClient.query` returns ``None``
and clears the last result; the transport logs the detail.
"""

from __future__ import annotations

import json as _json
import re
from collections.abc import Callable, Mapping
from typing import Any

from imgur_api.config.cache_defaults import cache_for_settings, default_cache_provider
from imgur_api.config.settings import Settings
from imgur_api.interfaces.cache_provider import ICacheProvider
from imgur_api.interfaces.http_transport import IHttpTransport, RequestBody
from imgur_api.models.resource import Album, Image
from imgur_api.models.token import AccessToken
from imgur_api.providers.transport import HttpxTransport
from imgur_api.utils.errors import ConfigurationError
from imgur_api.utils.logging import get_logger

logger = get_logger(__name__)

ENDPOINT = "https://api.imgur.com"
API_VERSION = "3"

_ABSOLUTE_URI = re.compile(r"^https?://")

ImageFactory = Callable[["ImgurClient", Mapping[str, Any]], Image]
AlbumFactory = Callable[["ImgurClient", Mapping[str, Any]], Album]


class ImgurClient:
    """Perform raw API requests or go through the resource helpers.

    Parameters
    ----------
    client_id:
        Application client id, used for anonymous requests.
    client_secret:
        Application client secret.  Stored for completeness; requests never
        send it.
    token:
        User access token (string, token-endpoint mapping or
        :class:`AccessToken`).  Takes precedence over the client id.
    cache:
        Response cache.  Defaults to the process-wide default at the time
        of construction.
    transport:
        HTTP transport.  Defaults to a new :class:`HttpxTransport`.
    image_factory, album_factory:
        Callables ``(client, data) -> resource`` used by :meth:`image` and
        :meth:`album`.
    """

    def __init__(
        self,
        client_id: str = "",
        client_secret: str = "",
        token: AccessToken | Mapping[str, Any] | str | None = None,
        *,
        cache: ICacheProvider | None = None,
        transport: IHttpTransport | None = None,
        endpoint: str = ENDPOINT,
        version: str = API_VERSION,
        image_factory: ImageFactory = Image,
        album_factory: AlbumFactory = Album,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._token = AccessToken.coerce(token) if token is not None else None
        self._cache = cache if cache is not None else default_cache_provider()
        self._transport = transport if transport is not None else HttpxTransport()
        self._endpoint = endpoint.rstrip("/")
        self._version = version
        self._image_factory = image_factory
        self._album_factory = album_factory
        self._last_result: str | None = None
        self.last_status: int | None = None

    # -- Construction ----------------------------------------------------------

    @classmethod
    def with_client(cls, client_id: str, client_secret: str = "", **options: Any) -> ImgurClient:
        """Create a client that authenticates with the application client id."""
        return cls(client_id=client_id, client_secret=client_secret, **options)

    @classmethod
    def with_token(
        cls, token: AccessToken | Mapping[str, Any] | str, **options: Any
    ) -> ImgurClient:
        """Create a client that authenticates with an existing access token."""
        return cls(token=token, **options)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **options: Any) -> ImgurClient:
        """Create a client from :class:`Settings` (environment by default).

        Unless *options* supplies a ``cache``, an explicitly configured
        ``cache_backend`` is used; otherwise the process default.

        Raises:
            ConfigurationError: If neither a client id nor an access token
                is configured.
        """
        settings = settings or Settings()
        if not settings.has_credentials():
            raise ConfigurationError(
                message="Set IMGUR_CLIENT_ID or IMGUR_ACCESS_TOKEN",
                provider_name="imgur",
            )
        options.setdefault("endpoint", settings.api_endpoint)
        options.setdefault("version", settings.api_version)
        if "cache" not in options:
            options["cache"] = cache_for_settings(settings)
        if "transport" not in options:
            options["transport"] = HttpxTransport(timeout=settings.http_timeout)
        return cls(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            token=settings.access_token or None,
            **options,
        )

    # -- Accessors -------------------------------------------------------------

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def client_secret(self) -> str:
        return self._client_secret

    @property
    def token(self) -> AccessToken | None:
        return self._token

    @property
    def cache(self) -> ICacheProvider:
        return self._cache

    def last_result(self, json: bool = True) -> Any:
        """Return the body of the last request.

        Args:
            json: Decode the body as JSON (``None`` if it is not valid JSON)
                  rather than returning the raw string.

        Returns:
            ``None`` if there is no result or the last request failed.
        """
        if not json:
            return self._last_result
        if self._last_result is None:
            return None
        try:
            return _json.loads(self._last_result)
        except ValueError:
            return None

    # -- Resources -------------------------------------------------------------

    def image(self, data: Mapping[str, Any] | None = None) -> Image:
        """Return an image resource bound to this client."""
        return self._image_factory(self, data or {})

    def album(self, data: Mapping[str, Any] | None = None) -> Album:
        """Return an album resource bound to this client."""
        return self._album_factory(self, data or {})

    # -- Requests --------------------------------------------------------------

    def anon_token(self) -> str:
        """Return the anonymous credential for this application."""
        return f"Client-ID {self._client_id}"

    def authorization(self) -> str:
        """Return the credential sent with the next request."""
        if self._token is not None and self._token.is_usable():
            return self._token.authorization()
        return self.anon_token()

    def build_uri(self, path: str) -> str:
        """Return *path* unchanged if absolute, else prefix endpoint and version."""
        if _ABSOLUTE_URI.match(path):
            return path
        return f"{self._endpoint}/{self._version}/{path}"

    def query(self, path: str, method: str = "GET", data: RequestBody = "") -> str | None:
        """Perform a generic request and return the raw response body.

        Args:
            path: Path relative to the versioned endpoint, or an absolute URI.
            method: HTTP method.
            data: Raw body or a mapping of form fields (see
                  :class:`~imgur_api.interfaces.http_transport.IHttpTransport`).

        Returns:
            The response body, or ``None`` if the request failed.
        """
        credential = self.authorization()
        uri = self.build_uri(path)
        is_get = method.upper() == "GET"
        cache_key = f"{uri}|{credential}"

        if is_get:
            record = self._cache.fetch(cache_key)
            if record:
                logger.debug("imgur_query_cache_hit", uri=uri)
                self._last_result = record
                self.last_status = None
                return record

        response = self._transport.request(method, uri, data, {"Authorization": credential})
        self.last_status = response.status_code
        if not response.success:
            logger.warning(
                "imgur_query_failed",
                method=method.upper(),
                uri=uri,
                status_code=response.status_code,
            )
            self._last_result = None
            return None

        self._last_result = response.content
        logger.info("imgur_query_complete", method=method.upper(), uri=uri)
        if is_get:
            return self._cache.store(cache_key, response.content)
        return response.content

    # -- Lifecycle -------------------------------------------------------------

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> ImgurClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
