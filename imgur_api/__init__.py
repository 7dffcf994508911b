"""imgur-api: a small synchronous client for the Imgur API.

    >>> client = ImgurClient.with_client("my-client-id")
    >>> image = client.image().fetch("abc123")
    >>> image.get("link")

Re-exports
----------
ImgurClient
    Request construction, credential selection and response caching.
Image, Album, Resource
    Resources populated from API responses.
AccessToken
    User access token model.
default_cache_provider, reset_default_cache_provider
    Process-wide cache default for new clients.
"""

from imgur_api.client import API_VERSION, ENDPOINT, ImgurClient
from imgur_api.config import (
    Settings,
    configure_default_cache,
    default_cache_provider,
    load_config,
    reset_default_cache_provider,
)
from imgur_api.interfaces import ICacheProvider, IHttpTransport, TransportResponse, UploadFile
from imgur_api.models import AccessToken, Album, Image, Resource
from imgur_api.providers.cache import MemoryCacheProvider, NullCacheProvider
from imgur_api.providers.transport import HttpxTransport
from imgur_api.utils import (
    ConfigurationError,
    ImgurError,
    configure_logging,
    configure_logging_from_settings,
)

__version__ = "0.1.0"

__all__ = [
    "API_VERSION",
    "ENDPOINT",
    "AccessToken",
    "Album",
    "ConfigurationError",
    "HttpxTransport",
    "ICacheProvider",
    "IHttpTransport",
    "Image",
    "ImgurClient",
    "ImgurError",
    "MemoryCacheProvider",
    "NullCacheProvider",
    "Resource",
    "Settings",
    "TransportResponse",
    "UploadFile",
    "configure_default_cache",
    "configure_logging",
    "configure_logging_from_settings",
    "default_cache_provider",
    "load_config",
    "reset_default_cache_provider",
]
