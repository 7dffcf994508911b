"""Interfaces for the collaborators the client depends on.

    Interface        ->  Concrete implementations (in imgur_api/providers/)
    ---------------------------------------------------------------------
    ICacheProvider   ->  NullCacheProvider, MemoryCacheProvider
    IHttpTransport   ->  HttpxTransport
"""

from imgur_api.interfaces.cache_provider import ICacheProvider
from imgur_api.interfaces.http_transport import (
    IHttpTransport,
    RequestBody,
    TransportResponse,
    UploadFile,
)

__all__ = [
    "ICacheProvider",
    "IHttpTransport",
    "RequestBody",
    "TransportResponse",
    "UploadFile",
]
