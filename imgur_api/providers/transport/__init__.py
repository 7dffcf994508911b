"""HTTP transports."""

from imgur_api.providers.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
