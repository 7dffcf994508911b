"""Blocking HTTP transport built on ``httpx.Client``.

Implements :class:`IHttpTransport`.  String bodies are sent as raw content;
mapping bodies are sent as multipart form data with :class:`UploadFile`
values opened as file parts.  Failures are logged here and reported to the
caller as ``TransportResponse(success=False)``.
"""

from __future__ import annotations

import contextlib
from collections.abc import Mapping
from typing import Any

import httpx

from imgur_api.interfaces.http_transport import (
    IHttpTransport,
    RequestBody,
    TransportResponse,
    UploadFile,
)
from imgur_api.utils.logging import get_logger

logger = get_logger(__name__)

_DEFAULT_TIMEOUT = 30.0
_USER_AGENT = "imgur-api/0.1.0"


class HttpxTransport(IHttpTransport):
    """HTTP transport backed by a synchronous ``httpx.Client``.

    An externally supplied client is used as-is and left open on
    :meth:`close`; a client created here is owned and closed by the
    transport.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        timeout: float = _DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": _USER_AGENT},
            follow_redirects=True,
        )

    def request(
        self,
        method: str,
        uri: str,
        body: RequestBody,
        headers: Mapping[str, str],
    ) -> TransportResponse:
        method = method.upper()
        try:
            with contextlib.ExitStack() as stack:
                kwargs = self._body_kwargs(body, stack)
                response = self._client.request(method, uri, headers=dict(headers), **kwargs)
        except httpx.HTTPError as exc:
            logger.error("imgur_transport_failed", method=method, uri=uri, error=str(exc))
            return TransportResponse(success=False)
        except OSError as exc:
            logger.error("imgur_transport_upload_unreadable", method=method, uri=uri, error=str(exc))
            return TransportResponse(success=False)

        if not response.is_success:
            logger.warning(
                "imgur_transport_http_error",
                method=method,
                uri=uri,
                status_code=response.status_code,
            )
            return TransportResponse(
                success=False,
                status_code=response.status_code,
                content=response.text,
            )

        logger.debug(
            "imgur_transport_complete",
            method=method,
            uri=uri,
            status_code=response.status_code,
        )
        return TransportResponse(
            success=True,
            status_code=response.status_code,
            content=response.text,
        )

    @staticmethod
    def _body_kwargs(body: RequestBody, stack: contextlib.ExitStack) -> dict[str, Any]:
        """Translate *body* into ``httpx`` request keyword arguments."""
        if not body:
            return {}
        if isinstance(body, (str, bytes)):
            return {"content": body}

        data: dict[str, Any] = {}
        files: dict[str, Any] = {}
        for field, value in body.items():
            if isinstance(value, UploadFile):
                handle = stack.enter_context(open(value.path, "rb"))
                files[field] = (value.part_name, handle)
            else:
                data[field] = value

        kwargs: dict[str, Any] = {"data": data}
        if files:
            kwargs["files"] = files
        return kwargs

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
