"""Abstract base class for the HTTP transport collaborator.

The client never talks to an HTTP library directly; it hands a method, URI,
body and headers to an :class:`IHttpTransport` and gets back a
:class:`TransportResponse` carrying a success flag and the body text.
Transport errors never propagate as exceptions: implementations log the
detail and report ``success=False``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union


@dataclass(frozen=True)
class UploadFile:
    """A local file to be sent as a multipart file part.

    Attributes
    ----------
    path:
        Filesystem path of the file to upload.
    filename:
        Name reported in the multipart part; defaults to the path's basename.
    """

    path: str | Path
    filename: str | None = None

    @property
    def part_name(self) -> str:
        return self.filename or Path(self.path).name


@dataclass(frozen=True)
class TransportResponse:
    """Outcome of a single HTTP round trip.

    Attributes
    ----------
    success:
        ``True`` for a 2xx response.
    status_code:
        HTTP status, or ``None`` when no response was received.
    content:
        Response body text (empty when no response was received).
    """

    success: bool
    status_code: int | None = None
    content: str = ""


RequestBody = Union[str, bytes, Mapping[str, Any]]


class IHttpTransport(ABC):
    """Contract for performing one blocking HTTP request."""

    @abstractmethod
    def request(
        self,
        method: str,
        uri: str,
        body: RequestBody,
        headers: Mapping[str, str],
    ) -> TransportResponse:
        """Perform the request and report its outcome.

        Parameters
        ----------
        method:
            HTTP method, e.g. ``"GET"`` or ``"POST"``.
        uri:
            Absolute request URI.
        body:
            Raw content (``str``/``bytes``; empty means no body) or a mapping
            of form fields, where :class:`UploadFile` values are file parts.
        headers:
            Extra request headers (the client always sends ``Authorization``).
        """

    def close(self) -> None:
        """Release any underlying connections."""
