"""Imgur resources: images and albums.

A resource is a loosely typed bag of fields copied from an API response,
plus a reference to the client used for follow-up requests.  Fields are
kept in an explicit ordered mapping (``resource.fields``) rather than as
attributes, since the key set is whatever the API returns.

Operations (``fetch``, ``upload``, ``create``) run one request through the
associated client and populate the resource in place.  They return ``None``
when no client is associated and ``self`` whenever a request was attempted,
successful or not.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from imgur_api.interfaces.http_transport import UploadFile
from imgur_api.models.envelope import ApiEnvelope
from imgur_api.utils.logging import get_logger

if TYPE_CHECKING:
    from imgur_api.client import ImgurClient

logger = get_logger(__name__)


class Resource:
    """A generic resource returned by the Imgur API."""

    endpoint = ""

    def __init__(
        self,
        client: ImgurClient | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> None:
        self._client = client
        self.fields: dict[str, Any] = {}
        if data:
            self.update(data)

    def api(self, client: ImgurClient | None = None) -> ImgurClient | None:
        """Get the associated client, replacing it first if *client* is given."""
        if client is not None:
            self._client = client
        return self._client

    # -- Field access ----------------------------------------------------------

    def update(self, payload: Any) -> None:
        """Copy every key of a JSON object into :attr:`fields`."""
        if isinstance(payload, Mapping):
            for name, value in payload.items():
                self.fields[str(name)] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __repr__(self) -> str:
        ident = self.fields.get("id")
        return f"<{type(self).__name__} id={ident!r} fields={len(self.fields)}>"

    # -- Request helpers -------------------------------------------------------

    def _require_client(self, operation: str) -> ImgurClient | None:
        if self._client is None:
            logger.error(
                "imgur_client_missing",
                resource=type(self).__name__,
                operation=operation,
            )
        return self._client

    def _populate(self, raw: str | None) -> None:
        """Copy the envelope's ``data`` object into the fields, if it decodes."""
        envelope = ApiEnvelope.decode(raw)
        if envelope is None:
            if raw:
                logger.debug("imgur_response_not_decoded", resource=type(self).__name__)
            return
        self.update(envelope.data)

    def _fetch(self, resource_id: str) -> Resource | None:
        client = self._require_client("fetch")
        if client is None:
            return None
        self._populate(client.query(f"{self.endpoint}/{resource_id}"))
        return self

    def _post(self, operation: str, data: dict[str, Any]) -> Resource | None:
        client = self._require_client(operation)
        if client is None:
            return None
        self._populate(client.query(self.endpoint, "POST", data))
        return self


def _optional_fields(**values: Any) -> dict[str, Any]:
    """Keep only the non-empty values, preserving argument order."""
    return {name: value for name, value in values.items() if value}


class Image(Resource):
    """An image hosted on Imgur."""

    endpoint = "image"

    def fetch(self, image_id: str) -> Image | None:
        """Load image *image_id* into this resource."""
        return self._fetch(image_id)

    def upload(
        self,
        image: str | Path | UploadFile,
        album: str = "",
        title: str = "",
        description: str = "",
        name: str = "",
    ) -> Image | None:
        """Upload a local image file and load the created image's fields.

        Args:
            image: Path of the file to upload.
            album: Album id to add the image to (deletehash for anonymous
                   albums).
            title: Image title.
            description: Image description.
            name: File name reported to Imgur.

        Empty optional arguments are left out of the request entirely.
        """
        upload = image if isinstance(image, UploadFile) else UploadFile(image)
        data: dict[str, Any] = {"image": upload}
        data.update(
            _optional_fields(album=album, name=name, title=title, description=description)
        )
        return self._post("upload", data)


class Album(Resource):
    """An album of images."""

    endpoint = "album"

    def fetch(self, album_id: str) -> Album | None:
        """Load album *album_id* into this resource."""
        return self._fetch(album_id)

    def create(
        self,
        title: str = "",
        description: str = "",
        privacy: str = "",
        cover: str = "",
        ids: list[str] | None = None,
        deletehashes: list[str] | None = None,
    ) -> Album | None:
        """Create a new album and load its fields.

        ``ids`` lists images to include; anonymous albums pass the images'
        ``deletehashes`` instead.  Empty arguments are not sent.
        """
        data = _optional_fields(title=title, description=description, privacy=privacy, cover=cover)
        if ids:
            data["ids[]"] = list(ids)
        if deletehashes:
            data["deletehashes[]"] = list(deletehashes)
        return self._post("create", data)
