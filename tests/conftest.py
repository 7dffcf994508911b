"""Shared pytest fixtures for the imgur-api test suite."""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from imgur_api.client import ImgurClient
from imgur_api.config.cache_defaults import reset_default_cache_provider
from imgur_api.interfaces.http_transport import IHttpTransport, TransportResponse


@pytest.fixture(autouse=True)
def _reset_default_cache() -> Iterator[None]:
    """Every test starts and ends with the null cache as process default."""
    reset_default_cache_provider()
    yield
    reset_default_cache_provider()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer IMGUR_* variables and .env files out of the tests."""
    for name in list(os.environ):
        if name.startswith("IMGUR_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def image_payload() -> dict[str, Any]:
    """A trimmed ``GET image/{id}`` response."""
    return {
        "data": {
            "id": "abc123",
            "title": "A cat",
            "description": None,
            "type": "image/png",
            "animated": False,
            "width": 640,
            "height": 480,
            "views": 42,
            "link": "https://i.imgur.com/abc123.png",
        },
        "success": True,
        "status": 200,
    }


@pytest.fixture
def album_payload() -> dict[str, Any]:
    """A trimmed ``GET album/{id}`` response."""
    return {
        "data": {
            "id": "alb42",
            "title": "Cats",
            "images_count": 2,
            "privacy": "public",
            "images": [{"id": "abc123"}, {"id": "def456"}],
        },
        "success": True,
        "status": 200,
    }


@pytest.fixture
def ok_response() -> Callable[[Any], TransportResponse]:
    """Build a successful transport response around a JSON payload."""

    def _build(payload: Any) -> TransportResponse:
        return TransportResponse(success=True, status_code=200, content=json.dumps(payload))

    return _build


@pytest.fixture
def mock_transport() -> MagicMock:
    """Mock IHttpTransport returning an empty successful envelope by default.

    Override with ``mock_transport.request.return_value = ...`` or
    ``mock_transport.request.side_effect = [...]``.
    """
    mock = MagicMock(spec=IHttpTransport)
    mock.request.return_value = TransportResponse(
        success=True, status_code=200, content='{"data": {}, "success": true, "status": 200}'
    )
    return mock


@pytest.fixture
def client(mock_transport: MagicMock) -> ImgurClient:
    """Anonymous client wired to the mock transport."""
    return ImgurClient.with_client("my-client-id", "my-secret", transport=mock_transport)


@pytest.fixture
def sample_image_file(tmp_path: Path) -> Path:
    path = tmp_path / "cat.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image-bytes")
    return path
