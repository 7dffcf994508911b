"""Unit tests for Settings and the YAML loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from imgur_api.config.loader import load_config
from imgur_api.config.settings import Settings
from imgur_api.utils.errors import ConfigurationError


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.api_endpoint == "https://api.imgur.com"
        assert settings.api_version == "3"
        assert settings.cache_backend == "null"
        assert settings.has_credentials() is False

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMGUR_CLIENT_ID", "abc")
        monkeypatch.setenv("IMGUR_CACHE_TTL", "60")
        settings = Settings()
        assert settings.client_id == "abc"
        assert settings.cache_ttl == 60
        assert settings.has_credentials() is True

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("IMGUR_ACCESS_TOKEN=from-dotenv\n")
        assert Settings().access_token == "from-dotenv"


class TestLoadConfig:
    def test_missing_file_uses_env_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMGUR_CLIENT_ID", "env-id")
        settings = load_config("does/not/exist.yaml")
        assert settings.client_id == "env-id"
        assert settings.cache_backend == "null"

    def test_yaml_values(self, tmp_path: Path) -> None:
        path = tmp_path / "imgur.yaml"
        path.write_text("client_id: yaml-id\ncache_backend: memory\ncache_max_size: 10\n")

        settings = load_config(str(path))

        assert settings.client_id == "yaml-id"
        assert settings.cache_backend == "memory"
        assert settings.cache_max_size == 10

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "imgur.yaml"
        path.write_text("client_id: yaml-id\napi_version: '4'\n")
        monkeypatch.setenv("IMGUR_CLIENT_ID", "env-id")

        settings = load_config(str(path))

        assert settings.client_id == "env-id"
        assert settings.api_version == "4"

    def test_non_mapping_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "imgur.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))
