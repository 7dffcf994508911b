"""Library settings loaded from environment variables via pydantic-settings.

Values come from, in priority order:

  1. Environment variables, prefixed ``IMGUR_`` (e.g. ``IMGUR_CLIENT_ID``)
  2. A ``.env`` file in the working directory
  3. The defaults below

Empty strings mean "not configured".
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """imgur-api settings."""

    model_config = SettingsConfigDict(
        env_prefix="IMGUR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Credentials ===
    client_id: str = ""
    client_secret: str = ""
    access_token: str = ""

    # === API ===
    api_endpoint: str = "https://api.imgur.com"
    api_version: str = "3"
    http_timeout: float = 30.0

    # === Response cache ===
    cache_backend: str = "null"  # "null" or "memory"
    cache_max_size: int = 1000
    cache_ttl: int = 3600

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    def has_credentials(self) -> bool:
        """Return ``True`` if either a client id or an access token is set."""
        return bool(self.client_id or self.access_token)
