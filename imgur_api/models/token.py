"""User access token model.

Mirrors the JSON returned by Imgur's OAuth token endpoint.  Only
``access_token`` is required; the rest is carried along when present.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class AccessToken(BaseModel):
    """A user-scoped bearer credential."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str
    token_type: str = "Bearer"
    refresh_token: str | None = None
    expires_in: int | None = None
    scope: str | None = None
    account_username: str | None = None
    account_id: int | None = None

    @classmethod
    def coerce(cls, value: AccessToken | Mapping[str, Any] | str) -> AccessToken:
        """Build a token from a model, a token-endpoint mapping or a bare string.

        A string of the form ``"Bearer abc"`` is split into type and value.  A
        mapping without an ``access_token`` yields an unusable token, so the
        client falls back to the anonymous credential.
        """
        if isinstance(value, AccessToken):
            return value
        if isinstance(value, Mapping):
            payload = dict(value)
            payload["access_token"] = payload.get("access_token") or ""
            return cls.model_validate(payload)
        token_type, _, access_token = value.strip().partition(" ")
        if access_token and token_type.lower() == "bearer":
            return cls(access_token=access_token.strip())
        return cls(access_token=value.strip())

    def is_usable(self) -> bool:
        return bool(self.access_token)

    def authorization(self) -> str:
        """Return the ``Authorization`` header value for this token."""
        return f"{self.token_type} {self.access_token}"
