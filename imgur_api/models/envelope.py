"""The response wrapper Imgur puts around every payload."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class ApiEnvelope(BaseModel):
    """``{"data": ..., "success": bool, "status": int}``."""

    model_config = ConfigDict(frozen=True, extra="allow")

    data: Any = None
    success: bool | None = None
    status: int | None = None

    @classmethod
    def decode(cls, raw: str | None) -> ApiEnvelope | None:
        """Parse *raw* into an envelope, or ``None`` if it is not one."""
        if not raw:
            return None
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            return None
        if not isinstance(payload, dict) or "data" not in payload:
            return None
        try:
            return cls.model_validate(payload)
        except ValidationError:
            return None
