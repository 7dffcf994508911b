"""Utility modules for imgur-api.

- **errors** -- exception hierarchy rooted at ImgurError.
- **logging** -- structlog setup (console or JSON rendering, credential
  masking), driven directly or from Settings.
"""

from imgur_api.utils.errors import ConfigurationError, ImgurError
from imgur_api.utils.logging import configure_logging, configure_logging_from_settings, get_logger

__all__ = [
    "ConfigurationError",
    "ImgurError",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
