"""Structured logging for imgur-api using structlog.

Every module logs through :func:`get_logger`.  Nothing is configured on
import; an application opts in with :func:`configure_logging` (explicit
level and renderer) or :func:`configure_logging_from_settings` (driven by
``IMGUR_LOG_LEVEL`` / ``IMGUR_APP_ENV``).

Rendering is console output in development and one JSON object per line in
production.  Only the ``imgur_api`` and ``httpx`` stdlib loggers are routed
through the structlog formatter, so the host application's root logger is
left alone.  Credential-bearing keys are masked before rendering.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from imgur_api.config.settings import Settings

ROUTED_LOGGERS = ("imgur_api", "httpx")

_SENSITIVE_KEYS = frozenset({"authorization", "access_token", "refresh_token", "client_secret"})
_MASK = "***"


def redact_credentials(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask credential values so tokens never reach log output."""
    for key in event_dict:
        if key.lower() in _SENSITIVE_KEYS and event_dict[key]:
            event_dict[key] = _MASK
    return event_dict


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> structlog.BoundLogger:
    """Configure structlog and route the library's stdlib loggers through it.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        json_output: Render JSON lines instead of coloured console output.

    Returns:
        A logger bound to the ``imgur_api`` name.
    """
    level = logging.getLevelName(log_level.upper())

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        redact_credentials,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    for name in ROUTED_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers[:] = [handler]
        stdlib_logger.setLevel(level)
        stdlib_logger.propagate = False

    return get_logger("imgur_api")


def configure_logging_from_settings(settings: Settings) -> structlog.BoundLogger:
    """Configure logging from ``settings.log_level`` and ``settings.app_env``.

    ``app_env == "production"`` selects JSON output.
    """
    return configure_logging(
        log_level=settings.log_level,
        json_output=settings.app_env.strip().lower() == "production",
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound with *name* (typically ``__name__``)."""
    return structlog.get_logger(logger_name=name)
