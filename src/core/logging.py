"""Structured logging setup (structlog over stdlib logging).

On import, records from the `tab_dispatch` logger tree go to a NullHandler so
that a host embedding the core sees nothing until it calls
`configure_logging`.
"""

from __future__ import annotations

import logging
import sys

import structlog

from core.config import AppSettings

LOGGER_NAME = "tab_dispatch"

_configured = False


def _install(handler: logging.Handler, level: int, renderer: structlog.typing.Processor) -> None:
    root = logging.getLogger(LOGGER_NAME)
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Sin caché: una reconfiguración posterior aplica también a loggers ya usados.
        cache_logger_on_first_use=False,
    )


def reset_logging() -> None:
    """Return to the silent import-time configuration."""

    global _configured
    _install(logging.NullHandler(), logging.WARNING, structlog.processors.JSONRenderer())
    _configured = False


def configure_logging(settings: AppSettings | None = None, *, force: bool = False) -> None:
    """Send logs to stderr; later calls are no-ops unless `force`."""

    global _configured
    if _configured and not force:
        return

    settings = settings or AppSettings()
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    _install(handler, level, renderer)
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(f"{LOGGER_NAME}.{name}")


reset_logging()
