"""Structured logging for the configuration panel core.

:func:`configure_logging` is called by :class:`~bot_config.panel.ConfigPanel`
on construction; hosts that configure logging themselves can call it first
with their own :class:`~bot_config.settings.Settings` or ignore it.
"""

from __future__ import annotations

import logging
import logging.config
from threading import Lock

import structlog
import structlog.contextvars
import structlog.stdlib
import structlog.types

from .constants import SERVICE_NAME
from .settings import Settings, get_settings

_LOGGING_INITIALISED = False
_LOGGING_LOCK = Lock()


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, str):
        return logging.INFO
    return int(resolved)


def _renderer(settings: Settings) -> structlog.types.Processor:
    if settings.log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog events through stdlib logging, once per process."""

    global _LOGGING_INITIALISED
    if _LOGGING_INITIALISED:
        return

    with _LOGGING_LOCK:
        if _LOGGING_INITIALISED:
            return

        settings = settings or get_settings()
        level = _resolve_level(settings.log_level)

        structlog.configure(
            processors=[
                *_shared_processors(),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        # Only the package logger is touched; the host keeps its root setup.
        logging.config.dictConfig(
            {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": {
                    "bot_config": {
                        "()": structlog.stdlib.ProcessorFormatter,
                        "foreign_pre_chain": _shared_processors(),
                        "processors": [
                            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                            _renderer(settings),
                        ],
                    }
                },
                "handlers": {
                    "bot_config": {
                        "class": "logging.StreamHandler",
                        "formatter": "bot_config",
                        "level": level,
                    }
                },
                "loggers": {
                    "bot_config": {
                        "handlers": ["bot_config"],
                        "level": level,
                        "propagate": False,
                    },
                },
            }
        )

        structlog.contextvars.bind_contextvars(service=SERVICE_NAME)
        _LOGGING_INITIALISED = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Helper returning a structured logger bound to *name*."""
    return structlog.stdlib.get_logger(name)
