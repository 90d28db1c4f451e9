"""Structured logging for the order utilities.

Library modules only ever call :func:`get_logger`; nothing here touches
global logging state on import.  Applications that want the package's
output opt in once at start-up::

    from poly_order_utils import setup_logging
    setup_logging()              # JSON in prod, coloured console in dev

Calling :func:`setup_logging` again replaces the handler it installed
earlier and leaves every other root handler alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any, MutableMapping, Optional

import structlog

from poly_order_utils.config.settings import settings

HANDLER_NAME = "poly_order_utils"

# Event keys whose values never reach a log sink
SECRET_KEYS = frozenset({"private_key", "key", "secret", "password", "passphrase", "api_secret"})
REDACTED = "***"


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask signing material passed as event keys."""
    for key in event_dict.keys() & SECRET_KEYS:
        event_dict[key] = REDACTED
    return event_dict


def setup_logging(
    level: Optional[str] = None,
    env: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Configure structlog and route it through one stdlib handler.

    *level* and *env* default to ``settings.LOG_LEVEL`` and
    ``settings.APP_ENV``; *stream* defaults to stdout.  Returns the handler
    installed on the root logger.
    """
    env = env or settings.APP_ENV
    level = (level or settings.LOG_LEVEL).upper()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        redact_secrets,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if env == "dev":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a logger for *name*; configuration is left to the application."""
    return structlog.get_logger(name)
