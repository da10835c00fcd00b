"""Logging – structlog processor chain and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

ROOT_LOGGER_NAME = "tire"

SHARED_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
    structlog.processors.StackInfoRenderer(),
]


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to a stdlib logger in the ``tire`` namespace.

    Events are handed to stdlib logging untouched, so nothing is emitted until
    a handler is attached with :meth:`LoggerFactory.configure`.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "SHARED_PROCESSORS", "get_logger"]
