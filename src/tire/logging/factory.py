"""Logging – LoggerFactory."""
from __future__ import annotations

import logging
import os
from typing import IO, Any

import structlog

from tire.logging.processors import ROOT_LOGGER_NAME
from tire.logging.renderers import CurlRenderer


class LoggerFactory:
    """Attach a rendering handler to the ``tire`` logger.

    ``device`` is a file path or any writable text stream (``sys.stderr``,
    ``io.StringIO``...). Only one handler is managed at a time; configuring
    again replaces the previous one.
    """

    _handler: logging.Handler | None = None

    @classmethod
    def configure(
        cls,
        device: str | os.PathLike[str] | IO[str] | None = None,
        level: str | int = "info",
        json: bool = False,
    ) -> logging.Handler:
        cls.reset()

        handler: logging.Handler
        if isinstance(device, (str, os.PathLike)):
            handler = logging.FileHandler(device, encoding="utf-8")
        else:
            handler = logging.StreamHandler(device)

        renderer: Any = structlog.processors.JSONRenderer() if json else CurlRenderer()
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
            )
        )

        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.addHandler(handler)
        logger.setLevel(level.upper() if isinstance(level, str) else level)
        logger.propagate = False
        cls._handler = handler
        return handler

    @classmethod
    def reset(cls) -> None:
        """Detach and close the managed handler, silencing the ``tire`` logger."""
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        if cls._handler is not None:
            logger.removeHandler(cls._handler)
            cls._handler.close()
            cls._handler = None
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


__all__ = ["LoggerFactory"]
