"""Logging setup for the ``spheresegments`` logger namespace."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """Attach a stderr handler, and a file handler when ``log_file`` is set.

    Stdout stays reserved for the calculator transcript. Calling this
    again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger("spheresegments")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized.")
    return logger
