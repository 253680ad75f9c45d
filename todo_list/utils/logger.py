"""Logging configuration for the to-do list.

Modules log through ``logging.getLogger(__name__)``, which places them under
the ``todo_list`` logger configured here.

Example:
    >>> import logging
    >>> logging.getLogger("todo_list").setLevel(logging.DEBUG)

"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger("todo_list")

logger.setLevel(logging.WARNING)

# Add a null handler to prevent "No handler found" warnings
logger.addHandler(logging.NullHandler())


def configure_logging(
    level: int | str = logging.INFO,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again replaces the handler added by the previous call
    instead of stacking another one.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        format_string: Custom format string for log messages.
        stream: Output stream (defaults to sys.stderr).

    Returns:
        The configured package logger.

    """
    if format_string is None:
        format_string = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    if stream is None:
        stream = sys.stderr

    for handler in list(logger.handlers):
        if getattr(handler, "_todo_list_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._todo_list_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
