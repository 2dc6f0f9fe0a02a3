"""Logging setup for json_to_code.

Modules obtain loggers with :func:`get_logger`; the CLI calls
:func:`setup_logging` once to route records through rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "json_to_code"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a rich handler writing to stderr to the package logger.

    Calling it again only updates the level.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package logger.
    """
    global _handler

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(_handler)

    _handler.setLevel(level)
    return logger
