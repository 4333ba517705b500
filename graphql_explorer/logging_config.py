"""Logging setup for graphql_explorer.

All modules obtain their logger through :func:`get_logger` so records share
the ``graphql_explorer`` parent and can be configured in one place.
"""

import logging
from functools import lru_cache

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "graphql_explorer"


@lru_cache()
def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``graphql_explorer`` namespace.

    Args:
        name: Logger name, usually ``__name__``. Names that already start
            with the package name are used as is.

    Returns:
        Logger instance.
    """
    parent_logger = logging.getLogger(ROOT_LOGGER_NAME)

    if not name:
        return parent_logger

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)

    return parent_logger.getChild(name)


def setup_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Attach a rich handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Log level name or number.
        console: Console to write to (defaults to stderr).
    """
    logger = get_logger()
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.debug("Logging configured at level %s", level)
