"""Console logging setup for the fruitkit CLI.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, once, by the CLI entry point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "fruitkit"


def config_console_handler(level: int = logging.WARNING) -> RichHandler:
    """Return a :class:`RichHandler` writing to stderr at *level*.

    Debug level adds source paths to every record.
    """
    debug_mode = level <= logging.DEBUG
    handler = RichHandler(
        console=Console(stderr=True),
        level=level,
        show_time=debug_mode,
        show_path=debug_mode,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    return handler


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a console handler to the project logger and return it.

    Calling this again replaces the previously installed handler rather
    than stacking a second one.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level!r}")
        level = resolved

    project_logger = logging.getLogger(PROJECT_PREFIX)
    for existing in list(project_logger.handlers):
        if isinstance(existing, RichHandler):
            project_logger.removeHandler(existing)

    project_logger.addHandler(config_console_handler(level))
    project_logger.setLevel(level)
    # httpx logs every request at INFO; only surface it when debugging.
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    )
    return project_logger
