"""Logging setup for the commitvar command line.

Components log through standard library loggers below ``commitvar``.
:func:`configure_logging` is called once at startup and decides which
messages reach the terminal: info and error messages always, warnings only
with ``-w``, debug messages only with ``-d``.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "commitvar"


class LevelGate(logging.Filter):
    """Let records through depending on which optional levels are enabled."""

    def __init__(self, warnings: bool = False, debug: bool = False) -> None:
        super().__init__()
        self.warnings = warnings
        self.debug = debug

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno == logging.DEBUG:
            return self.debug
        if record.levelno == logging.WARNING:
            return self.warnings
        return record.levelno >= logging.INFO


def configure_logging(
    warnings: bool = False,
    debug: bool = False,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Attach a rich stderr handler to the ``commitvar`` logger."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler.addFilter(LevelGate(warnings=warnings, debug=debug))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger
