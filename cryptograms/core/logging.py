"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this installs a
Rich console handler on the package logger so records from the engines,
corpora and API share one colour-coded stream on stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "cryptograms"

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a Rich handler to the package logger.

    Safe to call more than once: existing handlers are replaced, so app
    factories rebuilt in tests do not stack duplicate output.

    Args:
        level: Minimum severity name (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level.upper())
    logger.addHandler(handler)

    return logger
