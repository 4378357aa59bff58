"""Logging setup for recordgen.

Library modules only obtain loggers through get_logger(); handlers are
installed by the application (the CLI) through setup_logging().
"""

import logging
from typing import IO

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "recordgen"

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: str | int = "WARNING", stream: IO[str] | None = None) -> None:
    """Configure the package logger with a rich console handler.

    Calling it again replaces the previous handler, so the handler
    count stays at one.

    Args:
        level: Level name or number; unknown names fall back to WARNING.
        stream: Output stream for the handler (default: stderr).
    """
    if isinstance(level, str):
        numeric_level = LEVELS.get(level.upper(), logging.WARNING)
    else:
        numeric_level = level

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    console = Console(file=stream, stderr=stream is None)
    handler = RichHandler(
        console=console,
        level=numeric_level,
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module of the package."""
    return logging.getLogger(name)
