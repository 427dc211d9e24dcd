"""
Logging for the SOLID principles demos.

Modules log through ``logging.getLogger(__name__)``, which places them under
the ``solid_principles`` logger. ``setup_logging`` attaches a rich handler
(and optionally a plain file handler) to that logger only, so save failures
from ``FileManager`` and ``Report`` show up on stderr without touching the
root logger.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "solid_principles"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

# Handlers installed by the last setup_logging call
_installed: list[logging.Handler] = []


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger from a verbosity level.

    Calling it again replaces the handlers from the previous call.

    Args:
        verbosity: One of "quiet", "normal" or "verbose"
        log_file: Optional file that also receives every record (appended)

    Returns:
        The solid_principles logger
    """
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    logger = logging.getLogger(PACKAGE_LOGGER)
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()

    _installed.append(
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_path=verbose,
        )
    )
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        _installed.append(file_handler)

    for handler in _installed:
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger
