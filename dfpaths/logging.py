"""Package-wide logging for dfpaths.

All modules log through children of the ``dfpaths`` logger. A single stream
handler is attached to that logger on first use; child loggers carry no level
of their own so ``set_global_log_level`` controls the whole package.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "dfpaths"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler once; later calls do nothing.

    Args:
        level: Initial level of the ``dfpaths`` logger.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination, a stdout stream handler when omitted.
    """
    global _configured
    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    # Records still reach the root logger (and pytest's caplog)
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name`` under the package logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI ``--verbose``/``--quiet`` switches to a log level.

    ``verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def reset_logging() -> None:
    """Drop the package handler so the next call reconfigures (for tests)."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
