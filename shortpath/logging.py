"""Package-wide logging setup for shortpath."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "shortpath"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the one handler of the ``shortpath`` logger.

    Args:
        level: Package log level.
        format_string: Record format (default: ``DEFAULT_FORMAT``).
        handler: Handler to install (default: stdout).
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Module logger under ``shortpath``; pass ``__name__``."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    setup_root_logger()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Forget the installed handler; the next setup call reinstalls one."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
