"""Logging for the fnkit project.

The project logger ``fnkit`` owns the only handler (stdout) and does not
propagate, so importing fnkit never touches the root logger of the host
application. Library modules log through children named after the module
(``fnkit.functional.objects`` and so on), obtained with :func:`get_logger`;
their records flow up to the project logger and are filtered by its level.

Levels come from :mod:`fnkit.core.config`: ``FNKIT_LOG_LEVEL`` sets the
project logger, ``FNKIT_CHECK_LOG_LEVEL`` the level ``check`` and
``pretty_check`` emit at.
"""

import logging
import sys

from fnkit.core.config import settings

__all__ = ["PROJECT_LOGGER", "get_logger", "logger", "setup_logger"]

PROJECT_LOGGER = "fnkit"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = PROJECT_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger with a single stdout handler.

    Configuration happens once per name; later calls return the logger as is.

    Args:
        name: Logger name, the project logger by default.
        level: Log level name, case-insensitive. Defaults to
            ``settings.LOG_LEVEL``.
        format_string: Custom format string.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the project logger for ``name``.

    Module names inside the package (``__name__``) are used as they are; any
    other name is nested under the project logger.
    """
    if name != PROJECT_LOGGER and not name.startswith(PROJECT_LOGGER + "."):
        name = f"{PROJECT_LOGGER}.{name}"
    return logging.getLogger(name)


logger = setup_logger()
