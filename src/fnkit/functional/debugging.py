"""Helpers for debugging function pipelines without breaking data flow.

Both helpers log their argument and hand it back untouched, so they can be
dropped anywhere inside a chain of calls::

    names = [r["name"] for r in check(filter_by_prop("type", "dragon", friends))]
"""

import logging
import typing as tp

from pydantic_core import PydanticSerializationError, to_json
from rich.pretty import pretty_repr

from fnkit.core.config import settings
from fnkit.logger.logger import get_logger

__all__ = ["check", "pretty_check"]

logger = get_logger(__name__)

T = tp.TypeVar("T")


def _level() -> int:
    return getattr(logging, settings.CHECK_LOG_LEVEL)


def check(value: T) -> T:
    """Log ``repr(value)`` and return ``value`` unchanged."""
    logger.log(_level(), "%r", value)
    return value


def pretty_check(value: T) -> T:
    """Log a pretty-printed serialization of ``value`` and return it unchanged.

    JSON-serializable values are rendered as indented JSON. Anything else
    falls back to a pretty ``repr``.
    """
    try:
        rendered = to_json(value, indent=settings.PRETTY_INDENT).decode()
    except PydanticSerializationError:
        rendered = pretty_repr(value, indent_size=settings.PRETTY_INDENT or 4)
    logger.log(_level(), "%s", rendered)
    return value
