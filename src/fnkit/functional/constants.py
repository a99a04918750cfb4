"""Constant-returning helpers, defaults and argument selectors.

Every ``empty_*`` helper ignores its arguments and builds a fresh value on
each call, so callers may mutate what they get back.
"""

import typing as tp
from collections.abc import Mapping

__all__ = [
    "empty_string",
    "empty_object",
    "empty_array",
    "default_to",
    "default_to_empty_array",
    "default_to_empty_object",
    "default_to_empty_string",
    "prop_or",
    "get_prop_or_empty_string",
    "get_prop_or_empty_object",
    "first_argument",
    "second_argument",
]


def empty_string(*_args, **_kwargs) -> str:
    return ""


def empty_object(*_args, **_kwargs) -> dict:
    return {}


def empty_array(*_args, **_kwargs) -> list:
    return []


def default_to(default: tp.Any, value: tp.Any) -> tp.Any:
    """Return ``value`` unless it is ``None``, in which case return ``default``."""
    return default if value is None else value


def default_to_empty_array(value: tp.Any) -> tp.Any:
    return default_to([], value)


def default_to_empty_object(value: tp.Any) -> tp.Any:
    return default_to({}, value)


def default_to_empty_string(value: tp.Any) -> tp.Any:
    return default_to("", value)


def prop_or(default: tp.Any, key: tp.Hashable, obj: tp.Any) -> tp.Any:
    """Return ``obj[key]`` when present and not ``None``, else ``default``.

    Args:
        default: Value returned when the property is missing.
        key: Property name.
        obj: Mapping to read from. Anything else counts as missing.

    Returns:
        The property value or the default.
    """
    if not isinstance(obj, Mapping):
        return default
    return default_to(default, obj.get(key))


def get_prop_or_empty_string(key: tp.Hashable, obj: tp.Any) -> tp.Any:
    return prop_or("", key, obj)


def get_prop_or_empty_object(key: tp.Hashable, obj: tp.Any) -> tp.Any:
    return prop_or({}, key, obj)


def first_argument(*args: tp.Any) -> tp.Any:
    """Return the first positional argument, or ``None`` if there is none."""
    return args[0] if args else None


def second_argument(*args: tp.Any) -> tp.Any:
    """Return the second positional argument, or ``None`` if there is none."""
    return args[1] if len(args) > 1 else None
