"""Helpers for common string manipulation."""

import re
import typing as tp

from fnkit.core.types import QueryPairs, validate
from fnkit.functional.predicates import is_string

__all__ = [
    "first_char_is",
    "append_str",
    "snakeify",
    "camelize",
    "insert_commas_in_number",
    "build_query_string",
    "make_regexs",
]

_SNAKE_CAPS = re.compile(r"([a-z0-9])([A-Z]+)")
_SNAKE_SEPARATORS = re.compile(r"[-\s]+")
_CAMEL_SEPARATORS = re.compile(r"[-_\s]+(.)?")
# Not sign or decimal aware: "1234.5678" becomes "1,234.5,678"
_EVERY_THIRD_DIGIT = re.compile(r"\B(?=(?:[0-9]{3})+(?![0-9]))")


def first_char_is(char: str, text: str) -> bool:
    """Return True if ``text`` starts with ``char``.

    Example:
        >>> first_char_is("o", "one")
        True
        >>> first_char_is("t", "one")
        False
    """
    return text[:1] == char


def append_str(suffix: str, text: str) -> str:
    """Add ``suffix`` to the end of ``text``.

    Example:
        >>> append_str(" are bad at golf", "you")
        'you are bad at golf'
    """
    return text + suffix


def snakeify(text: str) -> str:
    """Convert text to snake case.

    Example:
        >>> snakeify("MozTransform")
        'moz_transform'
    """
    text = _SNAKE_CAPS.sub(r"\1_\2", text.strip())
    return _SNAKE_SEPARATORS.sub("_", text).lower()


def camelize(text: str) -> str:
    """Convert text to camel case.

    Every run of hyphens, underscores or whitespace is removed and the
    character following it, if any, is upper-cased.

    Example:
        >>> camelize("moz_transform")
        'mozTransform'
    """
    return _CAMEL_SEPARATORS.sub(
        lambda m: m.group(1).upper() if m.group(1) else "", text.strip()
    )


def insert_commas_in_number(value: tp.Union[str, int, float]) -> str:
    """Stringify ``value`` and insert a comma before every group of three digits.

    Example:
        >>> insert_commas_in_number(2000)
        '2,000'
        >>> insert_commas_in_number("200")
        '200'
    """
    text = value if is_string(value) else str(value)
    return _EVERY_THIRD_DIGIT.sub(",", text)


def build_query_string(pairs: tp.Iterable[tp.Tuple[tp.Any, tp.Any]]) -> str:
    """Join ``(name, value)`` pairs into a query string.

    Components are not URL-encoded, that is left to the caller. A ``None``
    value renders as an empty string (``name=``).

    Raises:
        InvalidArgumentError: If a pair does not have exactly two items.

    Example:
        >>> build_query_string([("param1", "value1"), ("param2", "value2")])
        'param1=value1&param2=value2'
    """
    pairs = validate(QueryPairs, list(pairs), "query pairs")
    return "&".join(
        f"{name}={'' if value is None else value}" for name, value in pairs
    )


def make_regexs(words: tp.Iterable[str]) -> tp.Dict[str, tp.Callable[[str], bool]]:
    """Build a mapping from each word to a predicate testing if a string contains it."""

    def contains(pattern: re.Pattern) -> tp.Callable[[str], bool]:
        return lambda text: pattern.search(text) is not None

    return {word: contains(re.compile(re.escape(word))) for word in words}
