"""Comparison predicates and small numeric conversions."""

import string
import typing as tp

from fnkit.core.errors import InvalidArgumentError

__all__ = ["gt", "gte", "lt", "lte", "between", "parse_hex_binary"]


def gt(threshold: tp.Any) -> tp.Callable[[tp.Any], bool]:
    """Build a predicate that is True for values greater than ``threshold``.

    Example:
        >>> list(filter(gt(2), [1, 2, 3, 4]))
        [3, 4]
    """
    return lambda value: value > threshold


def gte(threshold: tp.Any) -> tp.Callable[[tp.Any], bool]:
    return lambda value: value >= threshold


def lt(threshold: tp.Any) -> tp.Callable[[tp.Any], bool]:
    return lambda value: value < threshold


def lte(threshold: tp.Any) -> tp.Callable[[tp.Any], bool]:
    return lambda value: value <= threshold


def between(low: tp.Any, high: tp.Any, value: tp.Any) -> bool:
    """Return True if ``low <= value <= high``.

    Works with any ordered type (ints, floats, datetimes, ...).

    Raises:
        InvalidArgumentError: If ``low`` is greater than ``high``.
    """
    if low > high:
        raise InvalidArgumentError(f"Empty range: {low!r} > {high!r}")
    return low <= value <= high


def _to_signed_byte(value: int) -> int:
    return value - 256 if value > 127 else value


def parse_hex_binary(hex_str: str) -> tp.List[int]:
    """Parse a hex string into a list of signed bytes in ``[-128, 127]``.

    The string is read two digits at a time. An odd trailing digit is parsed
    on its own.

    Args:
        hex_str: Hex digits, without a ``0x`` prefix.

    Returns:
        One signed byte per pair of digits.

    Raises:
        InvalidArgumentError: If the string holds non-hex characters.

    Example:
        >>> parse_hex_binary("48ffd7")
        [72, -1, -41]
    """
    if not all(char in string.hexdigits for char in hex_str):
        raise InvalidArgumentError(f"Invalid hex string: {hex_str!r}")

    chunks = [hex_str[i : i + 2] for i in range(0, len(hex_str), 2)]
    return [_to_signed_byte(int(chunk, 16)) for chunk in chunks]
