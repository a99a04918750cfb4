"""Type and existence predicates.

``None`` is the only absent value. Emptiness is structural: an empty string,
sequence, mapping or set is empty, while ``None``, numbers (NaN included) and
booleans never are.
"""

import typing as tp
from collections.abc import Iterable, Set

from fnkit.core.enums import TypeName
from fnkit.core.errors import InvalidArgumentError
from fnkit.functional.objects import path_get

__all__ = [
    "type_of",
    "type_is",
    "is_string",
    "is_number",
    "is_boolean",
    "is_array",
    "is_object",
    "is_function",
    "is_nil",
    "exists",
    "is_empty",
    "is_not_empty",
    "is_nil_or_empty",
    "has_deep",
    "contains_all",
]


def type_of(value: tp.Any) -> TypeName:
    return TypeName.of(value)


def type_is(type_name: tp.Union[str, TypeName]) -> tp.Callable[[tp.Any], bool]:
    """Build a predicate checking whether a value is of the given kind.

    Args:
        type_name: A :class:`TypeName` or its name, e.g. ``"String"``.

    Returns:
        A one-argument predicate.

    Raises:
        InvalidArgumentError: If ``type_name`` is not a known kind.

    Example:
        >>> is_str = type_is("String")
        >>> is_str("i AM a string")
        True
        >>> is_str({"value": "i AM a string"})
        False
    """
    try:
        expected = TypeName.from_name(type_name)
    except ValueError as e:
        raise InvalidArgumentError(str(e)) from e

    def predicate(value: tp.Any) -> bool:
        return TypeName.of(value) is expected

    predicate.__name__ = f"is_{expected.name.lower()}"
    return predicate


is_string = type_is(TypeName.STRING)
is_number = type_is(TypeName.NUMBER)
is_boolean = type_is(TypeName.BOOLEAN)
is_array = type_is(TypeName.ARRAY)
is_object = type_is(TypeName.OBJECT)
is_function = type_is(TypeName.FUNCTION)


def is_nil(value: tp.Any) -> bool:
    return value is None


def exists(value: tp.Any) -> bool:
    """Return True if ``value`` is not ``None``."""
    return value is not None


def is_empty(value: tp.Any) -> bool:
    """Return True for an empty string, sequence, mapping or set."""
    if TypeName.of(value) in (TypeName.STRING, TypeName.ARRAY, TypeName.OBJECT):
        return len(value) == 0
    if isinstance(value, (Set, bytes, bytearray)):
        return len(value) == 0
    return False


def is_not_empty(value: tp.Any) -> bool:
    return not is_empty(value)


def is_nil_or_empty(value: tp.Any) -> bool:
    """Check whether a value is ``None`` or structurally empty.

    Example:
        >>> is_nil_or_empty({"test": "test"})
        False
        >>> is_nil_or_empty([]), is_nil_or_empty(""), is_nil_or_empty(None)
        (True, True, True)
    """
    return is_nil(value) or is_empty(value)


def has_deep(path: tp.Sequence[tp.Union[str, int]], obj: tp.Any) -> bool:
    """Check if a non-``None`` value exists at a deep path.

    Missing intermediate containers resolve to absent instead of raising. An
    empty path checks ``obj`` itself.

    Example:
        >>> obj = {"one": {"two": {"three": "here I am"}}}
        >>> has_deep(["one", "two", "three"], obj)
        True
        >>> has_deep(["one", "two", "fish"], obj)
        False
    """
    return exists(path_get(path, obj))


def contains_all(check: Iterable, search: tp.Any) -> bool:
    """Return True if every item of ``check`` is present in ``search``."""
    return all(item in search for item in check)
