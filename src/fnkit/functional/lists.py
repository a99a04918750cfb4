"""Operations on lists of records.

A record is a mapping from field name to value. Matching is strict: a field
matches when it is present and equal to the wanted value *and* of the same
type family, so ``True`` never matches ``1`` and ``1.0`` never matches ``"1"``.
A ``None`` list is treated as empty.

Examples:
    >>> from fnkit.functional.lists import filter_by_prop, merge_lists_by_prop
    >>> friends = [
    ...     {"name": "trogdor", "type": "dragon"},
    ...     {"name": "kitty", "type": "cat"},
    ... ]
    >>> filter_by_prop("type", "dragon", friends)
    [{'name': 'trogdor', 'type': 'dragon'}]
    >>> source = [{"id": 1, "a": True}, {"id": 9}]
    >>> merge_lists_by_prop("id", source, [{"id": 1, "b": 2}])
    [{'id': 1, 'a': True, 'b': 2}, None]
"""

import typing as tp
from collections.abc import Mapping
from functools import partial

from fnkit.core.enums import TypeName
from fnkit.core.types import Record
from fnkit.functional.constants import default_to_empty_array

__all__ = [
    "prop_eq",
    "filter_by_prop",
    "find_by_prop",
    "drop_by_prop",
    "filter_by_id",
    "find_by_id",
    "drop_by_id",
    "filter_by_name",
    "find_by_name",
    "drop_by_name",
    "merge_lists_by_prop",
]

_MISSING = object()


def _strict_equals(a: tp.Any, b: tp.Any) -> bool:
    return TypeName.of(a) is TypeName.of(b) and a == b


def prop_eq(key: tp.Hashable, value: tp.Any) -> tp.Callable[[tp.Any], bool]:
    """Build a predicate matching records whose ``key`` field equals ``value``."""

    def predicate(record: tp.Any) -> bool:
        if not isinstance(record, Mapping):
            return False
        found = record.get(key, _MISSING)
        return found is not _MISSING and _strict_equals(found, value)

    return predicate


def filter_by_prop(
    key: tp.Hashable, value: tp.Any, items: tp.Optional[tp.Iterable[Record]] = None
) -> tp.List[Record]:
    """Keep the records whose ``key`` field equals ``value``, in order.

    Args:
        key: Field to match on.
        value: Value the field must equal.
        items: Records to filter. ``None`` is treated as an empty list.

    Returns:
        A new list holding the matching records.
    """
    matches = prop_eq(key, value)
    return [record for record in default_to_empty_array(items) if matches(record)]


def find_by_prop(
    key: tp.Hashable, value: tp.Any, items: tp.Optional[tp.Iterable[Record]] = None
) -> tp.Optional[Record]:
    """Return the first record whose ``key`` field equals ``value``, or ``None``."""
    matches = prop_eq(key, value)
    return next(
        (record for record in default_to_empty_array(items) if matches(record)), None
    )


def drop_by_prop(
    key: tp.Hashable, value: tp.Any, items: tp.Optional[tp.Iterable[Record]] = None
) -> tp.List[Record]:
    """Drop the records whose ``key`` field equals ``value``, keeping order."""
    matches = prop_eq(key, value)
    return [record for record in default_to_empty_array(items) if not matches(record)]


# lookups for common property names
filter_by_id = partial(filter_by_prop, "id")
find_by_id = partial(find_by_prop, "id")
drop_by_id = partial(drop_by_prop, "id")

filter_by_name = partial(filter_by_prop, "name")
find_by_name = partial(find_by_prop, "name")
drop_by_name = partial(drop_by_prop, "name")


def merge_lists_by_prop(
    prop: tp.Hashable,
    source: tp.Optional[tp.Iterable[Record]],
    search: tp.Optional[tp.Iterable[Record]],
) -> tp.List[tp.Optional[dict]]:
    """Join two lists of records on equality of ``prop``.

    Each record of ``source`` is merged with the first record of ``search``
    holding the same ``prop`` value. Fields from the search record win on
    conflict. The output has exactly one slot per source record, in source
    order, and a slot is ``None`` when the source record has no match.

    Args:
        prop: Name of the property to merge by.
        source: Records driving the output order.
        search: Records to project fields from.

    Returns:
        List aligned with ``source``; callers must be prepared to drop ``None``.

    Example:
        >>> source = [{"id": 1, "likes": "gibbons"}, {"id": 3}]
        >>> search = [{"id": 1, "first": "Bob"}, {"id": 2, "first": "Rob"}]
        >>> merge_lists_by_prop("id", source, search)
        [{'id': 1, 'likes': 'gibbons', 'first': 'Bob'}, None]
    """
    search = list(default_to_empty_array(search))
    merged = []
    for record in default_to_empty_array(source):
        value = record.get(prop, _MISSING) if isinstance(record, Mapping) else _MISSING
        match = None if value is _MISSING else find_by_prop(prop, value, search)
        merged.append(None if match is None else {**record, **match})
    return merged
