"""Reusable type definitions for fnkit helpers.

This module provides type aliases and constrained types shared by the
functional helpers, together with the pydantic adapters used to validate
arguments at the few places where a helper refuses its input.

Type Aliases:
    PathKey: A single descent step, a mapping key or a sequence index.
    Path: An ordered list of path keys.
    NonEmptyPath: A path with at least one key.
    Record: A mapping from field name to value.
    RecordList: A list of records.
    RenameMap: A mapping from old key to new key.
    QueryPair: A ``(name, value)`` pair.
    QueryPairs: A list of query pairs.
"""

from typing import Annotated, Any, Dict, Hashable, List, Tuple, Union

import annotated_types as at
from pydantic import StrictInt, StrictStr, TypeAdapter, ValidationError

from fnkit.core.errors import InvalidArgumentError

__all__ = [
    "PathKey",
    "Path",
    "NonEmptyPath",
    "Record",
    "RecordList",
    "RenameMap",
    "QueryPair",
    "QueryPairs",
    "validate",
]

# Strict so that True is never taken for index 1
PathKey = Union[StrictStr, StrictInt]
Path = List[PathKey]
NonEmptyPath = Annotated[Path, at.MinLen(1)]

Record = Dict[Hashable, Any]
RecordList = List[Record]
RenameMap = Dict[Hashable, Hashable]

QueryPair = Tuple[Any, Any]
QueryPairs = List[QueryPair]

_ADAPTERS: Dict[Any, TypeAdapter] = {}


def _adapter(tp) -> TypeAdapter:
    try:
        return _ADAPTERS[tp]
    except KeyError:
        adapter = _ADAPTERS[tp] = TypeAdapter(tp)
        return adapter
    except TypeError:
        # unhashable annotation
        return TypeAdapter(tp)


def validate(tp, value, name: str = "argument"):
    """Validate ``value`` against ``tp``.

    Args:
        tp: Any of the aliases above (or another pydantic-compatible type).
        value: The value to check.
        name: Argument name used in the error message.

    Returns:
        The validated value, coerced to ``tp`` (tuples become lists, etc.).

    Raises:
        InvalidArgumentError: If the value does not match.
    """
    try:
        return _adapter(tp).validate_python(value)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"Invalid {name}: {e.errors()[0]['msg']} (got {value!r})"
        ) from e
