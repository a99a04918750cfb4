"""Opt-in memoization for pure helpers.

None of the fnkit helpers cache on their own. Wrap one with :func:`memoize`
when repeated calls with the same arguments are expected; the cache grows
without bound until :meth:`cache_clear` is called.

Cache keys carry the type of every argument, recursively, so values that
compare or serialize alike but differ in type (``"a"`` and ``b"a"``, ``[1]``
and ``(1,)``, ``1`` and ``True``, an enum member and its value) never share
an entry.
"""

import functools
import typing as tp
from enum import Enum

from pydantic_core import PydanticSerializationError, to_json

from fnkit.logger.logger import get_logger

__all__ = ["memoize"]

logger = get_logger(__name__)

_SCALARS = (type(None), bool, int, float, str, bytes)


class _Unkeyable(Exception):
    pass


def _type_tag(value: tp.Any) -> str:
    kind = type(value)
    return f"{kind.__module__}.{kind.__qualname__}"


def _tagged(value: tp.Any, seen: tp.FrozenSet[int] = frozenset()) -> list:
    if isinstance(value, Enum):
        return [_type_tag(value), value.name]
    if isinstance(value, _SCALARS):
        return [_type_tag(value), value]
    if not isinstance(value, (list, tuple, dict, set, frozenset)):
        raise _Unkeyable(type(value))
    if id(value) in seen:
        raise _Unkeyable("circular reference")
    seen = seen | {id(value)}
    if isinstance(value, dict):
        items = [[_tagged(k, seen), _tagged(v, seen)] for k, v in value.items()]
    elif isinstance(value, (set, frozenset)):
        items = sorted((_tagged(item, seen) for item in value), key=to_json)
    else:
        items = [_tagged(item, seen) for item in value]
    return [_type_tag(value), items]


def _cache_key(args: tuple, kwargs: dict) -> tp.Optional[bytes]:
    try:
        return to_json(
            [_tagged(args), [[name, _tagged(v)] for name, v in sorted(kwargs.items())]]
        )
    except (_Unkeyable, PydanticSerializationError):
        return None


def memoize(fn: tp.Callable) -> tp.Callable:
    """Cache the results of ``fn`` keyed by its type-tagged arguments.

    Supported argument values are ``None``, booleans, numbers, strings,
    bytes, enum members and lists, tuples, dicts and sets built from them.
    Calls with any other argument (or a self-referencing container) are
    passed straight through to ``fn`` and never cached.

    Args:
        fn: A pure function.

    Returns:
        The wrapped function, with ``cache_clear()`` and ``cache_size()``
        attached.

    Example:
        >>> from fnkit.functional.strings import snakeify
        >>> cached_snakeify = memoize(snakeify)
        >>> cached_snakeify("MozTransform")
        'moz_transform'
        >>> cached_snakeify.cache_size()
        1
    """
    cache: tp.Dict[bytes, tp.Any] = {}

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        key = _cache_key(args, kwargs)
        if key is None:
            logger.debug("Arguments of %s cannot be keyed, skipping cache", fn)
            return fn(*args, **kwargs)
        if key not in cache:
            cache[key] = fn(*args, **kwargs)
        return cache[key]

    wrapper.cache_clear = cache.clear
    wrapper.cache_size = lambda: len(cache)
    return wrapper
