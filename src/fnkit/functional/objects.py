"""Deep object access, projection and key manipulation.

Paths are ordered lists of keys. String keys index mappings, integer keys
(or all-digit strings) index sequences. Resolution never raises on missing
data: any segment that cannot be followed resolves the whole path to ``None``.

Examples:
    >>> from fnkit.functional.objects import pick_deep, rename_keys
    >>> obj = {"a": {"b": {"x": 1, "y": 2, "z": 3}}}
    >>> pick_deep(["a", "b"], ["x", "y"], obj)
    {'b': {'x': 1, 'y': 2}}
    >>> rename_keys({"three": "wigglesaurus"}, {"one": 1, "three": 3})
    {'one': 1, 'wigglesaurus': 3}
"""

import typing as tp
from collections.abc import Mapping, Sequence

from fnkit.core.config import settings
from fnkit.core.errors import InvalidArgumentError
from fnkit.core.types import NonEmptyPath, Path, RenameMap, validate
from fnkit.logger.logger import get_logger

__all__ = [
    "path_get",
    "pick_deep",
    "flatten",
    "all_keys_containing",
    "any_prop_satisfies",
    "map_keys",
    "rename_keys",
]

logger = get_logger(__name__)

_MISSING = object()


def _is_list_like(value: tp.Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _step(container: tp.Any, key: tp.Any) -> tp.Any:
    if isinstance(container, Mapping):
        return container.get(key, _MISSING)

    if _is_list_like(container):
        if isinstance(key, str) and key.isdecimal():
            key = int(key)
        if isinstance(key, int) and -len(container) <= key < len(container):
            return container[key]

    return _MISSING


def path_get(path: tp.Sequence[tp.Union[str, int]], obj: tp.Any) -> tp.Any:
    """Return the value found at ``path`` inside ``obj``, or ``None``.

    An empty path resolves to ``obj`` itself.

    Raises:
        InvalidArgumentError: If ``path`` is not a sequence of str/int keys.
    """
    current = obj
    for key in validate(Path, path, "path"):
        current = _step(current, key)
        if current is _MISSING:
            return None
    return current


def pick_deep(
    path: tp.Sequence[tp.Union[str, int]],
    keys_to_keep: tp.Sequence[tp.Hashable],
    obj: tp.Any,
) -> dict:
    """Return a whitelisted set of keys from a nested object path.

    The value at ``path`` is projected onto ``keys_to_keep`` (or left untouched
    when ``keys_to_keep`` is empty) and wrapped in a single-entry dict keyed by
    the last segment of ``path``.

    Args:
        path: Keys leading to the nested value. Must not be empty.
        keys_to_keep: Property names to keep. Empty keeps everything.
        obj: Object to pick from.

    Returns:
        ``{path[-1]: projected_value}``

    Raises:
        InvalidArgumentError: If ``path`` is empty, since there is no key to
            wrap the result under.

    Example:
        >>> obj = {"one": {"two": {"animal": {"type": "fish", "name": "mark"}}}}
        >>> pick_deep(["one", "two", "animal"], ["name"], obj)
        {'animal': {'name': 'mark'}}
    """
    try:
        path = validate(NonEmptyPath, path, "path")
    except InvalidArgumentError:
        logger.debug("pick_deep rejected path %r", path)
        raise

    value = path_get(path, obj)

    if keys_to_keep:
        source = value if isinstance(value, Mapping) else {}
        value = {key: source[key] for key in keys_to_keep if key in source}

    return {path[-1]: value}


def flatten(
    obj: tp.Any, delimiter: tp.Optional[str] = None, prefix: tp.Optional[str] = None
) -> dict:
    """Flatten nested mappings and sequences into a single-level dict.

    Keys of the result are the ``delimiter``-joined paths to every leaf.
    Sequence indices become path segments. Empty containers are kept as
    leaves so no data is lost.

    Args:
        obj: Object to flatten.
        delimiter: Segment separator. Defaults to ``settings.PATH_DELIMITER``.
        prefix: Path of ``obj`` inside its parent (used by recursion).

    Returns:
        A new flat dict.
    """
    delimiter = delimiter or settings.PATH_DELIMITER

    if isinstance(obj, Mapping):
        items = obj.items()
    elif _is_list_like(obj):
        items = enumerate(obj)
    else:
        return {prefix: obj} if prefix is not None else {}

    if not obj and prefix is not None:
        return {prefix: obj}

    flat = {}
    for key, value in items:
        path = str(key) if prefix is None else f"{prefix}{delimiter}{key}"
        if isinstance(value, Mapping) or _is_list_like(value):
            flat.update(flatten(value, delimiter, path))
        else:
            flat[path] = value
    return flat


def all_keys_containing(substring: str, obj: tp.Any) -> dict:
    """Return the flattened entries of ``obj`` whose key contains ``substring``.

    Example:
        >>> obj = {"a1": "x", "a3": {"b": {"dragon": True}}}
        >>> all_keys_containing("rag", obj)
        {'a3.b.dragon': True}
    """
    return {
        key: value for key, value in flatten(obj).items() if substring in key
    }


def any_prop_satisfies(
    predicate: tp.Callable[[tp.Any], bool], obj: tp.Mapping
) -> bool:
    """Return True if the value of any property of ``obj`` passes ``predicate``."""
    return any(predicate(value) for value in obj.values())


def map_keys(fn: tp.Callable[[tp.Hashable], tp.Hashable], obj: tp.Mapping) -> dict:
    """Return a new dict where each key is the result of ``fn(key)``.

    Values are passed through unchanged. When ``fn`` maps two keys to the same
    result, the later key (in iteration order) wins.

    Raises:
        InvalidArgumentError: If ``fn`` is not callable.
    """
    if not callable(fn):
        raise InvalidArgumentError(f"map_keys expects a callable, got {fn!r}")
    return {fn(key): value for key, value in obj.items()}


def rename_keys(rename_map: tp.Mapping, obj: tp.Mapping) -> dict:
    """Shallow copy of ``obj`` with keys renamed according to ``rename_map``.

    Keys missing from ``rename_map`` are kept as-is. A present entry always
    applies, even when the new name is falsy (``""`` or ``0``).
    """
    rename_map = validate(RenameMap, rename_map, "rename_map")
    return {
        rename_map[key] if key in rename_map else key: value
        for key, value in obj.items()
    }
