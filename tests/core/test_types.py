import pytest

from fnkit.core.enums import TypeName
from fnkit.core.errors import InvalidArgumentError
from fnkit.core.types import NonEmptyPath, Path, QueryPairs, RenameMap, validate


def test_path_accepts_tuples_and_mixed_keys():
    assert validate(Path, ("a", 0, "b")) == ["a", 0, "b"]
    assert validate(Path, []) == []


@pytest.mark.parametrize("bad", ["a.b", [True], [1.5], None])
def test_path_rejects(bad):
    with pytest.raises(InvalidArgumentError, match="Invalid path"):
        validate(Path, bad, "path")


def test_non_empty_path():
    assert validate(NonEmptyPath, ["a"]) == ["a"]
    with pytest.raises(InvalidArgumentError):
        validate(NonEmptyPath, [])


def test_rename_map():
    assert validate(RenameMap, {"a": "b"}) == {"a": "b"}
    with pytest.raises(InvalidArgumentError, match="rename_map"):
        validate(RenameMap, "a", "rename_map")


def test_query_pairs():
    assert validate(QueryPairs, [["a", 1]]) == [("a", 1)]
    with pytest.raises(InvalidArgumentError):
        validate(QueryPairs, [["a"]])


def test_invalid_argument_error_is_value_error():
    assert issubclass(InvalidArgumentError, ValueError)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("String", TypeName.STRING),
        ("ARRAY", TypeName.ARRAY),
        (TypeName.NULL, TypeName.NULL),
    ],
)
def test_type_name_lookup(name, expected):
    assert TypeName.from_name(name) is expected


def test_type_name_lookup_unknown():
    with pytest.raises(ValueError, match="Unknown type name"):
        TypeName.from_name("Dragon")


def test_bytes_are_not_arrays():
    assert TypeName.of(b"abc") is TypeName.OTHER
