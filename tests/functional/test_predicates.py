import math

import pytest

from fnkit.core.enums import TypeName
from fnkit.core.errors import InvalidArgumentError
from fnkit.functional.predicates import (
    contains_all,
    exists,
    has_deep,
    is_array,
    is_boolean,
    is_empty,
    is_function,
    is_nil,
    is_nil_or_empty,
    is_not_empty,
    is_number,
    is_object,
    is_string,
    type_is,
    type_of,
)


@pytest.fixture
def nested():
    return {"one": {"two": {"three": "im in here", "empty": None}}}


@pytest.mark.parametrize(
    "value", [0, "", [], {}, False, "anything else", math.nan, object()]
)
def test_exists_for_present_values(value):
    assert exists(value) is True
    assert is_nil(value) is False


def test_exists_for_none():
    assert exists(None) is False
    assert is_nil(None) is True


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, True),
        ("", True),
        ({}, True),
        ([], True),
        ((), True),
        (set(), True),
        ("test", False),
        (["test"], False),
        ({"test": "test"}, False),
        (math.nan, False),
        (0, False),
        (False, False),
    ],
)
def test_is_nil_or_empty(value, expected):
    assert is_nil_or_empty(value) is expected


def test_is_not_empty_treats_none_as_not_empty():
    assert is_not_empty(None) is True
    assert is_not_empty("anything else") is True
    assert is_not_empty([]) is False
    assert is_not_empty({}) is False
    assert is_empty(None) is False


def test_has_deep_valid_path(nested):
    assert has_deep(["one", "two", "three"], nested) is True


def test_has_deep_invalid_path(nested):
    assert has_deep(["one", "two", "four"], nested) is False


def test_has_deep_missing_intermediate_does_not_raise(nested):
    assert has_deep(["one", "nope", "three", "four"], nested) is False
    assert has_deep(["one", "two", "three", "deeper"], nested) is False


def test_has_deep_none_leaf_is_absent(nested):
    assert has_deep(["one", "two", "empty"], nested) is False


def test_has_deep_through_sequences():
    obj = {"items": [{"id": 1}, {"id": 2}]}
    assert has_deep(["items", 1, "id"], obj) is True
    assert has_deep(["items", "0", "id"], obj) is True
    assert has_deep(["items", 5, "id"], obj) is False


def test_has_deep_empty_path_checks_object_itself(nested):
    assert has_deep([], nested) is True
    assert has_deep([], None) is False


def test_has_deep_rejects_non_sequence_path(nested):
    with pytest.raises(InvalidArgumentError, match="path"):
        has_deep("one.two", nested)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, TypeName.NULL),
        (True, TypeName.BOOLEAN),
        (1, TypeName.NUMBER),
        (1.5, TypeName.NUMBER),
        ("s", TypeName.STRING),
        ([1], TypeName.ARRAY),
        ((1,), TypeName.ARRAY),
        ({"a": 1}, TypeName.OBJECT),
        ({1}, TypeName.SET),
        (len, TypeName.FUNCTION),
    ],
)
def test_type_of(value, expected):
    assert type_of(value) is expected


def test_type_is_by_name():
    is_str = type_is("String")
    insistent_string = "i AM a string"

    assert is_str(insistent_string) is True
    assert is_str({"value": insistent_string}) is False
    assert type_is("Object")({"value": insistent_string}) is True


def test_type_is_unknown_name():
    with pytest.raises(InvalidArgumentError, match="Unknown type name"):
        type_is("Dragon")


def test_closed_type_predicates():
    assert is_string("x") and not is_string(1)
    assert is_number(3) and is_number(2.5)
    assert not is_number(True)
    assert is_boolean(False)
    assert is_array([]) and not is_array("abc")
    assert is_object({}) and not is_object([])
    assert is_function(print) and not is_function("print")


def test_contains_all():
    vals = [1, 2, 3]
    assert contains_all(vals, [1, 2, 3, 4, 5]) is True
    assert contains_all(vals, [1, 2, 4, 5, 6]) is False
    assert contains_all([], []) is True
