import pytest

from fnkit.core.errors import InvalidArgumentError
from fnkit.functional.strings import (
    append_str,
    build_query_string,
    camelize,
    first_char_is,
    insert_commas_in_number,
    make_regexs,
    snakeify,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("oneAwesomeNightAtChuckyCheese", "one_awesome_night_at_chucky_cheese"),
        ("MozTransform", "moz_transform"),
        ("  padded Value  ", "padded_value"),
        ("kebab-case  and spaces", "kebab_case_and_spaces"),
        ("version2Beta", "version2_beta"),
        ("already_snake", "already_snake"),
    ],
)
def test_snakeify(text, expected):
    assert snakeify(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("one_awesome_night_at_chucky_cheese", "oneAwesomeNightAtChuckyCheese"),
        ("moz_transform", "mozTransform"),
        ("kebab-case words", "kebabCaseWords"),
        ("  -leading sep ", "LeadingSep"),
        ("trailing_", "trailing"),
        ("many__-__separators", "manySeparators"),
    ],
)
def test_camelize(text, expected):
    assert camelize(text) == expected


def test_camelize_is_a_fixed_point_without_separators():
    once = camelize("moz_transform_origin")
    assert camelize(once) == once


@pytest.mark.parametrize(
    "value, expected",
    [
        (20, "20"),
        ("20", "20"),
        (200, "200"),
        ("200", "200"),
        (2000, "2,000"),
        ("2000", "2,000"),
        (20000, "20,000"),
        ("20000", "20,000"),
        (200000, "200,000"),
        ("200000", "200,000"),
        (2000000, "2,000,000"),
        ("2000000", "2,000,000"),
        (2000000000, "2,000,000,000"),
        ("2000000000", "2,000,000,000"),
        (-1234, "-1,234"),
    ],
)
def test_insert_commas_in_number(value, expected):
    assert insert_commas_in_number(value) == expected


def test_insert_commas_in_number_is_not_decimal_aware():
    assert insert_commas_in_number("1234.5678") == "1,234.5,678"
    assert insert_commas_in_number(2000.0) == "2,000.0"


def test_build_query_string():
    result = build_query_string([["param1", "value1"], ["param2", "value2"]])
    assert result == "param1=value1&param2=value2"


def test_build_query_string_from_tuples():
    assert build_query_string([("a", "1"), ("b", "2")]) == "a=1&b=2"
    assert build_query_string([("page", 3)]) == "page=3"
    assert build_query_string([]) == ""


def test_build_query_string_renders_none_as_empty():
    assert build_query_string([("a", None), ("b", "2")]) == "a=&b=2"
    assert build_query_string([("a", 0), ("b", False)]) == "a=0&b=False"


def test_build_query_string_does_not_encode():
    assert build_query_string([("q", "a b&c")]) == "q=a b&c"


def test_build_query_string_rejects_bad_pairs():
    with pytest.raises(InvalidArgumentError, match="query pairs"):
        build_query_string([("a", "1", "extra")])


def test_first_char_is():
    assert first_char_is("o", "one") is True
    assert first_char_is("t", "one") is False
    assert first_char_is("t", "two") is True
    assert first_char_is("o", "") is False


def test_append_str():
    insult_someone = lambda name: append_str(" are bad at golf", name)  # noqa: E731
    assert insult_someone("you") == "you are bad at golf"


def test_make_regexs():
    words = ["a", "b", "c"]
    tests = make_regexs(words)

    assert set(tests) == set(words)
    for word in words:
        assert tests[word](f"one two {word}") is True
        assert tests[word]("one two") is False


def test_make_regexs_escapes_words():
    assert make_regexs(["a.b"])["a.b"]("axb") is False
