"""Small functional helpers for plain values, objects and lists."""

from fnkit.logger.logger import logger
from fnkit.core.errors import InvalidArgumentError
from fnkit.core.enums import TypeName
from fnkit.functional.constants import (
    default_to,
    default_to_empty_array,
    default_to_empty_object,
    default_to_empty_string,
    empty_array,
    empty_object,
    empty_string,
    first_argument,
    get_prop_or_empty_object,
    get_prop_or_empty_string,
    prop_or,
    second_argument,
)
from fnkit.functional.debugging import check, pretty_check
from fnkit.functional.lists import (
    drop_by_id,
    drop_by_name,
    drop_by_prop,
    filter_by_id,
    filter_by_name,
    filter_by_prop,
    find_by_id,
    find_by_name,
    find_by_prop,
    merge_lists_by_prop,
    prop_eq,
)
from fnkit.functional.memo import memoize
from fnkit.functional.numbers import between, gt, gte, lt, lte, parse_hex_binary
from fnkit.functional.objects import (
    all_keys_containing,
    any_prop_satisfies,
    flatten,
    map_keys,
    path_get,
    pick_deep,
    rename_keys,
)
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
from fnkit.functional.strings import (
    append_str,
    build_query_string,
    camelize,
    first_char_is,
    insert_commas_in_number,
    make_regexs,
    snakeify,
)

__version__ = "0.1.0"

__all__ = [
    "logger",
    "InvalidArgumentError",
    "TypeName",
    # constants
    "empty_string",
    "empty_object",
    "empty_array",
    "default_to",
    "default_to_empty_array",
    "default_to_empty_object",
    "default_to_empty_string",
    "prop_or",
    "get_prop_or_empty_string",
    "get_prop_or_empty_object",
    "first_argument",
    "second_argument",
    # predicates
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
    # objects
    "path_get",
    "pick_deep",
    "flatten",
    "all_keys_containing",
    "any_prop_satisfies",
    "map_keys",
    "rename_keys",
    # lists
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
    # strings
    "first_char_is",
    "append_str",
    "snakeify",
    "camelize",
    "insert_commas_in_number",
    "build_query_string",
    "make_regexs",
    # numbers
    "gt",
    "gte",
    "lt",
    "lte",
    "between",
    "parse_hex_binary",
    # debugging
    "check",
    "pretty_check",
    "memoize",
]
