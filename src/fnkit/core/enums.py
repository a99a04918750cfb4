"""Enumerations used throughout the fnkit package."""

from collections.abc import Mapping, Sequence, Set
from enum import Enum
import numbers


class TypeName(Enum):
    """Closed set of runtime value kinds recognised by the type predicates."""

    NULL = "Null"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    ARRAY = "Array"
    OBJECT = "Object"
    SET = "Set"
    FUNCTION = "Function"
    OTHER = "Other"

    @classmethod
    def of(cls, value) -> "TypeName":
        """Classify a value into one of the known kinds."""
        if value is None:
            return cls.NULL
        # bool is a subclass of int, so it must be tested first
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, numbers.Number):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, Mapping):
            return cls.OBJECT
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return cls.ARRAY
        if isinstance(value, Set):
            return cls.SET
        if callable(value):
            return cls.FUNCTION
        return cls.OTHER

    @classmethod
    def from_name(cls, name: "str | TypeName") -> "TypeName":
        """Look up a kind by its display name ("String") or member name ("STRING")."""
        if isinstance(name, cls):
            return name
        for member in cls:
            if name in (member.value, member.name):
                return member
        raise ValueError(f"Unknown type name: {name!r}")
