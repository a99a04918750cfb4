"""Core types, enums, errors and settings shared by the helpers."""

from fnkit.core.config import Settings, settings
from fnkit.core.enums import TypeName
from fnkit.core.errors import InvalidArgumentError

__all__ = [
    "Settings",
    "settings",
    "TypeName",
    "InvalidArgumentError",
]
