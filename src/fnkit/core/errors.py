"""Exceptions raised by fnkit helpers."""

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when a helper receives an argument it cannot give a meaning to.

    Missing or malformed nested data is never an error: helpers return ``None``
    or ``False`` for it. This is reserved for arguments such as an empty path
    given to :func:`fnkit.functional.objects.pick_deep`.
    """
