"""Functional primitives for fnkit.

Small, stateless helpers for plain values, mappings and lists of records.
Every helper returns a new value and leaves its inputs untouched, so they can
be chained freely. Partial application is done with :func:`functools.partial`.
"""
