"""Convenience builders expressed in terms of :func:`compose`."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import EmptyBulkInputError, EmptyJoinInputError, RaggedBulkInputError
from .fragment import compose
from .types import Fragment, RawValue

__all__ = ["bulk", "empty", "join", "raw"]


def join(
    values: Sequence[RawValue],
    separator: str = ",",
    prefix: str = "",
    suffix: str = "",
) -> Fragment:
    """Create a fragment for a list of values.

    ``join([a, b, c], ", ", "(", ")")`` renders as ``(?, ?, ?)``.  Fragments in
    ``values`` are inlined rather than bound.
    """

    values = list(values)
    if not values:
        raise EmptyJoinInputError()

    return compose([prefix, *[separator] * (len(values) - 1), suffix], values)


def bulk(
    rows: Sequence[Sequence[RawValue]],
    separator: str = ",",
    prefix: str = "",
    suffix: str = "",
) -> Fragment:
    """Create a fragment of parenthesized tuples, one per row.

    Every row must have the length of the first row.  ``separator`` is used both
    between the values of a row and between the rows themselves.
    """

    rows = [list(row) for row in rows]
    width = len(rows[0]) if rows else 0
    if width == 0:
        raise EmptyBulkInputError()

    tuples = []
    for index, row in enumerate(rows):
        if len(row) != width:
            raise RaggedBulkInputError(index, width, len(row))
        tuples.append(compose(["(", *[separator] * (width - 1), ")"], row))

    return join(tuples, separator, prefix, suffix)


def raw(text: str) -> Fragment:
    """Create a fragment of literal SQL with no parameters."""

    return Fragment((text,), ())


empty = raw("")
"""Fragment standing in for "no SQL"."""
