"""Shared helpers for common query shapes built from fragments."""

from __future__ import annotations

from collections.abc import Sequence

from .builders import join, raw
from .types import Fragment, RawValue


def in_list(values: Sequence[RawValue]) -> Fragment:
    """Return ``(?, ?, ...)`` for use on the right of ``IN``."""

    return join(values, ",", "(", ")")


def join_where_clauses(
    clauses: Sequence[Fragment | str], *, operator: str = "AND"
) -> Fragment:
    """Join ``clauses`` with ``operator`` while wrapping each clause in parentheses.

    Plain strings are treated as literal SQL.
    """

    wrapped = [
        join([_as_fragment(clause)], prefix="(", suffix=")") for clause in clauses
    ]
    return join(wrapped, f" {operator} ")


def and_(*clauses: Fragment | str) -> Fragment:
    return join_where_clauses(clauses, operator="AND")


def or_(*clauses: Fragment | str) -> Fragment:
    return join_where_clauses(clauses, operator="OR")


def _as_fragment(clause: Fragment | str) -> Fragment:
    if isinstance(clause, str):
        return raw(clause)
    return clause


__all__ = [
    "and_",
    "in_list",
    "join_where_clauses",
    "or_",
]
