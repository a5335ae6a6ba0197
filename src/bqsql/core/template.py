"""Front ends producing literal segment / value pairs for the composer."""

from __future__ import annotations

import string
from collections.abc import Sequence
from typing import Any

from .fragment import compose
from .types import Fragment, RawValue

__all__ = ["format_sql", "sql"]


def sql(strings: str | Sequence[str], *values: RawValue) -> Fragment:
    """Create a fragment from literal ``strings`` interleaved with ``values``.

    >>> sql(["SELECT * FROM books WHERE author = ", ""], "Blake").query
    'SELECT * FROM books WHERE author = ?'
    """

    if isinstance(strings, str):
        strings = (strings,)
    return compose(strings, values)


def format_sql(template: str, /, *args: RawValue, **kwargs: RawValue) -> Fragment:
    """Create a fragment from a ``str.format`` style template.

    Replacement fields (``{}``, ``{0}`` or ``{name}``) become value slots and are
    never interpolated into the text.  Doubled braces produce literal braces.

    >>> format_sql("SELECT * FROM books WHERE author = {}", "Blake").params
    ['Blake']
    """

    segments = [""]
    values: list[Any] = []
    next_auto_index: int | None = 0

    for literal_text, field_name, format_spec, conversion in string.Formatter().parse(template):
        segments[-1] += literal_text
        if field_name is None:
            continue
        if format_spec or conversion:
            raise ValueError(
                f"Format specs and conversions are not supported in SQL templates: {{{field_name}}}"
            )
        if "[" in field_name or "." in field_name:
            raise ValueError(
                f"Indexing and attribute access are not supported in SQL templates: {{{field_name}}}"
            )

        if field_name == "":
            if next_auto_index is None:
                raise ValueError(
                    "cannot switch from manual field specification to automatic field numbering"
                )
            field_name = str(next_auto_index)
            next_auto_index += 1
        elif field_name.isdigit():
            if next_auto_index:
                raise ValueError(
                    "cannot switch from automatic field numbering to manual field specification"
                )
            next_auto_index = None

        values.append(_lookup_field(field_name, args, kwargs))
        segments.append("")

    return compose(segments, values)


def _lookup_field(field_name: str, args: Sequence[Any], kwargs: dict[str, Any]) -> Any:
    if field_name.isdigit():
        index = int(field_name)
        if index >= len(args):
            raise ValueError(f"Missing positional argument {index} for SQL template")
        return args[index]
    if field_name not in kwargs:
        raise ValueError(f"Missing keyword argument {field_name!r} for SQL template")
    return kwargs[field_name]
