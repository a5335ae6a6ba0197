from __future__ import annotations

import pytest

from bqsql import ArityMismatchError, format_sql, join, sql


def test_sql_from_segments_and_values() -> None:
    fragment = sql(["SELECT * FROM users WHERE name = ", " AND age = ", ""], "Blake", 30)

    assert fragment.query == "SELECT * FROM users WHERE name = ? AND age = ?"
    assert fragment.params == ["Blake", 30]


def test_sql_accepts_a_single_string() -> None:
    fragment = sql("SELECT 1")

    assert fragment.query == "SELECT 1"
    assert fragment.params == []


def test_sql_checks_arity() -> None:
    with pytest.raises(ArityMismatchError):
        sql(["SELECT ", ""])


def test_format_sql_matches_segment_form() -> None:
    formatted = format_sql("SELECT * FROM users WHERE name = {} AND age = {}", "Blake", 30)

    assert formatted == sql(["SELECT * FROM users WHERE name = ", " AND age = ", ""], "Blake", 30)


def test_format_sql_indexed_and_named_fields() -> None:
    fragment = format_sql(
        "SELECT * FROM books WHERE author_id = {0} OR editor_id = {0} AND status = {status}",
        123,
        status="active",
    )

    assert fragment.query == "SELECT * FROM books WHERE author_id = ? OR editor_id = ? AND status = ?"
    assert fragment.params == [123, 123, "active"]


def test_format_sql_inlines_fragments() -> None:
    fragment = format_sql("SELECT * FROM books WHERE id IN ({})", join([1, 2, 3]))

    assert fragment.query == "SELECT * FROM books WHERE id IN (?,?,?)"
    assert fragment.params == [1, 2, 3]


def test_format_sql_keeps_escaped_braces() -> None:
    fragment = format_sql("SELECT STRUCT('{{}}' AS s), {}", 1)

    assert fragment.query == "SELECT STRUCT('{}' AS s), ?"


def test_format_sql_without_fields() -> None:
    assert format_sql("").query == ""
    assert format_sql("SELECT 1").params == []


@pytest.mark.parametrize(
    ("template", "args", "kwargs", "message"),
    [
        ("{:>5}", (1,), {}, "Format specs"),
        ("{!r}", (1,), {}, "Format specs"),
        ("{} {0}", (1,), {}, "automatic field numbering to manual"),
        ("{0} {}", (1,), {}, "manual field specification to automatic"),
        ("{} {}", (1,), {}, "Missing positional argument 1"),
        ("{name}", (), {}, "Missing keyword argument 'name'"),
    ],
)
def test_format_sql_rejects_malformed_templates(
    template: str, args: tuple, kwargs: dict, message: str
) -> None:
    with pytest.raises(ValueError, match=message):
        format_sql(template, *args, **kwargs)


@pytest.mark.parametrize("template", ["{row[0]}", "{obj.attr}", "{0[1]}"])
def test_format_sql_rejects_field_access(template: str) -> None:
    with pytest.raises(ValueError, match="Indexing and attribute access are not supported"):
        format_sql(template, [1, 2], row=[1], obj=object())
