from __future__ import annotations

import pytest

from bqsql import MarkerStyle, format_sql
from bqsql.core.markers import placeholder, render_text


def _fragment():
    subquery = format_sql("SELECT id FROM authors WHERE name = {}", "Blake")
    return format_sql("SELECT * FROM books WHERE author_id IN ({}) AND year > {}", subquery, 1990)


def test_fragment_exposes_every_marker_view() -> None:
    fragment = _fragment()

    assert fragment.query == (
        "SELECT * FROM books WHERE author_id IN (SELECT id FROM authors WHERE name = ?) AND year > ?"
    )
    assert fragment.sql == fragment.query
    assert fragment.text == (
        "SELECT * FROM books WHERE author_id IN (SELECT id FROM authors WHERE name = $1) AND year > $2"
    )
    assert fragment.statement == (
        "SELECT * FROM books WHERE author_id IN (SELECT id FROM authors WHERE name = :1) AND year > :2"
    )


@pytest.mark.parametrize("style", list(MarkerStyle))
def test_every_style_returns_the_same_parameters(style: MarkerStyle) -> None:
    text, params = _fragment().render(style)

    assert params == ["Blake", 1990]
    assert text.startswith("SELECT * FROM books")


def test_render_accepts_style_names() -> None:
    assert _fragment().render("numeric") == (_fragment().text, ["Blake", 1990])


def test_unknown_style_is_rejected() -> None:
    with pytest.raises(ValueError):
        _fragment().render("pyformat")


def test_placeholder_numbering_starts_at_one() -> None:
    assert placeholder(MarkerStyle.QMARK, 3) == "?"
    assert placeholder(MarkerStyle.NUMERIC, 1) == "$1"
    assert placeholder(MarkerStyle.POSITIONAL_COLON, 2) == ":2"


def test_render_text_without_parameters() -> None:
    assert render_text(["SELECT 1"], MarkerStyle.NUMERIC) == "SELECT 1"


def test_plain_mapping_and_inspect() -> None:
    fragment = _fragment()

    assert fragment.to_dict() == {"query": fragment.query, "params": ["Blake", 1990]}

    inspected = fragment.inspect()
    assert inspected["text"] == fragment.text
    assert inspected["statement"] == fragment.statement
    assert inspected["params"] == ["Blake", 1990]
    assert len(inspected["segments"]) == 3
