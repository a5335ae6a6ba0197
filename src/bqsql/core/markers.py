"""Placeholder conventions used when rendering a fragment to text."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

__all__ = ["MarkerStyle", "placeholder", "render_text"]


class MarkerStyle(str, Enum):
    """Supported placeholder markers.

    - QMARK: ``?`` for every parameter (BigQuery positional parameters)
    - NUMERIC: ``$1``, ``$2``, ...
    - POSITIONAL_COLON: ``:1``, ``:2``, ...
    """

    QMARK = "qmark"
    NUMERIC = "numeric"
    POSITIONAL_COLON = "positional_colon"


def placeholder(style: MarkerStyle | str, position: int) -> str:
    """Return the marker for the parameter at 1-based ``position``."""

    style = MarkerStyle(style)
    if style is MarkerStyle.QMARK:
        return "?"
    if style is MarkerStyle.NUMERIC:
        return f"${position}"
    return f":{position}"


def render_text(segments: Sequence[str], style: MarkerStyle | str) -> str:
    """Interleave ``segments`` with one marker between each adjacent pair."""

    style = MarkerStyle(style)
    parts = [segments[0]]
    for position, segment in enumerate(segments[1:], start=1):
        parts.append(placeholder(style, position))
        parts.append(segment)
    return "".join(parts)
