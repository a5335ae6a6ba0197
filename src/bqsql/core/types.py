"""Public data structures used to compose parameterized SQL."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .errors import ArityMismatchError, EmptyTemplateError
from .markers import MarkerStyle, render_text

__all__ = ["Fragment", "Nested", "RawValue", "Scalar", "as_raw_value"]


@dataclass(frozen=True)
class Fragment:
    """Immutable SQL expression made of literal segments and bound parameters.

    ``segments[i]`` is the literal text in front of the i-th placeholder and the
    final segment is the text after the last one, so a fragment with ``N``
    parameters always carries ``N + 1`` segments.  Fragments are built by
    :func:`bqsql.core.fragment.compose` and the builders on top of it; nesting
    one fragment in another copies its segments and parameters, it never
    mutates the nested fragment.
    """

    segments: tuple[str, ...]
    parameters: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))
        object.__setattr__(self, "parameters", tuple(self.parameters))
        if not self.segments:
            raise EmptyTemplateError()
        if len(self.segments) - 1 != len(self.parameters):
            raise ArityMismatchError(len(self.segments), len(self.parameters))

    @property
    def query(self) -> str:
        """SQL text using ``?`` markers, as expected by BigQuery."""

        return render_text(self.segments, MarkerStyle.QMARK)

    @property
    def sql(self) -> str:
        return self.query

    @property
    def text(self) -> str:
        """SQL text using ``$1``-style markers."""

        return render_text(self.segments, MarkerStyle.NUMERIC)

    @property
    def statement(self) -> str:
        """SQL text using ``:1``-style markers."""

        return render_text(self.segments, MarkerStyle.POSITIONAL_COLON)

    @property
    def params(self) -> list[Any]:
        return list(self.parameters)

    def render(self, style: MarkerStyle | str = MarkerStyle.QMARK) -> tuple[str, list[Any]]:
        """Return the ``(text, params)`` pair for the given marker ``style``."""

        return render_text(self.segments, style), self.params

    def to_dict(self) -> dict[str, Any]:
        """Return the plain ``{"query", "params"}`` mapping for a driver call."""

        return {"query": self.query, "params": self.params}

    def inspect(self) -> dict[str, Any]:
        return {
            "sql": self.sql,
            "statement": self.statement,
            "text": self.text,
            "query": self.query,
            "params": self.params,
            "segments": list(self.segments),
        }


@dataclass(frozen=True)
class Scalar:
    """A value bound as a single parameter."""

    value: Any


@dataclass(frozen=True)
class Nested:
    """A fragment inlined into the surrounding composition."""

    fragment: Fragment


RawValue = Union[Scalar, Nested, Fragment, Any]


def as_raw_value(value: RawValue) -> Scalar | Nested:
    """Tag ``value`` for the composer.

    Values that are already tagged are returned unchanged, so ``Scalar(fragment)``
    can be used to bind a fragment object itself as a parameter.
    """

    if isinstance(value, (Scalar, Nested)):
        return value
    if isinstance(value, Fragment):
        return Nested(value)
    return Scalar(value)
