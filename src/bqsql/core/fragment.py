"""The composer that flattens literal segments and values into a fragment."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ArityMismatchError, EmptyTemplateError
from .types import Fragment, Nested, RawValue, Scalar, as_raw_value

__all__ = ["compose"]


def compose(segments: Sequence[str], values: Sequence[RawValue]) -> Fragment:
    """Merge ``segments`` and ``values`` into a single flat :class:`Fragment`.

    Every scalar value becomes one placeholder sitting between the segment in
    front of it and the segment after it.  Nested fragments are inlined: their
    first segment is glued to the current text, their parameters are appended
    in order and the outer segment that follows is glued to their last
    segment.  The result never contains a fragment, so composing nested input
    yields exactly what composing the pre-flattened input would.
    """

    segments = tuple(segments)
    values = tuple(values)

    if len(segments) - 1 != len(values):
        if not segments:
            raise EmptyTemplateError()
        raise ArityMismatchError(len(segments), len(values))

    out_segments = [segments[0]]
    out_parameters = []

    for value, following in zip(values, segments[1:]):
        match as_raw_value(value):
            case Nested(fragment):
                out_segments[-1] += fragment.segments[0]
                out_parameters.extend(fragment.parameters)
                out_segments.extend(fragment.segments[1:])
                out_segments[-1] += following
            case Scalar(scalar):
                out_parameters.append(scalar)
                out_segments.append(following)

    return Fragment(tuple(out_segments), tuple(out_parameters))
