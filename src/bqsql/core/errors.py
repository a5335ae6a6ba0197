"""Exceptions raised while building SQL fragments."""

from __future__ import annotations

__all__ = [
    "ArityMismatchError",
    "EmptyBulkInputError",
    "EmptyJoinInputError",
    "EmptyTemplateError",
    "RaggedBulkInputError",
    "SqlTemplateError",
]


class SqlTemplateError(TypeError):
    """Base class for malformed fragment construction calls."""


class EmptyTemplateError(SqlTemplateError):
    def __init__(self) -> None:
        super().__init__("Expected at least 1 string")


class ArityMismatchError(SqlTemplateError):
    """Raised when the segment count is not exactly one more than the value count."""

    def __init__(self, segment_count: int, value_count: int) -> None:
        self.segment_count = segment_count
        self.value_count = value_count
        super().__init__(
            f"Expected {segment_count} strings to have {segment_count - 1} values, "
            f"but got {value_count}"
        )

    @property
    def expected(self) -> int:
        return self.segment_count - 1


class EmptyJoinInputError(SqlTemplateError):
    def __init__(self) -> None:
        super().__init__(
            "Expected `join([])` to be called with an array of multiple elements, "
            "but got an empty array"
        )


class EmptyBulkInputError(SqlTemplateError):
    def __init__(self) -> None:
        super().__init__(
            "Expected `bulk([][])` to be called with a nested array of multiple "
            "elements, but got an empty array"
        )


class RaggedBulkInputError(SqlTemplateError):
    """Raised for the first ``bulk`` row whose length differs from row 0."""

    def __init__(self, index: int, expected: int, actual: int) -> None:
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected `bulk([{index}][])` to have a length of {expected}, "
            f"but got {actual}"
        )
