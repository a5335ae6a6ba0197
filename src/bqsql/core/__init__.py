from .builders import bulk, empty, join, raw
from .client import BigQuerySql
from .errors import (
    ArityMismatchError,
    EmptyBulkInputError,
    EmptyJoinInputError,
    EmptyTemplateError,
    RaggedBulkInputError,
    SqlTemplateError,
)
from .fragment import compose
from .markers import MarkerStyle
from .parameters import to_query_parameter, to_query_parameters
from .query_helpers import and_, in_list, or_
from .identifiers import identifier
from .template import format_sql, sql
from .types import Fragment, Nested, RawValue, Scalar

__all__ = [
    "ArityMismatchError",
    "BigQuerySql",
    "EmptyBulkInputError",
    "EmptyJoinInputError",
    "EmptyTemplateError",
    "Fragment",
    "MarkerStyle",
    "Nested",
    "RaggedBulkInputError",
    "RawValue",
    "Scalar",
    "SqlTemplateError",
    "and_",
    "bulk",
    "compose",
    "empty",
    "format_sql",
    "identifier",
    "in_list",
    "join",
    "or_",
    "raw",
    "sql",
    "to_query_parameter",
    "to_query_parameters",
]
