"""Public package API."""

from importlib import metadata

from .core import (
    ArityMismatchError,
    BigQuerySql,
    EmptyBulkInputError,
    EmptyJoinInputError,
    EmptyTemplateError,
    Fragment,
    MarkerStyle,
    Nested,
    RaggedBulkInputError,
    RawValue,
    Scalar,
    SqlTemplateError,
    and_,
    bulk,
    compose,
    empty,
    format_sql,
    identifier,
    in_list,
    join,
    or_,
    raw,
    sql,
    to_query_parameter,
    to_query_parameters,
)

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

try:
    __version__ = metadata.version("bqsql")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
