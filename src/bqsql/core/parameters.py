"""Conversion of fragment parameters into BigQuery positional query parameters."""

from __future__ import annotations

import datetime
import decimal
from collections.abc import Mapping
from typing import Any

import pandas as pd
from google.cloud import bigquery

from .types import Fragment

__all__ = ["infer_scalar_type", "to_query_parameter", "to_query_parameters"]

QueryParameter = (
    bigquery.ScalarQueryParameter
    | bigquery.ArrayQueryParameter
    | bigquery.StructQueryParameter
)

_PASSTHROUGH_TYPES = (
    bigquery.ScalarQueryParameter,
    bigquery.ArrayQueryParameter,
    bigquery.StructQueryParameter,
)

_NULL_TYPE = "STRING"


def infer_scalar_type(value: Any) -> str:
    """Return the BigQuery scalar type name for ``value``.

    ``datetime`` is checked before ``date`` and ``bool`` before integers since
    both are subclasses of the later type.
    """

    if value is None:
        return _NULL_TYPE
    if pd.api.types.is_bool(value):
        return "BOOL"
    if pd.api.types.is_integer(value):
        return "INT64"
    if pd.api.types.is_float(value):
        return "FLOAT64"
    if isinstance(value, decimal.Decimal):
        return "NUMERIC"
    if isinstance(value, str):
        return "STRING"
    if isinstance(value, (bytes, bytearray)):
        return "BYTES"
    if isinstance(value, datetime.datetime):
        return "DATETIME" if value.tzinfo is None else "TIMESTAMP"
    if isinstance(value, datetime.date):
        return "DATE"
    if isinstance(value, datetime.time):
        return "TIME"
    raise TypeError(f"Unsupported BigQuery parameter type: {type(value).__name__}")


def to_query_parameter(value: Any, name: str | None = None) -> QueryParameter:
    """Return a BigQuery query parameter for ``value``.

    Parameters are positional (``name=None``) unless ``name`` is given, which
    is only used for the fields of a struct.  Mappings become structs and
    list-likes (including numpy arrays and pandas series) become arrays.
    """

    if isinstance(value, _PASSTHROUGH_TYPES):
        return value
    if isinstance(value, Mapping):
        fields = [to_query_parameter(item, str(key)) for key, item in value.items()]
        return bigquery.StructQueryParameter(name, *fields)
    if _is_array(value):
        return _array_parameter(name, list(value))
    return bigquery.ScalarQueryParameter(name, infer_scalar_type(value), value)


def to_query_parameters(fragment: Fragment) -> list[QueryParameter]:
    """Return one positional parameter per fragment parameter, in order."""

    return [to_query_parameter(value) for value in fragment.parameters]


def _is_array(value: Any) -> bool:
    return pd.api.types.is_list_like(value) and not isinstance(
        value, (Mapping, bytes, bytearray)
    )


def _array_parameter(name: str | None, values: list[Any]) -> bigquery.ArrayQueryParameter:
    if any(_is_array(item) for item in values):
        raise TypeError("Array parameters may not contain nested arrays")

    if any(isinstance(item, Mapping) for item in values):
        if not all(isinstance(item, Mapping) for item in values):
            raise TypeError("Arrays of structs may only contain mappings")
        return bigquery.ArrayQueryParameter(
            name, "STRUCT", [to_query_parameter(item) for item in values]
        )

    element_type = _NULL_TYPE
    for item in values:
        if item is not None:
            element_type = infer_scalar_type(item)
            break
    return bigquery.ArrayQueryParameter(name, element_type, values)
