"""Column resolution and validation shared by the polars and DuckDB processors.

Both engines check their input before building a query, so a bad column
name or weight type fails with the same exception whichever engine runs.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd
import polars as pl

from .config import get_setting
from .exceptions import ColumnNotFoundError, ConfigurationError, TypeMismatchError


def flatten_columns(columns: Iterable[str | Iterable[str]] | str | None) -> list[str]:
    """Flatten column arguments and drop repeats, keeping first-seen order.

    Example:
        >>> flatten_columns(("cyl", ["am", "cyl"]))
        ['cyl', 'am']
    """
    if columns is None:
        return []
    if isinstance(columns, str):
        return [columns]

    flat: list[str] = []
    for item in columns:
        if isinstance(item, str):
            flat.append(item)
        else:
            flat.extend(item)
    return list(dict.fromkeys(flat))


def unique_name(base: str, existing: Iterable[str]) -> str:
    """Prefix ``base`` with ``n`` until it no longer clashes with ``existing``."""
    taken = set(existing)
    name = base
    while name in taken:
        name = f"n{name}"
    return name


def resolve_output_name(
    name: str | None,
    setting: str,
    existing: Iterable[str],
    group_columns: Iterable[str] = (),
) -> str:
    """Name for a column a processor adds to its output.

    Explicit names are used as given unless they would replace a group
    column; the configured default is made unique against ``existing``.

    Raises:
        ConfigurationError: If an explicit name equals a group column.
    """
    if name is not None:
        if name in set(group_columns):
            raise ConfigurationError(
                f"Output column name '{name}' is also a group column. "
                f"Pass a different name= or leave it unset."
            )
        return name
    return unique_name(get_setting(setting), existing)


def resolve_count_name(
    name: str | None, existing: Iterable[str], group_columns: Iterable[str] = ()
) -> str:
    return resolve_output_name(name, "count_name", existing, group_columns)


def _require_columns(
    available: list[str], required: list[str], processor_name: str
) -> None:
    missing = set(required) - set(available)
    if missing:
        raise ColumnNotFoundError(processor_name, missing, available)


def check_polars_schema(
    schema: pl.Schema,
    columns: list[str],
    wt: str | None,
    processor_name: str,
) -> None:
    """Validate group and weight columns against a polars schema.

    Raises:
        ColumnNotFoundError: If any group or weight column is absent.
        TypeMismatchError: If the weight column is not numeric.
    """
    required = columns + ([wt] if wt is not None else [])
    _require_columns(schema.names(), required, processor_name)

    if wt is not None:
        dtype = schema[wt]
        # an all-null column has no numeric type yet but sums to zero
        if dtype != pl.Null and not dtype.is_numeric():
            raise TypeMismatchError(processor_name, wt, dtype)


def check_pandas_frame(
    df: pd.DataFrame,
    columns: list[str],
    wt: str | None,
    processor_name: str,
) -> None:
    """Validate group and weight columns against a pandas DataFrame.

    Raises:
        ColumnNotFoundError: If any group or weight column is absent.
        TypeMismatchError: If the weight column is not numeric.
    """
    required = columns + ([wt] if wt is not None else [])
    _require_columns([str(c) for c in df.columns], required, processor_name)

    if wt is not None:
        series = df[wt]
        numeric = pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(
            series
        )
        if not numeric and not series.isna().all():
            raise TypeMismatchError(processor_name, wt, series.dtype)
