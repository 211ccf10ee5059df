"""Functional shortcuts over the Polars processors.

    >>> from cogapp_tally import count, prop
    >>> count(sales, "buyer_country", sort=True)
    >>> prop(sales, "buyer_country", wt="sale_price_usd")

Group columns may be given as separate arguments or as lists.
Input may be pandas or polars; output is polars (lazy for lazy input).
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd
import polars as pl

from .processors.polars import (
    PolarsAddCountProcessor,
    PolarsAddTallyProcessor,
    PolarsCountProcessor,
    PolarsPropProcessor,
    PolarsTallyProcessor,
)

Frame = pd.DataFrame | pl.DataFrame | pl.LazyFrame


def tally(
    df: Frame,
    wt: str | None = None,
    sort: bool = False,
    group_by: str | Iterable[str] | None = None,
    name: str | None = None,
) -> pl.DataFrame | pl.LazyFrame:
    """Count rows (or sum ``wt``) within ``group_by``, one row per group.

    Without ``group_by`` the result is a single row with the total.
    """
    return PolarsTallyProcessor(group_by=group_by, wt=wt, sort=sort, name=name).process(df)


def count(
    df: Frame,
    *columns: str | Iterable[str],
    wt: str | None = None,
    sort: bool = False,
    name: str | None = None,
) -> pl.DataFrame | pl.LazyFrame:
    """Group by ``columns`` and tally.

    Example:
        >>> count(mtcars, "cyl", "am")
    """
    return PolarsCountProcessor(columns, wt=wt, sort=sort, name=name).process(df)


def prop(
    df: Frame,
    *columns: str | Iterable[str],
    wt: str | None = None,
    sort: bool = False,
    name: str | None = None,
) -> pl.DataFrame | pl.LazyFrame:
    """Proportion of rows (or of ``wt``) in each group of ``columns``.

    Returns the group columns plus a proportion column summing to 1.0.
    An empty table, or a zero total weight, gives an empty result.

    Raises:
        ColumnNotFoundError: If a group or weight column is missing.
        TypeMismatchError: If ``wt`` is not numeric.
    """
    return PolarsPropProcessor(columns, wt=wt, sort=sort, name=name).process(df)


def add_tally(
    df: Frame,
    wt: str | None = None,
    sort: bool = False,
    group_by: str | Iterable[str] | None = None,
    name: str | None = None,
) -> pl.DataFrame | pl.LazyFrame:
    """Like `tally` but keeps every row, adding the count as a column."""
    return PolarsAddTallyProcessor(group_by=group_by, wt=wt, sort=sort, name=name).process(df)


def add_count(
    df: Frame,
    *columns: str | Iterable[str],
    wt: str | None = None,
    sort: bool = False,
    name: str | None = None,
) -> pl.DataFrame | pl.LazyFrame:
    """Like `count` but keeps every row, adding the count as a column.

    Example:
        >>> # players who played in multiple stints in the same year
        >>> add_count(batting, "playerID", "yearID").filter(pl.col("n") > 1)
    """
    return PolarsAddCountProcessor(columns, wt=wt, sort=sort, name=name).process(df)
