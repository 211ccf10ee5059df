"""Polars processors that count rows (or sum weights) within groups.

`tally` collapses each group to a single row, `add_tally` keeps every row
and attaches the group's count. `count` and `add_count` do the grouping too.

Example:
    >>> PolarsCountProcessor(["cyl", "am"]).process(mtcars)
    >>> PolarsAddCountProcessor("playerID", wt="AB").process(batting)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import polars as pl

from ...validation import check_polars_schema, flatten_columns, resolve_count_name
from .base import PolarsProcessor

logger = logging.getLogger(__name__)


def count_expr(wt: str | None, schema: pl.Schema) -> pl.Expr:
    """Row count, or the null-skipping sum of ``wt`` when given."""
    if wt is None:
        return pl.len()
    if schema[wt] == pl.Null:
        # all-null weights sum to zero
        return pl.col(wt).cast(pl.Float64).sum()
    return pl.col(wt).sum()


class PolarsTallyProcessor(PolarsProcessor):
    """Collapse each group to one row holding its count.

    Without group columns the result is a single row with the table total.

    Example:
        ```python
        totals = PolarsTallyProcessor(group_by="artwork_id", wt="sale_price_usd").process(df)
        ```
    """

    def __init__(
        self,
        group_by: str | Iterable[str] | None = None,
        wt: str | None = None,
        sort: bool = False,
        name: str | None = None,
    ):
        """Initialize tally processor.

        Args:
            group_by: Columns identifying the groups. Repeats are ignored.
            wt: Optional numeric column to sum instead of counting rows.
                Nulls are skipped.
            sort: Sort output by the count column, descending.
            name: Name of the count column. Defaults to the configured
                count name, made unique against existing columns.
        """
        self.group_by = flatten_columns(group_by)
        self.wt = wt
        self.sort = sort
        self.name = name

    def _apply(self, lf: pl.LazyFrame) -> pl.LazyFrame:
        schema = lf.collect_schema()
        check_polars_schema(schema, self.group_by, self.wt, type(self).__name__)
        n = resolve_count_name(self.name, schema.names(), self.group_by)

        logger.debug(
            "Tallying %s by %s (wt=%s, sort=%s)",
            n,
            self.group_by or "<all rows>",
            self.wt,
            self.sort,
        )
        expr = count_expr(self.wt, schema).alias(n)
        if self.group_by:
            out = lf.group_by(self.group_by, maintain_order=True).agg(expr)
        else:
            out = lf.select(expr)

        if self.sort:
            out = out.sort(n, descending=True, maintain_order=True)
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}(group_by={self.group_by}, wt={self.wt}, sort={self.sort})"


class PolarsCountProcessor(PolarsTallyProcessor):
    """Group by `columns` and tally - one row per distinct combination.

    Example:
        ```python
        PolarsCountProcessor(["buyer_country"], sort=True).process(sales_df)
        ```
    """

    def __init__(
        self,
        columns: str | Iterable[str] | None = None,
        wt: str | None = None,
        sort: bool = False,
        name: str | None = None,
    ):
        super().__init__(group_by=columns, wt=wt, sort=sort, name=name)


class PolarsAddTallyProcessor(PolarsProcessor):
    """Add a column with each row's group count, keeping every row.

    This is to tally what `with_columns` is to `agg`.

    Example:
        ```python
        # players with more than three stints in total
        PolarsAddTallyProcessor(group_by="playerID").process(batting).filter(pl.col("n") > 3)
        ```
    """

    def __init__(
        self,
        group_by: str | Iterable[str] | None = None,
        wt: str | None = None,
        sort: bool = False,
        name: str | None = None,
    ):
        self.group_by = flatten_columns(group_by)
        self.wt = wt
        self.sort = sort
        self.name = name

    def _apply(self, lf: pl.LazyFrame) -> pl.LazyFrame:
        schema = lf.collect_schema()
        check_polars_schema(schema, self.group_by, self.wt, type(self).__name__)
        n = resolve_count_name(self.name, schema.names(), self.group_by)

        logger.debug(
            "Adding %s over %s (wt=%s, sort=%s)",
            n,
            self.group_by or "<all rows>",
            self.wt,
            self.sort,
        )
        expr = count_expr(self.wt, schema)
        if self.group_by:
            expr = expr.over(self.group_by)
        out = lf.with_columns(expr.alias(n))

        if self.sort:
            out = out.sort(n, descending=True, maintain_order=True)
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}(group_by={self.group_by}, wt={self.wt}, sort={self.sort})"


class PolarsAddCountProcessor(PolarsAddTallyProcessor):
    """Group by `columns` and add the group count to every row."""

    def __init__(
        self,
        columns: str | Iterable[str] | None = None,
        wt: str | None = None,
        sort: bool = False,
        name: str | None = None,
    ):
        super().__init__(group_by=columns, wt=wt, sort=sort, name=name)
