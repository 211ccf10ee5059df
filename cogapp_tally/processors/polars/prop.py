"""Polars processor for the proportion of observations by group.

`prop` is to `count` as a frequency table is to a proportion table:
count rows per group, divide by the total, drop the intermediate count.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import polars as pl

from ...validation import check_polars_schema, flatten_columns, resolve_output_name, unique_name
from .base import PolarsProcessor
from .count import count_expr

logger = logging.getLogger(__name__)


class PolarsPropProcessor(PolarsProcessor):
    """Share of rows (or of total weight) held by each group.

    Returns one row per distinct group combination, in first-seen order,
    with the group columns and a proportion column that sums to 1.0.
    When the total is zero (empty table, or weights that are all null)
    the result has no rows.

    Example:
        ```python
        processor = PolarsPropProcessor(["buyer_country"], wt="sale_price_usd", sort=True)
        shares = processor.process(sales_df)

        # Chained with optimization:
        chain = Chain([
            PolarsAddCountProcessor("artwork_id"),
            PolarsPropProcessor("buyer_country"),
        ])
        result = chain.process(df)  # single optimized query
        ```
    """

    def __init__(
        self,
        columns: str | Iterable[str],
        wt: str | None = None,
        sort: bool = False,
        name: str | None = None,
    ):
        """Initialize proportion processor.

        Args:
            columns: Columns to group by. Repeats are ignored.
            wt: Optional numeric column; sums its non-null values per group
                instead of counting rows.
            sort: Sort output by proportion, descending. Ties keep the order
                in which groups first appear.
            name: Name of the proportion column. Must not be a group column.
                Defaults to the configured prop name, prefixed with ``n``
                if a group column already has that name.
        """
        self.columns = flatten_columns(columns)
        if not self.columns:
            raise ValueError("PolarsPropProcessor requires at least one group column")
        self.wt = wt
        self.sort = sort
        self.name = name

    def _apply(self, lf: pl.LazyFrame) -> pl.LazyFrame:
        """Build the count -> divide -> drop -> sort query."""
        schema = lf.collect_schema()
        check_polars_schema(schema, self.columns, self.wt, type(self).__name__)

        # only group columns survive into the output, so only they can clash
        prop_name = resolve_output_name(self.name, "prop_name", self.columns, self.columns)
        taken = [*schema.names(), prop_name]
        n = unique_name("n", taken)
        total = unique_name("total", [*taken, n])

        logger.debug(
            "Computing %s by %s (wt=%s, sort=%s)", prop_name, self.columns, self.wt, self.sort
        )
        out = (
            lf.group_by(self.columns, maintain_order=True)
            .agg(count_expr(self.wt, schema).alias(n))
            .with_columns(pl.col(n).sum().alias(total))
            # zero total means nothing to divide: no rows rather than NaN
            .filter(pl.col(total) != 0)
            .with_columns((pl.col(n) / pl.col(total)).cast(pl.Float64).alias(prop_name))
            .select([*self.columns, prop_name])
        )

        if self.sort:
            out = out.sort(prop_name, descending=True, maintain_order=True)
        return out

    def __repr__(self) -> str:
        return f"PolarsPropProcessor(group_by={self.columns}, wt={self.wt}, sort={self.sort})"
