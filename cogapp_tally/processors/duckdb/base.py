"""Shared plumbing for DuckDB processors.

Input is registered as `_input` with an extra row-position column so that
SQL can reproduce first-seen group order and stable sort tie-breaks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import pandas as pd
import polars as pl

from ...config import get_connection
from ...validation import check_pandas_frame, unique_name

if TYPE_CHECKING:
    import duckdb

logger = logging.getLogger(__name__)


def quote(identifier: str) -> str:
    """Quote a column name for DuckDB SQL."""
    return '"' + identifier.replace('"', '""') + '"'


def quote_list(identifiers: Iterable[str]) -> str:
    return ", ".join(quote(i) for i in identifiers)


def sum_expr(wt: str | None) -> str:
    """Row count, or the null-skipping sum of `wt` (zero when all null)."""
    if wt is None:
        return "COUNT(*)"
    return f"COALESCE(SUM({quote(wt)}), 0)"


class DuckDBGroupProcessor:
    """Validate, register and run a grouped SQL statement.

    Subclasses implement `_generate_sql(row_col, existing)`.
    """

    columns: list[str]
    wt: str | None

    def _generate_sql(self, row_col: str, existing: list[str]) -> str:
        raise NotImplementedError

    def process(
        self,
        df: pd.DataFrame | pl.DataFrame,
        conn: "duckdb.DuckDBPyConnection | None" = None,
    ) -> pd.DataFrame:
        """Run the aggregation on a DataFrame.

        Args:
            df: Input DataFrame (pandas or polars).
            conn: Optional DuckDB connection. If not provided, uses the
                configured database (in-memory by default).

        Returns:
            Aggregated pandas DataFrame.
        """
        if isinstance(df, pl.DataFrame):
            df = df.to_pandas()

        check_pandas_frame(df, self.columns, self.wt, type(self).__name__)

        existing = [str(c) for c in df.columns]
        row_col = unique_name("row", existing)
        sql = self._generate_sql(row_col, existing)
        logger.debug("%r running SQL: %s", self, sql)

        should_close = conn is None
        conn = conn or get_connection()

        try:
            conn.register("_input", df.assign(**{row_col: range(len(df))}))
            try:
                return conn.sql(sql).df()
            finally:
                if not should_close:
                    conn.unregister("_input")
        finally:
            if should_close:
                conn.close()
