"""DuckDB count processor for grouped tallies.

Execute the tally as SQL and return a pandas DataFrame.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...validation import flatten_columns, resolve_count_name, unique_name
from .base import DuckDBGroupProcessor, quote, quote_list, sum_expr


class DuckDBCountProcessor(DuckDBGroupProcessor):
    """Count rows (or sum weights) per group with DuckDB.

    Without columns, returns a single row with the table total.

    Example:
        ```python
        processor = DuckDBCountProcessor(["artwork_id"], wt="sale_price_usd", sort=True)
        counted_df = processor.process(sales_df)
        ```
    """

    def __init__(
        self,
        columns: str | Iterable[str] | None = None,
        wt: str | None = None,
        sort: bool = False,
        name: str | None = None,
    ):
        """Initialize count processor.

        Args:
            columns: Columns to group by. Repeats are ignored.
            wt: Optional numeric column to sum instead of counting rows.
            sort: Sort output by the count column, descending.
            name: Name of the count column.
        """
        self.columns = flatten_columns(columns)
        self.wt = wt
        self.sort = sort
        self.name = name

    def _generate_sql(self, row_col: str, existing: list[str]) -> str:
        """Generate the aggregation SQL statement."""
        n = quote(resolve_count_name(self.name, existing, self.columns))
        agg = sum_expr(self.wt)

        if not self.columns:
            return f"SELECT {agg} AS {n} FROM _input"

        first = quote(unique_name("first", [*existing, row_col]))
        group_str = quote_list(self.columns)
        order = f"{n} DESC, {first}" if self.sort else first

        return f"""WITH counts AS (
            SELECT {group_str}, {agg} AS {n}, MIN({quote(row_col)}) AS {first}
            FROM _input
            GROUP BY {group_str}
        )
        SELECT {group_str}, {n}
        FROM counts
        ORDER BY {order}"""

    def __repr__(self) -> str:
        return f"DuckDBCountProcessor(GROUP BY {', '.join(self.columns) or '<all rows>'})"
