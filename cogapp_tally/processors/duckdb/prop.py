"""DuckDB proportion processor.

Same semantics as PolarsPropProcessor, expressed as a single SQL query.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...validation import flatten_columns, resolve_output_name, unique_name
from .base import DuckDBGroupProcessor, quote, quote_list, sum_expr


class DuckDBPropProcessor(DuckDBGroupProcessor):
    """Share of rows (or of total weight) per group, computed in DuckDB.

    Example:
        ```python
        processor = DuckDBPropProcessor(["buyer_country"], sort=True)
        shares_df = processor.process(sales_df)
        ```
    """

    def __init__(
        self,
        columns: str | Iterable[str],
        wt: str | None = None,
        sort: bool = False,
        name: str | None = None,
    ):
        self.columns = flatten_columns(columns)
        if not self.columns:
            raise ValueError("DuckDBPropProcessor requires at least one group column")
        self.wt = wt
        self.sort = sort
        self.name = name

    def _generate_sql(self, row_col: str, existing: list[str]) -> str:
        prop_name = resolve_output_name(self.name, "prop_name", self.columns, self.columns)
        taken = [*existing, row_col, prop_name]
        n = unique_name("n", taken)
        first = unique_name("first", [*taken, n])
        total = unique_name("total", [*taken, n, first])

        prop, n, first, total = quote(prop_name), quote(n), quote(first), quote(total)
        group_str = quote_list(self.columns)
        order = f"{prop} DESC, {first}" if self.sort else first

        return f"""WITH counts AS (
            SELECT {group_str}, {sum_expr(self.wt)} AS {n}, MIN({quote(row_col)}) AS {first}
            FROM _input
            GROUP BY {group_str}
        ),
        totals AS (
            SELECT *, SUM({n}) OVER () AS {total} FROM counts
        )
        SELECT {group_str}, CAST({n} AS DOUBLE) / {total} AS {prop}
        FROM totals
        WHERE {total} <> 0
        ORDER BY {order}"""

    def __repr__(self) -> str:
        return f"DuckDBPropProcessor(GROUP BY {', '.join(self.columns)})"
