"""Tally and proportion processors organized by engine type.

Processor Selection Guide
-------------------------

┌──────────────────────────────┬─────────────────────────────────────────────┐
│ Use case                     │ Processor                                   │
├──────────────────────────────┼─────────────────────────────────────────────┤
│ One row per group with count │ PolarsCountProcessor / DuckDBCountProcessor │
│ Total over existing groups   │ PolarsTallyProcessor                        │
│ Keep rows, add group count   │ PolarsAddCountProcessor                     │
│ Keep rows, add tally         │ PolarsAddTallyProcessor                     │
│ Share of each group          │ PolarsPropProcessor / DuckDBPropProcessor   │
│ Chain Polars operations      │ Chain([...]) for single optimized query     │
└──────────────────────────────┴─────────────────────────────────────────────┘

Return Types:
    - DuckDB processors return pandas DataFrames
    - Polars processors return Polars DataFrames (LazyFrame for LazyFrame input)
    - Chain returns Polars DataFrames

Examples
--------

Proportions with Polars:

    from cogapp_tally.processors.polars import PolarsPropProcessor

    shares = PolarsPropProcessor("buyer_country", sort=True).process(df)

Weighted counts with DuckDB:

    from cogapp_tally.processors.duckdb import DuckDBCountProcessor

    totals = DuckDBCountProcessor("artwork_id", wt="sale_price_usd").process(df)
"""

from . import duckdb, polars
from .chain import Chain

__all__ = [
    "Chain",
    "duckdb",
    "polars",
]
