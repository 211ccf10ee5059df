"""Run several Polars tally/count/prop processors as one lazy query.

DuckDB processors run their own SQL and return pandas, so they cannot be
chained; call their `process()` on the chain's result instead.
"""

from __future__ import annotations

import logging

import pandas as pd
import polars as pl

from .duckdb.base import DuckDBGroupProcessor

logger = logging.getLogger(__name__)


class Chain:
    """Compose Polars processors into a single query.

    Each step sees the previous step's LazyFrame, so column checks run
    against the schema the earlier steps produce (e.g. `wt="n"` after an
    add_count step). Nothing is collected until the end.

    Example:
        from cogapp_tally.processors import Chain
        from cogapp_tally.processors.polars import PolarsAddCountProcessor, PolarsPropProcessor

        chain = Chain([
            PolarsAddCountProcessor("artwork_id"),
            PolarsPropProcessor("buyer_country", wt="n"),
        ])
        shares = chain.process(df)
        plan = chain.process(df, collect=False)  # LazyFrame
    """

    def __init__(self, processors: list):
        if not processors:
            raise ValueError("Chain requires at least one processor")

        for p in processors:
            if isinstance(p, DuckDBGroupProcessor):
                raise TypeError(
                    f"{type(p).__name__} runs in DuckDB and cannot be chained. "
                    "Use the matching Polars processor from cogapp_tally.processors.polars, "
                    "or call its process() on the chain's result."
                )
            if not hasattr(p, "_apply"):
                raise TypeError(
                    f"{type(p).__name__} does not support chaining. "
                    "Processors must have an _apply(LazyFrame) method."
                )

        self.processors = processors

    def process(
        self,
        df: pd.DataFrame | pl.DataFrame | pl.LazyFrame,
        collect: bool = True,
    ) -> pl.DataFrame | pl.LazyFrame:
        """Apply every processor in order.

        Args:
            df: Input DataFrame (pandas, polars DataFrame or LazyFrame)
            collect: Collect the final query. With False the LazyFrame is
                returned, so the chain can feed further polars operations.

        Returns:
            Polars DataFrame, or LazyFrame when collect is False

        Raises:
            ColumnNotFoundError: If a step references a column an earlier
                step did not produce.
        """
        if isinstance(df, pd.DataFrame):
            lf = pl.from_pandas(df).lazy()
        else:
            lf = df.lazy()

        for processor in self.processors:
            logger.debug("Chain step %r", processor)
            lf = processor._apply(lf)

        return lf.collect() if collect else lf

    def __repr__(self) -> str:
        names = [type(p).__name__ for p in self.processors]
        return f"Chain([{', '.join(names)}])"
