"""Base class for chainable Polars processors."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pandas as pd
import polars as pl


class PolarsProcessor(ABC):
    """Base processor for polars - subclasses build a lazy query in `_apply`.

    `process` accepts pandas, polars DataFrame or LazyFrame input.
    LazyFrame in gives LazyFrame out; anything else is collected.
    """

    @abstractmethod
    def _apply(self, lf: pl.LazyFrame) -> pl.LazyFrame:
        """Apply the transformation to a LazyFrame (for chaining optimization)."""
        pass

    def process(
        self, df: pd.DataFrame | pl.DataFrame | pl.LazyFrame
    ) -> pl.DataFrame | pl.LazyFrame:
        """Run the processor.

        Args:
            df: Input DataFrame (pandas, polars DataFrame, or polars LazyFrame)

        Returns:
            New DataFrame/LazyFrame (same type as input for polars types)
        """
        # LazyFrame in -> LazyFrame out
        if isinstance(df, pl.LazyFrame):
            return self._apply(df)

        # Convert pandas to polars if needed
        if isinstance(df, pd.DataFrame):
            pl_df = pl.from_pandas(df)
        else:
            pl_df = df

        # DataFrame in -> DataFrame out
        return self._apply(pl_df.lazy()).collect()
