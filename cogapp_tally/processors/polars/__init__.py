"""Polars-based tally, count and proportion processors.

All processors here build lazy queries, so they can be chained:
    chain = Chain([
        PolarsAddCountProcessor("artwork_id"),
        PolarsPropProcessor("buyer_country", sort=True),
    ])
    result = chain.process(df)  # single optimized query
"""

from .base import PolarsProcessor
from .count import (
    PolarsAddCountProcessor,
    PolarsAddTallyProcessor,
    PolarsCountProcessor,
    PolarsTallyProcessor,
)
from .prop import PolarsPropProcessor

__all__ = [
    "PolarsProcessor",
    "PolarsAddCountProcessor",
    "PolarsAddTallyProcessor",
    "PolarsCountProcessor",
    "PolarsPropProcessor",
    "PolarsTallyProcessor",
]
