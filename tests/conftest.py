"""Pytest fixtures for cogapp_tally tests.

Key fixtures:
- sales_df: Small pandas sales table shared by processor tests
- sales_pl: The same table as a Polars DataFrame
- restore_config: Resets module configuration after every test
"""

import pandas as pd
import polars as pl
import pytest

from cogapp_tally import config


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any configure() calls made by a test."""
    saved = dict(config._config)
    yield
    config._config.clear()
    config._config.update(saved)


@pytest.fixture
def sales_df() -> pd.DataFrame:
    """Sample sales data for testing."""
    return pd.DataFrame(
        {
            "sale_id": [1, 2, 3, 4],
            "artwork_id": [101, 102, 101, 103],
            "sale_price_usd": [100000, 250000, 150000, 50000],
            "sale_date": ["2024-01-01", "2024-02-01", "2024-03-01", "2024-04-01"],
            "buyer_country": ["USA", "UK", "USA", "France"],
        }
    )


@pytest.fixture
def sales_pl(sales_df: pd.DataFrame) -> pl.DataFrame:
    """Sample sales data as a Polars DataFrame."""
    return pl.from_pandas(sales_df)


@pytest.fixture
def weighted_df() -> pl.DataFrame:
    """Three rows in two groups, one weight missing."""
    return pl.DataFrame({"g": ["a", "a", "b"], "w": [10, None, 5]})
