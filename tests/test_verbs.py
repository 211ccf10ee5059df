"""Tests for the functional API: count, tally, prop, add_count, add_tally."""

import random

import numpy as np
import pandas as pd
import polars as pl
import pytest

from cogapp_tally import add_count, add_tally, count, prop, tally


def random_table(seed: int, rows: int = 50) -> pl.DataFrame:
    """Seeded table with two group columns and a weight column with gaps."""
    rng = random.Random(seed)
    weights = [rng.choice([None, *range(1, 11)]) for _ in range(rows)]
    weights[0] = rng.randint(1, 10)
    return pl.DataFrame(
        {
            "colour": [rng.choice(["red", "green", "blue", "grey"]) for _ in range(rows)],
            "size": [rng.choice([1, 2, 3]) for _ in range(rows)],
            "weight": pl.Series(weights, dtype=pl.Int64),
        }
    )


# -----------------------------------------------------------------------------
# Worked examples
# -----------------------------------------------------------------------------


class TestPropScenarios:
    """Worked examples for prop."""

    def test_unweighted(self) -> None:
        """Test groups a (2 rows) and b (1 row)."""
        result = prop(pl.DataFrame({"g": ["a", "a", "b"]}), "g")

        assert result["g"].to_list() == ["a", "b"]
        assert result["proportion"].to_list() == pytest.approx([2 / 3, 1 / 3])

    def test_weighted_with_null(self, weighted_df: pl.DataFrame) -> None:
        """Test a = 10/15 and b = 5/15 with a missing weight skipped."""
        result = prop(weighted_df, "g", wt="w")

        assert result["proportion"].to_list() == pytest.approx([10 / 15, 5 / 15])

    def test_weighted_with_nan_from_pandas(self) -> None:
        """Test pandas NaN weights behave like nulls."""
        df = pd.DataFrame({"g": ["a", "a", "b"], "w": [10.0, np.nan, 5.0]})
        result = prop(df, "g", wt="w")

        assert result["proportion"].to_list() == pytest.approx([10 / 15, 5 / 15])

    def test_empty_table(self) -> None:
        """Test an empty table gives an empty result without error."""
        empty = pl.DataFrame({"g": pl.Series([], dtype=pl.Utf8)})
        result = prop(empty, "g")

        assert result.height == 0
        assert result.columns == ["g", "proportion"]

    def test_single_group(self) -> None:
        """Test one group covering every row has proportion 1.0."""
        result = prop(pl.DataFrame({"g": ["a", "a", "a"]}), "g")

        assert result["proportion"].to_list() == [1.0]

    def test_group_with_only_null_weights_counts_zero(self) -> None:
        """Test a group whose weights are all null is kept with proportion 0."""
        df = pl.DataFrame({"g": ["a", "b", "b"], "w": [None, 4, 4]})
        result = prop(df, "g", wt="w")

        assert result["g"].to_list() == ["a", "b"]
        assert result["proportion"].to_list() == [0.0, 1.0]

    def test_all_weights_null_gives_empty_result(self) -> None:
        """Test a zero total weight gives no rows rather than NaN."""
        df = pl.DataFrame({"g": ["a", "b"], "w": [None, None]})
        result = prop(df, "g", wt="w")

        assert result.height == 0

    def test_zero_weights_give_empty_result(self) -> None:
        """Test weights that sum to zero give no rows."""
        df = pl.DataFrame({"g": ["a", "b"], "w": [0, 0]})

        assert prop(df, "g", wt="w").height == 0

    def test_columns_as_list(self) -> None:
        """Test group columns passed as a list."""
        df = pl.DataFrame({"g": ["a", "b"], "h": [1, 1]})
        result = prop(df, ["g", "h"])

        assert result.columns == ["g", "h", "proportion"]

    def test_custom_name(self, weighted_df: pl.DataFrame) -> None:
        """Test naming the proportion column."""
        result = prop(weighted_df, "g", name="share")

        assert result.columns == ["g", "share"]


# -----------------------------------------------------------------------------
# Properties over random tables
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("seed", range(8))
class TestPropProperties:
    """Properties that hold for any non-empty table."""

    @pytest.mark.parametrize("wt", [None, "weight"])
    def test_sums_to_one(self, seed: int, wt: str | None) -> None:
        """Test proportions add up to 1.0."""
        result = prop(random_table(seed), "colour", "size", wt=wt)

        assert result["proportion"].sum() == pytest.approx(1.0, abs=1e-9)

    def test_one_row_per_group(self, seed: int) -> None:
        """Test output rows equal distinct group combinations."""
        df = random_table(seed)
        result = prop(df, "colour", "size", wt="weight")

        assert result.height == df.select(["colour", "size"]).unique().height

    def test_idempotent(self, seed: int) -> None:
        """Test normalising proportions again leaves them unchanged."""
        first = prop(random_table(seed), "colour", "size", wt="weight")
        second = prop(first, "colour", "size", wt="proportion")

        assert second["colour"].to_list() == first["colour"].to_list()
        assert second["proportion"].to_list() == pytest.approx(first["proportion"].to_list())

    def test_sorted_descending(self, seed: int) -> None:
        """Test sort=True orders proportions from largest to smallest."""
        values = prop(random_table(seed), "colour", sort=True)["proportion"].to_list()

        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_matches_count(self, seed: int) -> None:
        """Test proportions equal counts divided by their total."""
        df = random_table(seed)
        counts = count(df, "colour", wt="weight")
        result = prop(df, "colour", wt="weight")

        total = counts["n"].sum()
        assert result["proportion"].to_list() == pytest.approx(
            [n / total for n in counts["n"].to_list()]
        )


# -----------------------------------------------------------------------------
# count / tally / add_count / add_tally
# -----------------------------------------------------------------------------


class TestCountVerbs:
    """Tests for the counting shortcuts."""

    def test_count_multiple_arguments(self, sales_df: pd.DataFrame) -> None:
        """Test grouping by several positional columns."""
        result = count(sales_df, "artwork_id", "buyer_country", sort=True)

        assert result["n"].to_list() == [2, 1, 1]

    def test_count_without_columns_is_tally(self, sales_df: pd.DataFrame) -> None:
        """Test count with no columns returns the total."""
        assert count(sales_df)["n"].to_list() == tally(sales_df)["n"].to_list() == [4]

    def test_tally_group_by(self, sales_pl: pl.DataFrame) -> None:
        """Test tally over explicit groups."""
        result = tally(sales_pl, group_by="buyer_country", wt="sale_price_usd", sort=True)

        assert result["buyer_country"].to_list() == ["USA", "UK", "France"]
        assert result["n"].to_list() == [250000, 250000, 50000]

    def test_add_count_filter(self, sales_pl: pl.DataFrame) -> None:
        """Test keeping artworks sold more than once."""
        result = add_count(sales_pl, "artwork_id").filter(pl.col("n") > 1)

        assert result["sale_id"].to_list() == [1, 3]

    def test_add_count_weighted(self, sales_pl: pl.DataFrame) -> None:
        """Test weighted add_count attaches group sums."""
        result = add_count(sales_pl, "buyer_country", wt="sale_price_usd", name="country_total")

        assert result["country_total"].to_list() == [250000, 250000, 250000, 50000]

    def test_add_tally_group_by(self, sales_pl: pl.DataFrame) -> None:
        """Test add_tally within existing groups."""
        result = add_tally(sales_pl, group_by="artwork_id")

        assert result["n"].to_list() == [2, 1, 2, 1]
        assert result.columns == [*sales_pl.columns, "n"]
