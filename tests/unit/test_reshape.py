"""
Tests for reshaping between wide and tidy emissions tables.

"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from ghg_tidy.library.exceptions import DataProcessingError, InputValidationError
from ghg_tidy.library.wrangling import (
    coerce_emissions,
    pivot_long_to_wide,
    pivot_wide_to_long,
)


def assert_same_wide(actual: pd.DataFrame, expected: pd.DataFrame) -> None:
    """Compare wide tables cell by cell, ignoring column order and dtypes."""
    pd.testing.assert_frame_equal(
        actual[list(expected.columns)].reset_index(drop=True),
        expected.reset_index(drop=True),
        check_dtype=False,
        check_column_type=False,
    )


class TestPivotWideToLong:
    """Test the wide-to-long reshape."""

    def test_scenario_rows(self, tidy):
        """Three countries and two years give six (Party, year, emissions) rows."""
        assert list(tidy.columns) == ["Party", "year", "emissions"]
        assert len(tidy) == 6
        rows = set(
            zip(tidy["Party"], tidy["year"].astype(str), tidy["emissions"], strict=True)
        )
        assert rows == {
            ("A", "2014", 10.0),
            ("B", "2014", 30.0),
            ("C", "2014", 20.0),
            ("A", "2015", 12.0),
            ("B", "2015", 5.0),
            ("C", "2015", 40.0),
        }

    def test_row_count_is_rows_times_years(self):
        """rows(long) == rows(wide) x number of year columns."""
        wide = pd.DataFrame(
            {
                "Party": ["P1", "P2", "P3", "P4", "P5"],
                "1990": [1.0, 2.0, 3.0, 4.0, 5.0],
                "1991": [1.5, 2.5, 3.5, 4.5, 5.5],
                "1992": [2.0, 3.0, 4.0, 5.0, 6.0],
                "1993": [2.5, 3.5, 4.5, 5.5, 6.5],
            }
        )
        long = pivot_wide_to_long(wide)
        assert len(long) == 5 * 4

    def test_year_is_ordered_categorical(self, tidy):
        """Years keep the source column order as an ordered categorical."""
        assert isinstance(tidy["year"].dtype, pd.CategoricalDtype)
        assert tidy["year"].cat.ordered
        assert list(tidy["year"].cat.categories) == ["2014", "2015"]

    def test_missing_values_become_explicit_rows(self):
        """Empty cells are kept as NaN rows, never dropped or zeroed."""
        wide = pd.DataFrame(
            {"Party": ["A", "B"], "2014": [10.0, np.nan], "2015": [12.0, 5.0]}
        )
        long = pivot_wide_to_long(wide)
        assert len(long) == 4
        missing = long[long["emissions"].isna()]
        assert len(missing) == 1
        assert missing["Party"].iloc[0] == "B"
        assert str(missing["year"].iloc[0]) == "2014"
        assert not (long["emissions"] == 0).any()

    def test_text_numbers_are_parsed(self):
        """Numbers stored as text, with the configured separator, become floats."""
        wide = pd.DataFrame({"Party": ["A", "B"], "2015": ["1,234", " 56 "]})
        long = pivot_wide_to_long(wide, thousands=",")
        assert long["emissions"].tolist() == [1234.0, 56.0]

    def test_decimal_comma_rejected_without_separator(self):
        """A decimal comma is an error, not a grouping separator, by default."""
        wide = pd.DataFrame({"Party": ["A"], "2015": ["12,5"]})
        with pytest.raises(DataProcessingError, match="1 cells could not be read"):
            pivot_wide_to_long(wide)

    def test_duplicate_keys_rejected(self):
        """Country names must be unique in the wide table."""
        wide = pd.DataFrame({"Party": ["A", "A"], "2015": [1.0, 2.0]})
        with pytest.raises(DataProcessingError, match="Duplicate Party values"):
            pivot_wide_to_long(wide)

    def test_missing_key_rejected(self):
        """Every row must name a country."""
        wide = pd.DataFrame({"Party": ["A", None], "2015": [1.0, 2.0]})
        with pytest.raises(DataProcessingError, match="without a Party"):
            pivot_wide_to_long(wide)

    def test_non_year_column_rejected(self, example_wide):
        """Unprojected tables (with the irregular header) are rejected."""
        with pytest.raises(DataProcessingError, match="not year labels"):
            pivot_wide_to_long(example_wide)

    def test_no_year_columns_rejected(self):
        """A table with only the key column has nothing to reshape."""
        with pytest.raises(DataProcessingError, match="no year columns"):
            pivot_wide_to_long(pd.DataFrame({"Party": ["A"]}))

    def test_custom_column_names(self, projected):
        """The new column names can be chosen."""
        long = pivot_wide_to_long(projected, year_column="yr", value_column="kt")
        assert list(long.columns) == ["Party", "yr", "kt"]


class TestCoerceEmissions:
    """Test numeric conversion of year columns."""

    def test_notation_keys_raise(self):
        """Unparsed notation keys are reported, not turned into NaN."""
        wide = pd.DataFrame({"Party": ["A", "B"], "2015": ["12", "NE"]})
        with pytest.raises(DataProcessingError, match="1 cells could not be read"):
            coerce_emissions(wide, ["2015"])

    def test_error_lists_offending_cell(self):
        """The error names the country, year and value."""
        wide = pd.DataFrame({"Party": ["A", "B"], "2015": ["12", "n/a*"]})
        with pytest.raises(DataProcessingError, match="'B', '2015', 'n/a\\*'"):
            coerce_emissions(wide, ["2015"])

    def test_only_configured_separator_is_removed(self):
        """With thousands=".", dots are dropped and commas still fail."""
        wide = pd.DataFrame({"Party": ["A", "B"], "2015": ["1.234", "2.5"]})
        out = coerce_emissions(wide, ["2015"], thousands=".")
        assert out["2015"].tolist() == [1234.0, 25.0]

        wide = pd.DataFrame({"Party": ["A"], "2015": ["1,5"]})
        with pytest.raises(DataProcessingError, match="'A', '2015', '1,5'"):
            coerce_emissions(wide, ["2015"], thousands=".")

    def test_empty_text_is_missing(self):
        """Blank text cells are missing values."""
        wide = pd.DataFrame({"Party": ["A", "B"], "2015": ["12", "  "]})
        out = coerce_emissions(wide, ["2015"])
        assert out["2015"].iloc[0] == 12.0
        assert np.isnan(out["2015"].iloc[1])


class TestPivotLongToWide:
    """Test the long-to-wide reshape and the round-trip law."""

    def test_round_trip_reproduces_wide(self, projected, tidy):
        """wide -> long -> wide gives back the same cells."""
        assert_same_wide(pivot_long_to_wide(tidy), projected)

    def test_round_trip_with_missing_values(self):
        """NaN cells survive the round trip."""
        wide = pd.DataFrame(
            {
                "Party": ["X", "Y", "Z"],
                "1990": [1.0, np.nan, 3.0],
                "1991": [np.nan, np.nan, 6.0],
            }
        )
        assert_same_wide(pivot_long_to_wide(pivot_wide_to_long(wide)), wide)

    def test_round_trip_after_shuffle(self, projected, tidy):
        """Row order of the long table does not matter for the cells."""
        shuffled = tidy.sample(frac=1.0, random_state=0)
        back = pivot_long_to_wide(shuffled).set_index("Party").sort_index()
        expected = projected.set_index("Party").sort_index()
        pd.testing.assert_frame_equal(
            back[list(expected.columns)],
            expected,
            check_dtype=False,
            check_column_type=False,
            check_names=False,
        )

    def test_year_order_follows_categories(self, tidy):
        """Year columns come back in categorical order."""
        wide = pivot_long_to_wide(tidy.iloc[::-1])
        assert list(wide.columns) == ["Party", "2014", "2015"]

    def test_plain_string_years(self):
        """Non-categorical year columns are accepted."""
        long = pd.DataFrame(
            {"Party": ["A", "A"], "year": ["2015", "2014"], "emissions": [1.0, 2.0]}
        )
        wide = pivot_long_to_wide(long)
        assert list(wide.columns) == ["Party", "2015", "2014"]

    def test_duplicate_pairs_rejected(self):
        """Two rows for the same (Party, year) cannot be pivoted."""
        long = pd.DataFrame(
            {"Party": ["A", "A"], "year": ["2015", "2015"], "emissions": [1.0, 2.0]}
        )
        with pytest.raises(InputValidationError, match="more than one row"):
            pivot_long_to_wide(long)

    def test_missing_tidy_column_rejected(self, tidy):
        """The three tidy columns are required."""
        with pytest.raises(InputValidationError, match="missing columns"):
            pivot_long_to_wide(tidy.drop(columns=["emissions"]))
