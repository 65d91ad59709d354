"""
Reshaping between wide and tidy (long) emissions tables.

``pivot_wide_to_long`` turns every (country, year column) cell into one row
of ``Party, year, emissions``. Empty cells stay as NaN rows rather than being
dropped, so the long table always has ``rows x year columns`` rows and
``pivot_long_to_wide`` can rebuild the wide table exactly.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from ghg_tidy.library.error_messages import format_error
from ghg_tidy.library.exceptions import DataProcessingError
from ghg_tidy.library.utils.dataframes import (
    TidyDataFrame,
    WideDataFrame,
    is_year_label,
)
from ghg_tidy.library.validation import (
    validate_columns_present,
    validate_tidy_structure,
    validate_unique_keys,
)

logger = logging.getLogger(__name__)


def coerce_emissions(
    wide: WideDataFrame,
    value_columns: Sequence[str],
    key_column: str = "Party",
    thousands: str | None = None,
    dataset_name_for_error_msg: str = "emissions table",
) -> WideDataFrame:
    """
    Convert year columns to floats, keeping missing cells as NaN.

    Text cells are parsed after removing whitespace and, when ``thousands`` is
    given, that separator. Any other separator (such as a decimal comma when
    ``thousands`` is None) leaves the cell unparsed.
    Empty text counts as missing. Anything else that does not parse is an
    error: it must never be turned into zero or quietly into NaN.

    Raises
    ------
    DataProcessingError
        Listing (country, year, value) examples of cells that are not numbers
    """
    out = wide.copy()
    bad_cells: list[tuple] = []

    for col in value_columns:
        series = out[col]
        if pd.api.types.is_numeric_dtype(series):
            out[col] = series.astype(float)
            continue

        text = series.astype(str).str.strip()
        if thousands:
            text = text.str.replace(thousands, "", regex=False)
        text = text.where(series.notna() & (text != ""))
        converted = pd.to_numeric(text, errors="coerce")
        unparsed = converted.isna() & text.notna()
        bad_cells.extend(
            (out.at[idx, key_column], col, series.at[idx])
            for idx in out.index[unparsed.to_numpy()]
        )
        out[col] = converted.astype(float)

    if bad_cells:
        raise DataProcessingError(
            format_error(
                "non_numeric_values",
                dataset_name=dataset_name_for_error_msg,
                count=len(bad_cells),
                examples=bad_cells[:5],
            )
        )
    return out


def pivot_wide_to_long(
    wide: WideDataFrame,
    key_column: str = "Party",
    year_column: str = "year",
    value_column: str = "emissions",
    value_columns: Sequence[str] | None = None,
    thousands: str | None = None,
) -> TidyDataFrame:
    """
    Reshape a wide table to one row per (country, year).

    Parameters
    ----------
    wide
        Projected wide table: one key column and one column per year
    key_column
        Column holding country names (must be unique)
    year_column
        Name for the new year column
    value_column
        Name for the new emissions column
    value_columns
        Year columns to stack. Defaults to every column except the key.
    thousands
        Thousands separator in text cells (None: digits are not grouped)

    Returns
    -------
    TidyDataFrame
        Columns ``key_column``, ``year_column``, ``value_column``. The year is
        an ordered categorical in source column order; emissions are floats
        with NaN for missing cells. Rows are grouped by year, countries in
        source order within each year.

    Raises
    ------
    DataProcessingError
        If the key column is missing or repeats, a stacked column is not a
        year, or a cell is not a number
    """
    validate_columns_present(wide, [key_column], "wide emissions table")
    if wide[key_column].isna().any():
        raise DataProcessingError(
            f"wide emissions table has rows without a {key_column}; "
            "every row must name a country."
        )
    validate_unique_keys(wide, key_column, "wide emissions table")

    if value_columns is None:
        value_columns = [str(col) for col in wide.columns if col != key_column]
    else:
        value_columns = [str(col) for col in value_columns]
        validate_columns_present(wide, value_columns, "wide emissions table")

    if not value_columns:
        raise DataProcessingError(
            "wide emissions table has no year columns to reshape. "
            "Select the year columns with project_columns() first."
        )
    not_years = [col for col in value_columns if not is_year_label(col)]
    if not_years:
        raise DataProcessingError(
            f"Columns {not_years} are not year labels. Drop them or rename them "
            "(see project_columns and rename_last_inventory_column) before reshaping."
        )

    numeric = coerce_emissions(
        wide, value_columns, key_column=key_column, thousands=thousands
    )
    long = numeric.melt(
        id_vars=[key_column],
        value_vars=value_columns,
        var_name=year_column,
        value_name=value_column,
    )
    long[year_column] = pd.Categorical(
        long[year_column].astype(str), categories=value_columns, ordered=True
    )
    long[value_column] = long[value_column].astype(float)

    logger.debug(
        "Reshaped %d countries x %d years into %d rows",
        len(wide),
        len(value_columns),
        len(long),
    )
    return long


def pivot_long_to_wide(
    long: TidyDataFrame,
    key_column: str = "Party",
    year_column: str = "year",
    value_column: str = "emissions",
) -> WideDataFrame:
    """
    Reshape a tidy table back to one row per country and one column per year.

    Countries keep their order of first appearance. Years follow the
    categorical order when ``year_column`` is categorical, otherwise the
    order of first appearance. Combinations absent from ``long`` become NaN.

    Raises
    ------
    InputValidationError
        If a tidy column is missing or a (country, year) pair repeats
    """
    validate_tidy_structure(
        long,
        "tidy emissions table",
        key_column=key_column,
        year_column=year_column,
        value_column=value_column,
    )

    years = long[year_column]
    if isinstance(years.dtype, pd.CategoricalDtype):
        observed = set(years.dropna().astype(str))
        year_order = [str(c) for c in years.cat.categories if str(c) in observed]
    else:
        year_order = [str(y) for y in pd.unique(years.dropna())]
    key_order = list(pd.unique(long[key_column]))

    frame = pd.DataFrame(
        {
            key_column: long[key_column].to_numpy(),
            year_column: years.astype(str).to_numpy(),
            value_column: long[value_column].to_numpy(),
        }
    )
    wide = frame.pivot(index=key_column, columns=year_column, values=value_column)
    wide = wide.reindex(index=key_order, columns=year_order)
    wide.columns = pd.Index(year_order, dtype=object)
    wide.index.name = key_column

    return wide.reset_index()
