"""
Input DataFrame validation for the emissions wrangling steps.

Validation functions:
- Emptiness checks
- Required column checks with typo suggestions
- Unique key checks (one row per country, or per country and year)
- Tidy table structure checks
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ghg_tidy.library.error_messages import format_error, suggest_similar
from ghg_tidy.library.exceptions import DataProcessingError, InputValidationError
from ghg_tidy.library.utils.dataframes import TidyDataFrame


def validate_not_empty(df: pd.DataFrame, dataset_name_for_error_msg: str) -> None:
    """
    Validate that DataFrame is not empty.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to validate
    dataset_name_for_error_msg : str
        Name of the dataset for error messages

    Raises
    ------
    DataProcessingError
        If DataFrame has no rows
    """
    if len(df) == 0:
        raise DataProcessingError(
            format_error(
                "empty_dataframe",
                dataset_name=dataset_name_for_error_msg,
            )
        )


def validate_columns_present(
    df: pd.DataFrame,
    columns: Sequence[str],
    dataset_name_for_error_msg: str,
) -> None:
    """
    Validate that every name in ``columns`` is a column of ``df``.

    Raises
    ------
    DataProcessingError
        Listing the missing columns, with a suggestion for the first one
    """
    available = [str(col) for col in df.columns]
    missing = [col for col in columns if col not in df.columns]
    if not missing:
        return

    found_columns = available[:8]
    if len(available) > 8:
        found_columns.append("...")
    raise DataProcessingError(
        format_error(
            "missing_columns",
            dataset_name=dataset_name_for_error_msg,
            missing=missing,
            found_columns=found_columns,
            suggestion=suggest_similar(missing[0], available),
        )
    )


def validate_unique_keys(
    df: pd.DataFrame,
    key_columns: str | Sequence[str],
    dataset_name_for_error_msg: str,
) -> None:
    """
    Validate that the key columns identify each row at most once.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame to validate
    key_columns : str | Sequence[str]
        A single key column, or several columns forming a compound key
    dataset_name_for_error_msg : str
        Name of the dataset for error messages

    Raises
    ------
    DataProcessingError
        If any key appears more than once
    """
    keys = [key_columns] if isinstance(key_columns, str) else list(key_columns)
    duplicated = df.duplicated(subset=keys, keep=False)
    if not duplicated.any():
        return

    duplicates = df.loc[duplicated, keys].drop_duplicates()
    examples = [
        row[0] if len(row) == 1 else tuple(row)
        for row in duplicates.head(5).itertuples(index=False, name=None)
    ]
    raise DataProcessingError(
        format_error(
            "duplicate_keys",
            dataset_name=dataset_name_for_error_msg,
            key_column=" + ".join(keys),
            duplicates=examples,
        )
    )


def validate_tidy_structure(
    df: TidyDataFrame,
    dataset_name_for_error_msg: str,
    key_column: str = "Party",
    year_column: str = "year",
    value_column: str = "emissions",
) -> None:
    """
    Validate a long table before ranking, filtering or pivoting it back.

    Checks that the three tidy columns exist and that each (key, year) pair
    appears once.

    Raises
    ------
    InputValidationError
        If a tidy column is missing or a (key, year) pair repeats
    """
    missing = [
        col for col in (key_column, year_column, value_column) if col not in df.columns
    ]
    if missing:
        raise InputValidationError(
            f"{dataset_name_for_error_msg} is not a tidy emissions table: "
            f"missing columns {missing}. Available columns: {list(df.columns)}"
        )

    duplicated = df.duplicated(subset=[key_column, year_column], keep=False)
    if duplicated.any():
        pairs = (
            df.loc[duplicated, [key_column, year_column]]
            .drop_duplicates()
            .head(5)
            .itertuples(index=False, name=None)
        )
        raise InputValidationError(
            f"{dataset_name_for_error_msg} has more than one row for "
            f"({key_column}, {year_column}) pairs: {list(pairs)}"
        )
