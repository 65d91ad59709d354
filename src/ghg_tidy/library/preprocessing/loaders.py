"""Data loading functions for the tutorial notebook and pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from ghg_tidy.library.config.models import DEFAULT_NA_VALUES
from ghg_tidy.library.exceptions import DataLoadingError
from ghg_tidy.library.utils.dataframes import (
    WideDataFrame,
    ensure_string_year_columns,
    resolve_project_path,
)
from ghg_tidy.library.validation import (
    validate_columns_present,
    validate_not_empty,
)

logger = logging.getLogger(__name__)


def load_wide_emissions(
    source_path: Path | str,
    key_column: str = "Party",
    na_values: Sequence[str] | None = None,
    thousands: str | None = None,
) -> WideDataFrame:
    """Load a wide emissions CSV (one row per country, one column per year).

    The file is read whole; header names are stripped of surrounding
    whitespace and country names are kept as text.

    Args:
        source_path: Path to the CSV, absolute or relative to the project root
        key_column: Column holding country names
        na_values: Cell values to read as missing (defaults to UNFCCC
            notation keys such as "NO" and "NE")
        thousands: Thousands separator used in numeric cells, if any

    Returns
    -------
        Wide DataFrame with string column labels

    Raises
    ------
        DataLoadingError: If the file does not exist
        DataProcessingError: If the file has no rows or no key column
    """
    path = resolve_project_path(source_path)
    if not path.exists():
        raise DataLoadingError(
            f"Emissions file not found: {path}. "
            "Download the inventory export and remove any title rows above the header."
        )

    wide = pd.read_csv(
        path,
        na_values=list(DEFAULT_NA_VALUES if na_values is None else na_values),
        thousands=thousands,
        dtype={key_column: str},
    )
    wide.columns = [str(col).strip() for col in wide.columns]
    wide = ensure_string_year_columns(wide)

    validate_not_empty(wide, f"emissions file {path.name}")
    validate_columns_present(wide, [key_column], f"emissions file {path.name}")

    logger.info(
        "Loaded %d rows x %d columns from %s", len(wide), len(wide.columns), path
    )
    return wide


def load_auxiliary_table(
    path: Path | str,
    key_column: str = "Party",
) -> pd.DataFrame:
    """Load a per-country attribute table (e.g. GDP) for joining.

    Args:
        path: Path to the CSV, absolute or relative to the project root
        key_column: Column holding country names

    Returns
    -------
        DataFrame with one row per country (uniqueness is checked at join time)
    """
    resolved = resolve_project_path(path)
    if not resolved.exists():
        raise DataLoadingError(f"Auxiliary table not found: {resolved}")

    aux = pd.read_csv(resolved, dtype={key_column: str})
    aux.columns = [str(col).strip() for col in aux.columns]
    validate_columns_present(aux, [key_column], f"auxiliary table {resolved.name}")

    logger.info("Loaded auxiliary table with %d rows from %s", len(aux), resolved)
    return aux
