"""DataFrame utilities for the ghg-tidy library.

This module provides utilities for working with emissions tables including:
- Type definitions (WideDataFrame, TidyDataFrame)
- Year column handling (is_year_label, ensure_string_year_columns)
- Path validation (validate_path_exists)
- Country key handling (normalize_party_names, add_iso3c_column)
"""

from __future__ import annotations

import re
from pathlib import Path

import country_converter as coco
import pandas as pd
from pyprojroot import here

from ghg_tidy.library.exceptions import ConfigurationError, DataProcessingError

__all__ = [
    # Type definitions
    "TidyDataFrame",
    "WideDataFrame",
    # Year column utilities
    "ensure_string_year_columns",
    "is_year_label",
    # Path validation
    "resolve_project_path",
    "validate_path_exists",
    # Country keys
    "add_iso3c_column",
    "convert_country_name_to_iso3c",
    "normalize_party_names",
]

_COUNTRY_CONVERTER = coco.CountryConverter()

_YEAR_PATTERN = re.compile(r"^\d{4}$")


# ============================================================================
# Type Definitions
# ============================================================================

WideDataFrame = pd.DataFrame
"""A pandas DataFrame with one row per country and one column per year.

The country key is an ordinary column (not the index), so the table looks
exactly like the CSV it came from.

Example:

    Party     2014   2015
0   A         10.0   12.0
1   B         30.0    5.0
"""

TidyDataFrame = pd.DataFrame
"""A pandas DataFrame with one row per (country, year) observation.

Example:

    Party  year  emissions
0   A      2014       10.0
1   B      2014       30.0
2   A      2015       12.0
3   B      2015        5.0
"""


# ============================================================================
# Year Column Utilities
# ============================================================================


def is_year_label(label: object) -> bool:
    """Return True when ``label`` reads as a four-digit year (``2015`` or ``"2015"``)."""
    return bool(_YEAR_PATTERN.match(str(label)))


def ensure_string_year_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce numeric-looking year column labels to strings.

    CSV headers come back as strings but hand-built tables often use ints. We
    want strings everywhere so that selections and merges line up.

    Parameters
    ----------
    df
        DataFrame that may contain year columns stored as ints or other types.

    Returns
    -------
    pd.DataFrame
        DataFrame whose year columns are strings.
    """
    rename_map: dict = {}
    for col in df.columns:
        col_str = str(col)
        if is_year_label(col_str) and col != col_str:
            rename_map[col] = col_str

    if not rename_map:
        return df.copy()

    return df.rename(columns=rename_map)


# ============================================================================
# Path Validation
# ============================================================================


def resolve_project_path(path_str: str | Path) -> Path:
    """Resolve ``path_str`` against the project root unless it is absolute."""
    path = Path(path_str)
    if path.is_absolute():
        return path
    try:
        return here() / path
    except RuntimeError:
        # pyprojroot found no project root marker (e.g. an installed wheel)
        return path


def validate_path_exists(path_str: str, file_type: str = "data file") -> str:
    """Validate that the path exists (relative to project root).

    Args:
        path_str: The path string to validate
        file_type: Type of file for error message (e.g., "Emissions data file")

    Returns
    -------
    The validated path string

    Raises
    ------
    ConfigurationError: If the path does not exist
    """
    if not resolve_project_path(path_str).exists():
        raise ConfigurationError(f"{file_type} not found: {path_str}")
    return path_str


# ============================================================================
# Country Keys
# ============================================================================


def normalize_party_names(df: pd.DataFrame, column: str = "Party") -> pd.DataFrame:
    """Strip surrounding whitespace from the country key column.

    UNFCCC exports occasionally carry trailing spaces in ``Party`` which make
    ``"Japan "`` and ``"Japan"`` different keys in joins and filters.
    """
    if column not in df.columns:
        raise DataProcessingError(f"Cannot normalize '{column}': column not found")
    out = df.copy()
    out[column] = out[column].where(
        out[column].isna(), out[column].astype(str).str.strip()
    )
    return out


def convert_country_name_to_iso3c(country_name: str | float | None) -> str | None:
    """Convert a Party label to ISO3C, or None if it is not a single country."""
    if pd.isna(country_name):
        return None

    country_name_str = str(country_name).strip()

    iso3c = _COUNTRY_CONVERTER.convert(
        names=country_name_str,
        to="ISO3",
        not_found=None,
    )
    if iso3c is None or iso3c == country_name_str or len(str(iso3c)) != 3:
        return None
    return iso3c


def add_iso3c_column(
    df: pd.DataFrame, party_column: str = "Party", iso3c_column: str = "iso3c"
) -> pd.DataFrame:
    """Return a copy of ``df`` with an ISO3C code column derived from ``party_column``.

    Groupings such as "European Union (Convention)" have no ISO3C code and get
    ``None``.
    """
    if party_column not in df.columns:
        raise DataProcessingError(
            f"Cannot add ISO3C codes: column '{party_column}' not found"
        )
    out = df.copy()
    lookup = {
        name: convert_country_name_to_iso3c(name)
        for name in out[party_column].dropna().unique()
    }
    out[iso3c_column] = out[party_column].map(lookup)
    return out
