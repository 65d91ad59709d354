"""
Utility functions for the ghg-tidy library.

Configuration loading and example tables live in ``ghg_tidy.library.utils.data``.
"""

from .dataframes import (
    TidyDataFrame,
    WideDataFrame,
    add_iso3c_column,
    convert_country_name_to_iso3c,
    ensure_string_year_columns,
    is_year_label,
    normalize_party_names,
    resolve_project_path,
    validate_path_exists,
)

__all__ = [
    "TidyDataFrame",
    "WideDataFrame",
    "add_iso3c_column",
    "convert_country_name_to_iso3c",
    "ensure_string_year_columns",
    "is_year_label",
    "normalize_party_names",
    "resolve_project_path",
    "validate_path_exists",
]
