"""
Wrangling steps for turning a wide emissions export into tidy tables.

Each function takes a table and returns a new one; nothing is modified in place.
"""

from ghg_tidy.library.wrangling.join import left_join
from ghg_tidy.library.wrangling.membership import filter_by_membership, reference_set
from ghg_tidy.library.wrangling.rank import (
    RANK_TIE_METHOD,
    filter_top_n,
    rank_within_year,
    select_year,
    top_n_emitters,
)
from ghg_tidy.library.wrangling.reshape import (
    coerce_emissions,
    pivot_long_to_wide,
    pivot_wide_to_long,
)
from ghg_tidy.library.wrangling.select import (
    parse_year_label,
    project_columns,
    rename_last_inventory_column,
    resolve_retained_columns,
)

__all__ = [
    "RANK_TIE_METHOD",
    "coerce_emissions",
    "filter_by_membership",
    "filter_top_n",
    "left_join",
    "parse_year_label",
    "pivot_long_to_wide",
    "pivot_wide_to_long",
    "project_columns",
    "rank_within_year",
    "reference_set",
    "rename_last_inventory_column",
    "resolve_retained_columns",
    "select_year",
    "top_n_emitters",
]
