"""
Set-membership filters across related views of the same data.

The tutorial picks a cohort in one view (the top ten emitters of 2015) and
then recovers the full time series for that cohort from another view. This
is a filter, not a join: no columns are added, rows are only removed.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from ghg_tidy.library.validation import validate_columns_present


def reference_set(view: pd.DataFrame, column: str = "Party") -> frozenset:
    """Return the distinct non-missing values of ``column`` in ``view``."""
    validate_columns_present(view, [column], "reference view")
    return frozenset(view[column].dropna())


def filter_by_membership(
    view: pd.DataFrame,
    members: Iterable[str] | pd.Series,
    column: str = "Party",
) -> pd.DataFrame:
    """
    Keep the rows of ``view`` whose ``column`` value is in ``members``.

    Parameters
    ----------
    view
        Table to filter (any layout with ``column``)
    members
        Keys to keep; a single string counts as one key
    column
        Column to test (default: "Party")

    Returns
    -------
    pd.DataFrame
        Rows of ``view`` in their original order, same columns
    """
    validate_columns_present(view, [column], "filtered view")

    if isinstance(members, str):
        members = [members]
    mask = view[column].isin(list(members))
    return view.loc[mask.to_numpy()]
