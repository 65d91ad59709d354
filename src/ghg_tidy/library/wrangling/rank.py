"""
Per-year ranking and top-N filtering of tidy emissions tables.

Ranks are computed independently inside each year: rank 1 is the largest
emitter that year. Ties are broken by row order (the first row of a tie gets
the better rank), so every reporting country gets a distinct rank and a top-N
filter returns exactly ``min(k, N)`` rows for a year with ``k`` reporting
countries. Rows without an emissions value get no rank and never pass a top-N
filter.
"""

from __future__ import annotations

import logging

import pandas as pd

from ghg_tidy.library.error_messages import format_error, suggest_similar
from ghg_tidy.library.exceptions import DataProcessingError
from ghg_tidy.library.utils.dataframes import TidyDataFrame
from ghg_tidy.library.validation import validate_columns_present

logger = logging.getLogger(__name__)

RANK_TIE_METHOD = "first"


def validate_top_n(top_n: object) -> int:
    """Return ``top_n`` if it is a positive integer, else raise DataProcessingError."""
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 1:
        raise DataProcessingError(format_error("invalid_top_n", top_n=top_n))
    return top_n


def rank_within_year(
    long: TidyDataFrame,
    group_column: str = "year",
    value_column: str = "emissions",
    rank_column: str = "annualrank",
) -> TidyDataFrame:
    """
    Add a descending rank of ``value_column`` within each ``group_column`` group.

    Parameters
    ----------
    long
        Tidy emissions table
    group_column
        Column to partition by (default: "year")
    value_column
        Column to rank (default: "emissions")
    rank_column
        Name of the new rank column (default: "annualrank")

    Returns
    -------
    TidyDataFrame
        Copy of ``long`` with a nullable integer ``rank_column``
    """
    validate_columns_present(long, [group_column, value_column], "tidy emissions table")

    ranks = long.groupby(group_column, observed=True, sort=False)[value_column].rank(
        method=RANK_TIE_METHOD, ascending=False, na_option="keep"
    )

    out = long.copy()
    out[rank_column] = ranks.astype("Int64")
    return out


def filter_top_n(
    ranked: TidyDataFrame,
    top_n: int,
    rank_column: str = "annualrank",
) -> TidyDataFrame:
    """
    Keep rows whose rank is at most ``top_n``.

    A year with fewer than ``top_n`` reporting countries keeps all of them.

    Raises
    ------
    DataProcessingError
        If ``top_n`` is not a positive integer or ``rank_column`` is missing
    """
    top_n = validate_top_n(top_n)
    validate_columns_present(ranked, [rank_column], "ranked emissions table")

    keep = ranked[rank_column].le(top_n).fillna(False).astype(bool)
    return ranked.loc[keep.to_numpy()]


def select_year(
    df: TidyDataFrame,
    year: int | str,
    year_column: str = "year",
) -> TidyDataFrame:
    """
    Keep the rows for one year.

    Parameters
    ----------
    df
        Tidy table
    year
        Year as int (``2015``) or label (``"2015"``)
    year_column
        Column holding the year label

    Raises
    ------
    DataProcessingError
        If no row has that year
    """
    validate_columns_present(df, [year_column], "tidy emissions table")

    label = str(year)
    labels = df[year_column].astype(str)
    if not (labels == label).any():
        available = [str(y) for y in pd.unique(df[year_column].dropna())]
        raise DataProcessingError(
            format_error(
                "unknown_year",
                year=label,
                dataset_name="tidy emissions table",
                available_years=available,
                suggestion=suggest_similar(label, available),
            )
        )
    return df.loc[(labels == label).to_numpy()]


def top_n_emitters(
    long: TidyDataFrame,
    top_n: int,
    year: int | str | None = None,
    group_column: str = "year",
    value_column: str = "emissions",
    rank_column: str = "annualrank",
) -> TidyDataFrame:
    """
    Rank within each year, keep the top ``top_n``, optionally for one year only.

    Examples
    --------
    >>> top_n_emitters(tidy, top_n=10, year=2015)  # doctest: +SKIP
    """
    ranked = rank_within_year(
        long,
        group_column=group_column,
        value_column=value_column,
        rank_column=rank_column,
    )
    top = filter_top_n(ranked, top_n, rank_column=rank_column)
    if year is not None:
        top = select_year(top, year, year_column=group_column)

    logger.debug("Kept %d of %d rows as top %d emitters", len(top), len(long), top_n)
    return top
