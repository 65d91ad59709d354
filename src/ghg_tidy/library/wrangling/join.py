"""
Left joins of per-country attributes onto emissions tables.

Every row of the primary table survives the join. A country without a match
in the auxiliary table gets NaN for the joined attributes. The auxiliary
table must have one row per country; duplicates would multiply primary rows
and are rejected up front.
"""

from __future__ import annotations

import logging

import pandas as pd

from ghg_tidy.library.validation import validate_columns_present, validate_unique_keys

logger = logging.getLogger(__name__)


def left_join(
    primary: pd.DataFrame,
    auxiliary: pd.DataFrame,
    on: str = "Party",
) -> pd.DataFrame:
    """
    Attach the auxiliary columns to each primary row with a matching key.

    Parameters
    ----------
    primary
        Table whose rows are all kept (e.g. a tidy emissions table)
    auxiliary
        One row per key with extra attributes (e.g. ``fakeGDP``)
    on
        Key column present in both tables (default: "Party")

    Returns
    -------
    pd.DataFrame
        ``primary``'s rows, index and order, with the auxiliary columns
        appended. Auxiliary columns whose name clashes with a primary column
        get an ``_aux`` suffix.

    Raises
    ------
    DataProcessingError
        If either table lacks ``on`` or ``auxiliary`` repeats a key
    """
    validate_columns_present(primary, [on], "primary table")
    validate_columns_present(auxiliary, [on], "auxiliary table")
    validate_unique_keys(auxiliary, on, "auxiliary table")

    joined = primary.merge(
        auxiliary,
        on=on,
        how="left",
        suffixes=("", "_aux"),
        validate="many_to_one",
    )
    joined.index = primary.index

    unmatched = ~primary[on].isin(auxiliary[on])
    if unmatched.any():
        logger.info(
            "No auxiliary match for %d rows (%s)",
            int(unmatched.sum()),
            sorted(primary.loc[unmatched, on].dropna().astype(str).unique()),
        )
    return joined
