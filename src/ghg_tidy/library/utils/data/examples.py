"""
Example data generation for the tutorial and for testing.

This module provides helper functions to generate minimal example tables
with the same layout as a UNFCCC greenhouse gas inventory export.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pandas as pd

from ghg_tidy.library.config.models import DEFAULT_LAST_YEAR_COLUMN


def create_example_wide_emissions() -> pd.DataFrame:
    """
    Create a three-country wide emissions table in UNFCCC export layout.

    The columns mirror a real export: the country name, a ``Base year`` column
    the workflow drops, one plain year column and the irregularly-named last
    inventory year column.

    Returns
    -------
    pd.DataFrame
        Columns ``Party``, ``Base year``, ``2014`` and
        ``Last Inventory Year (2015)``

    Examples
    --------
    >>> wide = create_example_wide_emissions()
    >>> list(wide.columns)
    ['Party', 'Base year', '2014', 'Last Inventory Year (2015)']
    """
    return pd.DataFrame(
        {
            "Party": ["A", "B", "C"],
            "Base year": [9.0, 28.0, 15.0],
            "2014": [10.0, 30.0, 20.0],
            DEFAULT_LAST_YEAR_COLUMN: [12.0, 5.0, 40.0],
        }
    )


def create_fake_gdp(
    parties: Iterable[str],
    seed: int = 42,
    key_column: str = "Party",
    value_column: str = "fakeGDP",
) -> pd.DataFrame:
    """
    Create a synthetic GDP table for practising joins.

    The numbers mean nothing; they only give the join something to attach.
    Each Party appears once, in first-seen order.

    Parameters
    ----------
    parties
        Country names to include
    seed
        Seed for reproducible values (default: 42)
    key_column
        Name of the country column (default: "Party")
    value_column
        Name of the attribute column (default: "fakeGDP")

    Returns
    -------
    pd.DataFrame
        One row per Party with a float ``value_column``
    """
    unique_parties = list(dict.fromkeys(parties))

    np.random.seed(seed)
    values = np.round(np.random.uniform(100.0, 20000.0, size=len(unique_parties)), 1)

    return pd.DataFrame({key_column: unique_parties, value_column: values})
