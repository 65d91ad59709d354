"""
Line charts of emissions over time.

The chart only needs a tidy table with ``Party``, ``year`` and ``emissions``
already filtered to the countries of interest. Row order does not matter.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.axes import Axes

from ghg_tidy.library.utils.dataframes import TidyDataFrame
from ghg_tidy.library.validation import validate_columns_present


def top_n_title(top_n: int, year: int | str | None = None) -> str:
    """Chart title for a top-N view, for one cohort year or for every year."""
    if year is None:
        return f"Top {top_n} emitters per year"
    return f"Top {top_n} emitters in {year}"


def plot_emissions_trends(
    tidy: TidyDataFrame,
    ax: Axes | None = None,
    title: str | None = None,
    key_column: str = "Party",
    year_column: str = "year",
    value_column: str = "emissions",
    unit_label: str = "kt CO2 equivalent",
) -> Axes:
    """
    Plot one line (with point markers) per country, emissions against year.

    Parameters
    ----------
    tidy
        Tidy emissions table
    ax
        Axes to draw on. A new figure is created if None.
    title
        Optional chart title
    key_column, year_column, value_column
        Column names in ``tidy``
    unit_label
        Unit shown on the y axis

    Returns
    -------
    Axes
        The axes the lines were drawn on
    """
    validate_columns_present(
        tidy, [key_column, year_column, value_column], "plotted table"
    )

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 6))

    frame = pd.DataFrame(
        {
            key_column: tidy[key_column].to_numpy(),
            "_x": pd.to_numeric(tidy[year_column].astype(str)).to_numpy(),
            value_column: tidy[value_column].to_numpy(),
        }
    )

    for party, group in frame.groupby(key_column, sort=True):
        group = group.sort_values("_x")
        ax.plot(
            group["_x"],
            group[value_column],
            marker="o",
            linewidth=1.5,
            markersize=4,
            label=str(party),
        )

    ax.set_xlabel("Year")
    ax.set_ylabel(f"Emissions ({unit_label})")
    ax.grid(True, alpha=0.3)
    if title:
        ax.set_title(title)
    if ax.get_lines():
        ax.legend(
            title=key_column, bbox_to_anchor=(1.02, 1), loc="upper left", fontsize=8
        )

    return ax
