"""
Column projection and renaming for wide emissions tables.

Inventory exports carry more columns than the tutorial needs (a ``Base year``
column, trailing notes) and report the most recent year under an irregular
header such as ``Last Inventory Year (2015)``. These functions pick the
columns to keep by name and give the irregular column a plain year label.
Positional selections are resolved to names once, up front, so a file whose
column order changes fails loudly instead of silently shifting.
"""

from __future__ import annotations

import logging
import re

from ghg_tidy.library.config.models import DEFAULT_LAST_YEAR_COLUMN, ColumnRange
from ghg_tidy.library.error_messages import format_error, suggest_similar
from ghg_tidy.library.exceptions import DataProcessingError
from ghg_tidy.library.utils.dataframes import WideDataFrame
from ghg_tidy.library.validation import validate_columns_present

logger = logging.getLogger(__name__)

_YEAR_IN_HEADER = re.compile(r"(\d{4})")


def resolve_retained_columns(
    wide: WideDataFrame,
    retained: list[str] | ColumnRange,
    dataset_name_for_error_msg: str = "emissions table",
) -> list[str]:
    """
    Turn a column selection into a list of header names.

    Parameters
    ----------
    wide
        The table the selection applies to
    retained
        Header names, or a positional ``ColumnRange`` (zero-based, stop
        exclusive)
    dataset_name_for_error_msg
        Name of the dataset for error messages

    Returns
    -------
    list[str]
        Header names in selection order

    Raises
    ------
    DataProcessingError
        If a name is not a column or the range runs past the last column
    """
    if isinstance(retained, ColumnRange):
        n_columns = len(wide.columns)
        if retained.stop > n_columns:
            raise DataProcessingError(
                format_error(
                    "column_position_out_of_range",
                    start=retained.start,
                    stop=retained.stop,
                    dataset_name=dataset_name_for_error_msg,
                    n_columns=n_columns,
                    last_position=n_columns - 1,
                )
            )
        return [str(col) for col in wide.columns[retained.start : retained.stop]]

    names = [str(name) for name in retained]
    validate_columns_present(wide, names, dataset_name_for_error_msg)
    return names


def parse_year_label(column: str) -> str:
    """Extract the four-digit year from a header like ``Last Inventory Year (2015)``."""
    match = _YEAR_IN_HEADER.search(column)
    if match is None:
        raise DataProcessingError(
            format_error("last_year_label_unparseable", column=column)
        )
    return match.group(1)


def rename_last_inventory_column(
    wide: WideDataFrame,
    column: str = DEFAULT_LAST_YEAR_COLUMN,
    label: str | None = None,
    dataset_name_for_error_msg: str = "emissions table",
) -> WideDataFrame:
    """
    Rename the irregular "last inventory year" column to a plain year label.

    Parameters
    ----------
    wide
        Wide emissions table
    column
        Current header of the last inventory year column
    label
        New header. If None, the year in ``column`` is used.
    dataset_name_for_error_msg
        Name of the dataset for error messages

    Returns
    -------
    WideDataFrame
        A renamed copy of ``wide``

    Raises
    ------
    DataProcessingError
        If ``column`` is absent, no year can be parsed from it, or ``label``
        is already a column
    """
    if column not in wide.columns:
        available = [str(col) for col in wide.columns]
        raise DataProcessingError(
            format_error(
                "last_year_column_missing",
                column=column,
                dataset_name=dataset_name_for_error_msg,
                found_columns=available,
                suggestion=suggest_similar(column, available),
            )
        )

    label = parse_year_label(column) if label is None else str(label)

    if label != column and label in wide.columns:
        raise DataProcessingError(
            format_error(
                "column_collision",
                column=column,
                label=label,
                dataset_name=dataset_name_for_error_msg,
            )
        )

    return wide.rename(columns={column: label})


def project_columns(
    wide: WideDataFrame,
    retained: list[str] | ColumnRange,
    key_column: str = "Party",
    last_year_column: str | None = DEFAULT_LAST_YEAR_COLUMN,
    last_year_label: str | None = None,
    dataset_name_for_error_msg: str = "emissions table",
) -> WideDataFrame:
    """
    Keep the country column plus the retained year columns, then rename.

    The output columns are, in order: ``key_column``, the retained columns
    (minus the key if the selection included it), and the last inventory
    column if the selection did not already include it. The last inventory
    column is then renamed to its year label.

    Parameters
    ----------
    wide
        Wide emissions table as loaded
    retained
        Year columns to keep, by name or as a positional range
    key_column
        Column holding country names
    last_year_column
        Irregular last inventory header, or None if the table has none
    last_year_label
        Year label for the last inventory column (parsed if None)
    dataset_name_for_error_msg
        Name of the dataset for error messages

    Returns
    -------
    WideDataFrame
        Projected and renamed copy

    Raises
    ------
    DataProcessingError
        If the key column, a retained column or the last inventory column is
        absent
    """
    validate_columns_present(wide, [key_column], dataset_name_for_error_msg)
    names = resolve_retained_columns(wide, retained, dataset_name_for_error_msg)

    selection = [key_column] + [name for name in names if name != key_column]
    if last_year_column is not None:
        if last_year_column not in wide.columns:
            # Reuse the rename error so the message is the same either way
            rename_last_inventory_column(
                wide, last_year_column, last_year_label, dataset_name_for_error_msg
            )
        if last_year_column not in selection:
            selection.append(last_year_column)

    projected = wide.loc[:, selection].copy()

    if last_year_column is not None:
        projected = rename_last_inventory_column(
            projected, last_year_column, last_year_label, dataset_name_for_error_msg
        )

    logger.debug(
        "Projected %s to columns %s", dataset_name_for_error_msg, list(projected.columns)
    )
    return projected
