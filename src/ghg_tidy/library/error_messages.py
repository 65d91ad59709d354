"""
Error message templates for the emissions wrangling workflow.

Messages follow WHAT/CAUSE/FIX structure so a learner can recover without
reading the library source.
"""

from __future__ import annotations

from difflib import get_close_matches

ERROR_MESSAGES = {
    "empty_dataframe": """
Empty DataFrame provided for {dataset_name}.

WHAT HAPPENED:
  The DataFrame contains no data (zero rows).

LIKELY CAUSE:
  - Data source file is empty or only has a header row
  - Filtering removed all rows

HOW TO FIX:
  Check your data source:
  >>> print(f"Rows: {{len(df)}}, Columns: {{len(df.columns)}}")
  >>> print(df.head())
""",
    "missing_columns": """
Expected columns not found in {dataset_name}.

WHAT HAPPENED:
  Missing: {missing}
  Found columns: {found_columns}

LIKELY CAUSE:
  The file header differs from what the workflow expects, or extra header
  rows above the table were not removed before loading.

HOW TO FIX:
  {suggestion}

  Inspect the header and update the configuration:
  >>> print(list(df.columns))
""",
    "last_year_column_missing": """
Last inventory year column '{column}' not found in {dataset_name}.

WHAT HAPPENED:
  The irregularly-named "most recent year" column must be renamed to a
  plain year label before reshaping, but it is not in the table.
  Found columns: {found_columns}

LIKELY CAUSE:
  The export was produced for a different inventory year, so the column
  carries a different year in its name.

HOW TO FIX:
  {suggestion}

  Set ``last_year_column`` in your configuration to the exact header.
""",
    "last_year_label_unparseable": """
Cannot derive a year label from column '{column}'.

WHAT HAPPENED:
  No four-digit year was found in the column header.

HOW TO FIX:
  Pass the label explicitly:
  >>> rename_last_inventory_column(df, column="{column}", label="2015")
""",
    "column_collision": """
Renaming '{column}' to '{label}' in {dataset_name} would duplicate a column.

WHAT HAPPENED:
  A column named '{label}' already exists.

LIKELY CAUSE:
  The retained columns already include the year that the last inventory
  column reports.

HOW TO FIX:
  Drop '{label}' from the retained columns, or choose another label.
""",
    "column_position_out_of_range": """
Column range {start}:{stop} does not fit {dataset_name}.

WHAT HAPPENED:
  The table has {n_columns} columns (positions 0 to {last_position}).

HOW TO FIX:
  Select columns by name instead, or shrink the range:
  >>> print(list(enumerate(df.columns)))
""",
    "duplicate_keys": """
Duplicate {key_column} values in {dataset_name}.

WHAT HAPPENED:
  Each {key_column} must appear once, but these appear more than once:
  {duplicates}

LIKELY CAUSE:
  - Aggregate rows (e.g. regional totals) repeat a country name
  - The same table was concatenated twice

HOW TO FIX:
  Inspect the duplicates:
  >>> df[df["{key_column}"].duplicated(keep=False)]
""",
    "non_numeric_values": """
Non-numeric emissions values in {dataset_name}.

WHAT HAPPENED:
  {count} cells could not be read as numbers, for example:
  {examples}

LIKELY CAUSE:
  The export uses notation keys (e.g. "NO", "NE", "IE") or footnote marks
  for missing data, or numbers carry a separator (e.g. "1,234" or a decimal
  comma "12,5") that is not the configured ``thousands`` separator.

HOW TO FIX:
  Add the markers to ``na_values`` so they load as missing values:
  >>> pd.read_csv(path, na_values=["NO", "NE", "IE"])
  Set ``thousands`` when the export groups digits (e.g. thousands=",").
""",
    "unknown_year": """
Year '{year}' not found in {dataset_name}.

WHAT HAPPENED:
  Available years: {available_years}

HOW TO FIX:
  {suggestion}
""",
    "invalid_top_n": """
Invalid top_n value: {top_n!r}.

WHAT HAPPENED:
  top_n must be a positive integer (e.g. 10 for the ten largest emitters).
""",
}


def format_error(key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Parameters
    ----------
    key
        The error message key from ERROR_MESSAGES
    **kwargs
        Parameters to format into the message template

    Returns
    -------
    str
        The formatted error message
    """
    template = ERROR_MESSAGES.get(key)
    if template is None:
        return f"Unknown error: {key}"
    return template.format(**kwargs).strip()


def suggest_similar(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> str:
    """
    Suggest similar valid options for typos.

    Parameters
    ----------
    value
        The invalid value that was provided
    valid_options
        List of valid options to match against
    max_suggestions
        Maximum number of suggestions to return (default: 3)

    Returns
    -------
    str
        A formatted suggestion message
    """
    options = [str(option) for option in valid_options]
    matches = get_close_matches(str(value), options, n=max_suggestions, cutoff=0.6)
    if matches:
        return f"Did you mean: {', '.join(matches)}?"
    return f"Valid options: {', '.join(options)}"
