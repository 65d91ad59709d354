"""Data loading for the emissions tidying workflow.

Loading is kept apart from the wrangling steps so that the steps can be
exercised on tables built in memory.
"""

from ghg_tidy.library.preprocessing.loaders import (
    load_auxiliary_table,
    load_wide_emissions,
)

__all__ = [
    "load_auxiliary_table",
    "load_wide_emissions",
]
