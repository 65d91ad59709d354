"""Configuration models for the emissions tidying workflow."""

from ghg_tidy.library.config.models import (
    DEFAULT_LAST_YEAR_COLUMN,
    DEFAULT_NA_VALUES,
    ColumnRange,
    WorkflowConfig,
)

__all__ = [
    "DEFAULT_LAST_YEAR_COLUMN",
    "DEFAULT_NA_VALUES",
    "ColumnRange",
    "WorkflowConfig",
]
