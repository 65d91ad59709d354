"""Pydantic models for workflow configuration validation.

The tutorial is driven by a handful of choices: which file to load, which
columns to keep, how many top emitters to show, and which countries make up
the practice subset. These models turn those choices into validated values.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from ghg_tidy.library.exceptions import ConfigurationError
from ghg_tidy.library.utils.dataframes import is_year_label, validate_path_exists

# Notation keys used in UNFCCC inventories for "no value reported"
DEFAULT_NA_VALUES = ["NO", "NE", "NA", "IE", "C", "-"]

DEFAULT_LAST_YEAR_COLUMN = "Last Inventory Year (2015)"


class ColumnRange(BaseModel):
    """Positional column range, zero-based with an exclusive stop (as ``iloc``)."""

    start: int = Field(..., ge=0, description="First column position to retain")
    stop: int = Field(..., ge=1, description="Column position to stop before")

    @model_validator(mode="after")
    def validate_order(self) -> ColumnRange:
        """Validate that the range selects at least one column."""
        if self.stop <= self.start:
            raise ConfigurationError(
                f"Column range stop ({self.stop}) must be greater than "
                f"start ({self.start})."
            )
        return self


class WorkflowConfig(BaseModel):
    """Configuration for one run of the emissions tidying workflow."""

    source_path: str = Field(..., description="Path to the wide emissions CSV")
    key_column: str = Field("Party", description="Column holding country names")
    retained_columns: list[str] | ColumnRange = Field(
        ...,
        description=(
            "Year columns to keep, by header name or as a positional range "
            "(the key column is always kept)"
        ),
    )
    last_year_column: str = Field(
        DEFAULT_LAST_YEAR_COLUMN,
        description="Irregularly-named column holding the most recent year",
    )
    last_year_label: str | None = Field(
        None,
        description="Year label for the last inventory column (parsed if omitted)",
    )
    top_n: int = Field(10, description="Number of top emitters to keep per year")
    year_filter: str | None = Field(
        None, description="Year used to pick the top-N cohort"
    )
    country_allowlist: list[str] | None = Field(
        None, description="Countries for the custom practice subset"
    )
    na_values: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NA_VALUES),
        description="Cell values read as missing emissions",
    )
    thousands: str | None = Field(
        None, description="Thousands separator used in the CSV, if any"
    )

    @field_validator("source_path")
    @classmethod
    def validate_path_exists(cls, v: str) -> str:
        """Validate that the path exists (relative to project root)."""
        return validate_path_exists(v, "Emissions data file")

    @field_validator("retained_columns", mode="before")
    @classmethod
    def stringify_column_names(cls, v: object) -> object:
        """YAML reads bare years as ints; headers are always strings."""
        if isinstance(v, (list, tuple)):
            if not v:
                raise ConfigurationError("retained_columns must not be empty.")
            return [str(name) for name in v]
        return v

    @field_validator("top_n")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        """Validate that top_n is a positive count."""
        if v < 1:
            raise ConfigurationError(f"top_n must be at least 1, got {v}.")
        return v

    @field_validator("year_filter", "last_year_label", mode="before")
    @classmethod
    def validate_year_label(cls, v: object) -> str | None:
        """Accept ints or strings and normalise to a four-digit year string."""
        if v is None:
            return None
        if not is_year_label(v):
            raise ConfigurationError(
                f"Year labels must be four-digit years, got {v!r}."
            )
        return str(v)

    @field_validator("country_allowlist")
    @classmethod
    def validate_allowlist(cls, v: list[str] | None) -> list[str] | None:
        """Reject empty allowlists and strip stray whitespace."""
        if v is None:
            return None
        cleaned = [name.strip() for name in v]
        if not cleaned:
            raise ConfigurationError(
                "country_allowlist must name at least one country (or be omitted)."
            )
        return cleaned
