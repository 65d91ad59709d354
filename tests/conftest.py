"""
Common fixtures for pytest unit and integration tests for the ghg-tidy library.

"""

from __future__ import annotations

import copy
from pathlib import Path

import matplotlib
import pandas as pd
import pytest

matplotlib.use("Agg")

from ghg_tidy.library.utils.data.examples import create_example_wide_emissions  # noqa: E402
from ghg_tidy.library.wrangling import (  # noqa: E402
    pivot_wide_to_long,
    project_columns,
)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
EXAMPLE_CSV = PROJECT_ROOT / "data" / "emissions" / "unfccc_ghg_total_ex_lulucf.csv"

# Column layout of the example CSV: Party, Base year, 1990..2014,
# Last Inventory Year (2015), change column
EXAMPLE_RETAINED_RANGE = {"start": 2, "stop": 27}


def write_wide_csv(path: Path, wide: pd.DataFrame) -> Path:
    """Write a wide table the way an inventory export looks on disk."""
    wide.to_csv(path, index=False)
    return path


# Core fixtures with session scope for performance
# Function-scoped fixtures use deepcopy to prevent test pollution.


@pytest.fixture(scope="session")
def _shared_example_wide():
    return create_example_wide_emissions()


@pytest.fixture
def example_wide(_shared_example_wide):
    """Three countries A, B, C in export layout (2014 + last inventory 2015)."""
    return copy.deepcopy(_shared_example_wide)


@pytest.fixture
def projected(example_wide):
    """Party, 2014, 2015 with A=(10,12), B=(30,5), C=(20,40)."""
    return project_columns(example_wide, ["2014"])


@pytest.fixture
def tidy(projected):
    """The six-row tidy table for A, B, C."""
    return pivot_wide_to_long(projected)


@pytest.fixture
def gdp_ab():
    """Auxiliary table with GDP for A and B only."""
    return pd.DataFrame({"Party": ["A", "B"], "GDP": [100.0, 200.0]})


@pytest.fixture
def example_csv(tmp_path, example_wide):
    """The A/B/C table written to a CSV file."""
    return write_wide_csv(tmp_path / "emissions.csv", example_wide)


@pytest.fixture
def workflow_values(example_csv):
    """Settings for a WorkflowConfig over the A/B/C CSV."""
    return {
        "source_path": str(example_csv),
        "retained_columns": ["2014"],
        "top_n": 1,
        "year_filter": 2015,
    }
