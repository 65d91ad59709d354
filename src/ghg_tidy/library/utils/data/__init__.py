"""
Data configuration and example data utilities.

"""

from ghg_tidy.library.utils.data.config import (
    build_workflow_config,
    default_config_path,
    load_workflow_config,
)
from ghg_tidy.library.utils.data.examples import (
    create_example_wide_emissions,
    create_fake_gdp,
)

__all__ = [
    "build_workflow_config",
    "create_example_wide_emissions",
    "create_fake_gdp",
    "default_config_path",
    "load_workflow_config",
]
