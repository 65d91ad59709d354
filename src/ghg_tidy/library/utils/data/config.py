"""
Workflow configuration loading.

This module builds a validated ``WorkflowConfig`` from a YAML file, optionally
overlaid with ``key=value`` overrides from the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pydantic
import yaml
from pyprojroot import here

from ghg_tidy.library.config.models import WorkflowConfig
from ghg_tidy.library.exceptions import ConfigurationError, DataLoadingError


def default_config_path() -> Path:
    """Location of the configuration that ships with the tutorial."""
    return here() / "conf" / "workflow.yaml"


def build_workflow_config(values: dict[str, Any]) -> WorkflowConfig:
    """
    Validate a plain dictionary of workflow settings.

    Parameters
    ----------
    values
        Settings keyed by ``WorkflowConfig`` field names

    Returns
    -------
    WorkflowConfig
        The validated configuration

    Raises
    ------
    ConfigurationError
        If a field is missing, has the wrong type, or fails a value check
    """
    try:
        return WorkflowConfig(**values)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid workflow configuration:\n{e}") from e


def load_workflow_config(
    config_path: Path | str | None = None,
    overrides: dict[str, Any] | None = None,
) -> WorkflowConfig:
    """
    Load and validate the workflow configuration from YAML.

    Parameters
    ----------
    config_path : Path | str | None, optional
        Path to the YAML file. If None, uses ``conf/workflow.yaml`` under the
        project root.
    overrides : dict[str, Any] | None, optional
        Values that replace the file's settings. Keys set to None are ignored.

    Returns
    -------
    WorkflowConfig
        Validated configuration

    Raises
    ------
    DataLoadingError
        If the config file is not found or is not a YAML mapping
    ConfigurationError
        If the settings fail validation
    """
    config_path = default_config_path() if config_path is None else Path(config_path)

    if not config_path.exists():
        raise DataLoadingError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw_config = yaml.safe_load(f)

    if not isinstance(raw_config, dict):
        raise DataLoadingError(
            f"Config file must contain a mapping of settings: {config_path}"
        )

    if overrides:
        raw_config.update({k: v for k, v in overrides.items() if v is not None})

    return build_workflow_config(raw_config)
