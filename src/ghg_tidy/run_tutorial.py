"""
Execute the tutorial notebook with Papermill.

"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path
from typing import Any

import jupytext
import papermill as pm
import yaml

from ghg_tidy.library.config.models import WorkflowConfig
from ghg_tidy.library.exceptions import DataProcessingError, GhgTidyError
from ghg_tidy.library.utils.data.config import load_workflow_config


def parameters_from_config(config: WorkflowConfig) -> dict[str, Any]:
    """
    Package a ``WorkflowConfig`` as the notebook's ``workflow_settings`` parameter.

    Every field is sent, including the ones left as None, and the notebook
    rebuilds the config from them alone. Papermill injects parameters as
    Python literals, so values are JSON-compatible (a ``ColumnRange`` becomes
    a dict).
    """
    return {"workflow_settings": config.model_dump(mode="json")}


def run_tutorial(
    notebook_path: Path | str,
    output_path: Path | str,
    parameters: dict[str, Any],
    **papermill_kwargs: Any,
) -> None:
    """
    Execute the tutorial notebook with Papermill.

    Notebooks are kept in the repository as jupytext percent-format ``.py``
    files. A ``.py`` notebook is converted to ``.ipynb`` in a temporary
    directory before execution; ``.ipynb`` files are executed directly.

    Parameters
    ----------
    notebook_path : Path | str
        Path to the notebook (``.py`` percent format or ``.ipynb``)
    output_path : Path | str
        Path where the executed ``.ipynb`` will be saved
    parameters : dict[str, Any]
        Parameters to inject into the notebook's ``parameters`` cell
    **papermill_kwargs : Any
        Additional keyword arguments to pass to papermill.execute_notebook()

    Raises
    ------
    DataProcessingError
        If conversion or execution fails
    """
    notebook_path = Path(notebook_path)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with tempfile.TemporaryDirectory() as tmp_dir:
            if notebook_path.suffix == ".py":
                input_path = Path(tmp_dir) / f"{notebook_path.stem}.ipynb"
                jupytext.write(jupytext.read(notebook_path), input_path)
            else:
                input_path = notebook_path

            pm.execute_notebook(
                str(input_path),
                str(output_path),
                parameters=parameters,
                **papermill_kwargs,
            )

    except Exception as e:
        # Papermill exceptions already contain the failing cell's traceback
        raise DataProcessingError(
            f"Notebook execution failed: {notebook_path}\n"
            f"{'-' * 80}\n"
            f"Exception Type: {type(e).__name__}\n"
            f"Exception Message: {e!s}\n"
        ) from e


def parse_param(param: str) -> tuple[str, Any]:
    """Split ``key=value``; the value is read as a YAML scalar or list."""
    if "=" not in param:
        raise ValueError(f"Invalid parameter format: {param} (expected key=value)")
    key, value = param.split("=", 1)
    return key.strip(), yaml.safe_load(value)


def main(argv: list[str] | None = None) -> int:
    """
    Command-line interface for running the tutorial.

    Usage
    -----
    Run the tutorial with the shipped configuration::

        python -m ghg_tidy.run_tutorial
            --notebook notebooks/100_tidy_ghg_emissions.py
            --output output/100_tidy_ghg_emissions.ipynb
            --param top_n=5
            --param year_filter=2015
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Execute the emissions tidying tutorial with Papermill"
    )
    parser.add_argument("--notebook", required=True, help="Input notebook path")
    parser.add_argument("--output", required=True, help="Output notebook path")
    parser.add_argument(
        "--config",
        help="Workflow YAML (defaults to conf/workflow.yaml under the project root)",
    )
    parser.add_argument(
        "--param",
        action="append",
        dest="params",
        help="Override in key=value format (can be specified multiple times)",
    )

    args = parser.parse_args(argv)

    try:
        overrides = dict(parse_param(p) for p in args.params or [])
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    try:
        config = load_workflow_config(args.config, overrides=overrides)
        run_tutorial(
            notebook_path=args.notebook,
            output_path=args.output,
            parameters=parameters_from_config(config),
        )
    except GhgTidyError as e:
        print(f"Error: {e}")
        return 1

    print(f"Executed notebook saved to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
