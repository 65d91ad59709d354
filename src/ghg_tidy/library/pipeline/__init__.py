"""Pipeline orchestration for the emissions tidying workflow."""

from .orchestrator import WorkflowResult, run_workflow

__all__ = [
    "WorkflowResult",
    "run_workflow",
]
