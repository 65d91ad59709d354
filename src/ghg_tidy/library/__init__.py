"""
Main components for the ghg-tidy library.

Nothing is exported from this module, users should import from specific submodules:
- ghg_tidy.library.wrangling (select, reshape, rank, filter and join steps)
- ghg_tidy.library.pipeline (the whole tutorial workflow as one function)
- ghg_tidy.library.utils (utility functions and example data)
- ghg_tidy.library.validation (validation functions)
"""

from __future__ import annotations
