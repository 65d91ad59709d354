"""
Validation for the ghg-tidy library.

"""

from .inputs import (
    validate_columns_present,
    validate_not_empty,
    validate_tidy_structure,
    validate_unique_keys,
)

__all__ = [
    "validate_columns_present",
    "validate_not_empty",
    "validate_tidy_structure",
    "validate_unique_keys",
]
