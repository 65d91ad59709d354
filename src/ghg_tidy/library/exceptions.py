"""
Exceptions that are used throughout the ghg-tidy library.

"""

from __future__ import annotations


class GhgTidyError(Exception):
    """Base exception for ghg-tidy library."""

    pass


class ConfigurationError(GhgTidyError):
    """Raised when configuration is invalid or missing."""

    pass


class DataError(GhgTidyError):
    """Base exception for data-related errors."""

    pass


class DataLoadingError(DataError):
    """Raised when data files cannot be loaded."""

    pass


class DataProcessingError(DataError):
    """
    Raised when data doesn't meet requirements.

    This covers malformed input: expected columns that are absent, duplicate
    country keys, and cells that cannot be read as numbers.
    """

    pass


class ValidationError(GhgTidyError):
    """Base exception for validation errors."""

    pass


class InputValidationError(ValidationError):
    """
    Raised when a table handed to a wrangling step has the wrong shape.

    Input validation includes checking that the tidy columns exist and that
    each (Party, year) pair appears at most once.
    """

    pass
