"""
Tests for error message formatting and typo detection.

These tests ensure that:
1. Error message templates format correctly with parameters
2. The suggest_similar function properly detects typos
3. Error messages follow the WHAT/CAUSE/FIX structure
"""

from __future__ import annotations

from ghg_tidy.library.error_messages import (
    ERROR_MESSAGES,
    format_error,
    suggest_similar,
)


class TestErrorMessageFormatting:
    """Test error message template formatting."""

    def test_format_error_missing_columns(self):
        """Test formatting of missing_columns error."""
        msg = format_error(
            "missing_columns",
            dataset_name="emissions file",
            missing=["Party"],
            found_columns=["Country", "2015"],
            suggestion="Valid options: Country, 2015",
        )

        assert "WHAT HAPPENED:" in msg
        assert "LIKELY CAUSE:" in msg
        assert "HOW TO FIX:" in msg
        assert "['Party']" in msg
        assert "Valid options: Country, 2015" in msg

    def test_format_error_duplicate_keys(self):
        """Test formatting of duplicate_keys error."""
        msg = format_error(
            "duplicate_keys",
            dataset_name="auxiliary table",
            key_column="Party",
            duplicates=["Japan"],
        )

        assert "Duplicate Party values in auxiliary table" in msg
        assert "['Japan']" in msg
        assert 'df[df["Party"].duplicated(keep=False)]' in msg

    def test_format_error_empty_dataframe_keeps_literal_braces(self):
        """Escaped braces in the fix example survive formatting."""
        msg = format_error("empty_dataframe", dataset_name="emissions file")
        assert "{len(df)}" in msg

    def test_format_error_invalid_top_n_uses_repr(self):
        """The invalid value is shown with its type visible."""
        msg = format_error("invalid_top_n", top_n="10")
        assert "'10'" in msg

    def test_format_error_unknown_key(self):
        """Unknown keys give a generic message instead of raising."""
        assert format_error("no_such_key") == "Unknown error: no_such_key"

    def test_messages_are_stripped(self):
        """Formatted messages have no leading or trailing blank lines."""
        msg = format_error("empty_dataframe", dataset_name="x")
        assert msg == msg.strip()

    def test_all_templates_explain_what_happened(self):
        """Every template has a WHAT HAPPENED section."""
        for key, template in ERROR_MESSAGES.items():
            assert "WHAT HAPPENED:" in template, key


class TestSuggestSimilar:
    """Test typo suggestions."""

    def test_close_match(self):
        """A near miss is suggested."""
        suggestion = suggest_similar(
            "Last Inventory Year (2016)", ["Party", "Last Inventory Year (2015)"]
        )
        assert suggestion == "Did you mean: Last Inventory Year (2015)?"

    def test_no_match_lists_options(self):
        """Without a close match, all options are listed."""
        assert suggest_similar("zzz", ["Party", "2015"]) == "Valid options: Party, 2015"

    def test_non_string_options(self):
        """Integer options (e.g. int year headers) are compared as strings."""
        assert suggest_similar("2014", [2014, 2015]).startswith("Did you mean: 2014")
