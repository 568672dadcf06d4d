"""Unit tests for validation utilities."""
import pytest
from iterattend.utils.validation import (
    capitalize_words,
    parse_class_count,
    validate_threshold
)


class TestCapitalizeWords:
    """Test word capitalization."""

    def test_mixed_case(self):
        """Test inverted casing is normalized."""
        assert capitalize_words("jOHN doe") == "John Doe"

    def test_upper_case(self):
        """Test all-caps names are lowered after the first letter."""
        assert capitalize_words("ABHIJIT PARIDA") == "Abhijit Parida"

    def test_preserves_whitespace(self):
        """Test spacing between words is kept."""
        assert capitalize_words("  ravi   kumar ") == "  Ravi   Kumar "

    def test_single_letter_words(self):
        """Test initials are upper-cased."""
        assert capitalize_words("a. b. c") == "A. B. C"

    def test_hyphen_is_not_a_word_boundary(self):
        """Test only whitespace separates words."""
        assert capitalize_words("mary-JANE o'neil") == "Mary-jane O'neil"

    def test_empty_string(self):
        """Test empty input stays empty."""
        assert capitalize_words("") == ""

    def test_digraph_uses_title_case(self):
        """Test letters with a distinct title-case form use it."""
        assert capitalize_words("\u01c6emal") == "\u01c5emal"

    def test_letter_without_single_title_form_kept(self):
        """Test a leading sharp s is not expanded to two letters."""
        assert capitalize_words("\u00dfen m\u00dcLLER") == "\u00dfen M\u00fcller"


class TestParseClassCount:
    """Test attendance string parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("23 / 30", (23, 30)),
        ("0 / 0", (0, 0)),
        ("4 / 4", (4, 4)),
        ("120 / 135", (120, 135)),
    ])
    def test_valid_counts(self, text, expected):
        """Test well-formed counts are parsed."""
        assert parse_class_count(text) == expected

    @pytest.mark.parametrize("text", [
        "garbage",
        "",
        "23/30",
        "23  /  30",
        "23 / ",
        " 23 / 30",
        "23 / 30 extra",
        "-1 / 30",
        "٢٣ / ٣٠",
    ])
    def test_invalid_counts_return_none(self, text):
        """Test anything but '<digits> / <digits>' is rejected."""
        assert parse_class_count(text) is None

    def test_non_string_returns_none(self):
        """Test non-string values are rejected."""
        assert parse_class_count(23) is None
        assert parse_class_count(None) is None


class TestValidateThreshold:
    """Test threshold validation."""

    def test_valid_threshold(self):
        """Test a typical threshold."""
        assert validate_threshold(75) == (True, "")

    @pytest.mark.parametrize("value", [1, 99])
    def test_boundaries_accepted(self, value):
        """Test the range is inclusive."""
        assert validate_threshold(value) == (True, "")

    @pytest.mark.parametrize("value", [0, 100, -5])
    def test_out_of_range(self, value):
        """Test values outside 1-99 are rejected."""
        assert validate_threshold(value) == (False, "Threshold must be between 1 and 99")

    @pytest.mark.parametrize("value", ["75", 75.0, True, None])
    def test_non_integer(self, value):
        """Test non-integers are rejected."""
        assert validate_threshold(value) == (False, "Threshold must be an integer")
