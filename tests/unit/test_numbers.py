# ABOUTME: Unit tests for strict integer parsing of menu input.
# ABOUTME: Checks signs, whitespace, rejected formats, and the 32-bit range.

import pytest

from bookshelf.catalog.numbers import INT32_MAX, INT32_MIN, parse_int


class TestParseInt:
    """parse_int accepts plain signed decimal integers only."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1949", 1949),
            ("  42 ", 42),
            ("+7", 7),
            ("-3", -3),
            ("-0", 0),
            ("0007", 7),
            ("2147483647", INT32_MAX),
            ("-2147483648", INT32_MIN),
        ],
    )
    def test_accepted(self, text: str, expected: int) -> None:
        """Signed ASCII digits with optional padding parse to an int."""
        assert parse_int(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "abc", "1_949", "19 49", "1.0", "+", "--1", "٣", "2147483648", "-2147483649"],
    )
    def test_rejected(self, text: str) -> None:
        """Underscores, non-ASCII digits and out-of-range values give None."""
        assert parse_int(text) is None

    def test_very_long_digit_string(self) -> None:
        """A digit string past the int conversion limit gives None, not an error."""
        assert parse_int("9" * 5000) is None

    def test_leading_zeros_do_not_count_toward_length(self) -> None:
        """Zero padding does not push a small value out of range."""
        assert parse_int("0" * 50 + "12") == 12
