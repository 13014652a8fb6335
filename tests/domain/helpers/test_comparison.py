"""Tests for loose comparison helpers."""

import pytest

from record_validator.domain.helpers import is_numeric, is_truthy, loose_equals, to_number


class TestLooseEquals:
    """Test loose_equals function."""

    @pytest.mark.parametrize(
        "left,right",
        [
            ("5", 5),
            (5, "5"),
            ("5.0", 5),
            ("1e1", "10"),
            (" 7", 7),
            ("US", "US"),
            (None, None),
            (None, ""),
            (None, 0),
            (None, False),
            ("1", True),
            (0, False),
            ("", False),
            ("0", False),
        ],
    )
    def test_equal(self, left, right):
        """Test pairs that loosely match."""
        assert loose_equals(left, right)
        assert loose_equals(right, left)

    @pytest.mark.parametrize(
        "left,right",
        [
            ("abc", 0),
            ("5", 6),
            ("US", "us"),
            (None, "0"),
            (None, 1),
            ("active", "inactive"),
            ("1", False),
        ],
    )
    def test_not_equal(self, left, right):
        """Test pairs that do not match."""
        assert not loose_equals(left, right)
        assert not loose_equals(right, left)

    def test_number_against_non_numeric_string(self):
        """Test numbers compare as strings against non-numeric strings."""
        assert not loose_equals(5, "5 apples")


class TestNumberHelpers:
    """Test numeric helpers."""

    def test_to_number(self):
        """Test conversion of numbers and numeric strings."""
        assert to_number("42") == 42
        assert isinstance(to_number("42"), int)
        assert to_number("4.5") == 4.5
        assert to_number(3) == 3
        assert to_number("abc") is None
        assert to_number(True) is None
        assert to_number(None) is None

    def test_is_numeric(self):
        """Test numeric detection."""
        assert is_numeric("-3.5")
        assert is_numeric(".5")
        assert not is_numeric("")
        assert not is_numeric("1,5")

    def test_is_truthy(self):
        """Test string "0" is false."""
        assert not is_truthy("0")
        assert not is_truthy("")
        assert is_truthy("false")
        assert is_truthy(1)
