"""Loose (type-coercing) value comparison.

Conditions compare record values the way a dynamically-typed ``==`` does:
numeric strings equal their numbers, booleans compare by truthiness and
``None`` equals every empty value.
"""

import re
from typing import Any, Optional, Union

_NUMERIC_PATTERN = re.compile(
    r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$"
)

Number = Union[int, float]


def is_numeric(value: Any) -> bool:
    """Check if a value is a number or a numeric string.

    Examples:
        >>> is_numeric("5")
        True
        >>> is_numeric(" 1e3 ")
        True
        >>> is_numeric(True)
        False
    """
    return to_number(value) is not None


def to_number(value: Any) -> Optional[Number]:
    """Convert a number or numeric string to int/float, None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and _NUMERIC_PATTERN.match(value):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return float(text)
    return None


def is_truthy(value: Any) -> bool:
    """Truthiness where the string "0" counts as false."""
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _number_to_string(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def loose_equals(left: Any, right: Any) -> bool:
    """Compare two values with type coercion.

    Args:
        left: First value
        right: Second value

    Returns:
        True if the values are loosely equal

    Examples:
        >>> loose_equals("5", 5)
        True
        >>> loose_equals("5.0", 5)
        True
        >>> loose_equals(None, "")
        True
        >>> loose_equals("abc", 0)
        False
        >>> loose_equals("1", True)
        True
    """
    if left is None or right is None:
        other = right if left is None else left
        if other is None:
            return True
        if isinstance(other, str):
            return other == ""
        return not bool(other)

    if isinstance(left, bool) or isinstance(right, bool):
        return is_truthy(left) == is_truthy(right)

    left_number = to_number(left)
    right_number = to_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number

    # Number against a non-numeric string compares as strings
    if left_number is not None and isinstance(right, str):
        return _number_to_string(left_number) == right
    if right_number is not None and isinstance(left, str):
        return left == _number_to_string(right_number)

    return left == right
