"""Condition evaluation against a validation context."""

from __future__ import annotations

from ..helpers.comparison import loose_equals
from ..value_objects.condition import Condition
from ..value_objects.validation_context import ValidationContext


def evaluate_condition(condition: Condition, context: ValidationContext) -> bool:
    """Check whether every field of the condition matches the record.

    Fields absent from the record read as None. An empty condition holds.

    Args:
        condition: Expected field values
        context: Snapshot of the record

    Returns:
        True if all pairs loosely match

    Example:
        >>> evaluate_condition(Condition({"age": 5}), ValidationContext({"age": "5"}))
        True
    """
    return all(
        loose_equals(context.get(field_name), expected)
        for field_name, expected in condition.items()
    )
