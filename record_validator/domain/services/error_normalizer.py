"""Reduction of raw engine errors to one message per field."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

ErrorMap = dict[str, str]
RawErrors = Mapping[str, Sequence[str]]


def normalize_errors(raw_errors: Optional[RawErrors]) -> Optional[ErrorMap]:
    """Keep the last message reported for each failing field.

    Args:
        raw_errors: Engine output, or None when validation passed

    Returns:
        Field to message mapping, or None when no field has a message

    Examples:
        >>> normalize_errors({"name": ["Name is required", "Name is too short"]})
        {'name': 'Name is too short'}
        >>> normalize_errors({"name": []}) is None
        True
    """
    if raw_errors is None:
        return None

    errors = {
        field_name: messages[-1]
        for field_name, messages in raw_errors.items()
        if messages
    }
    return errors or None
