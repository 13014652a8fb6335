"""Condition value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping


@dataclass(frozen=True)
class Condition:
    """Conjunction of field equality checks.

    A condition holds when the record's value for every listed field loosely
    equals the expected value. An empty condition always holds.

    The expected values are held in a read-only mapping. Conditions hash by
    their (field, value) pairs, so expected values must be hashable to use a
    condition as a dict key.

    Attributes:
        expected: Mapping of field name to expected scalar value

    Example:
        >>> condition = Condition({"country": "US"})
        >>> list(condition.items())
        [('country', 'US')]
    """

    expected: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze a private copy of the expected values."""
        object.__setattr__(self, "expected", MappingProxyType(dict(self.expected)))

    def __hash__(self) -> int:
        return hash(tuple(self.expected.items()))

    def items(self) -> Iterator[tuple[str, Any]]:
        """Iterate (field, expected value) pairs in declaration order."""
        return iter(self.expected.items())

    @property
    def fields(self) -> tuple[str, ...]:
        """Fields the condition reads."""
        return tuple(self.expected)

    def __len__(self) -> int:
        return len(self.expected)

    def __str__(self) -> str:
        pairs = ", ".join(f"{name}={value!r}" for name, value in self.expected.items())
        return f"Condition({pairs})"
