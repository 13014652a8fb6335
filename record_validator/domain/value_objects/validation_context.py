"""ValidationContext value object.

Ephemeral snapshot created at the start of each validation run and
discarded when the run finishes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ...const import DEFAULT_LANGUAGE


@dataclass(frozen=True)
class ValidationContext:
    """Read-only view of a record at validation time.

    Attributes:
        values: Snapshot of the record's field values
        locale: Language active in the validation engine for this run

    Example:
        >>> context = ValidationContext({"age": "5"}, "en")
        >>> context.get("age")
        '5'
        >>> context.get("missing") is None
        True
    """

    values: Mapping[str, Any] = field(default_factory=dict)
    locale: str = DEFAULT_LANGUAGE

    def __post_init__(self) -> None:
        """Freeze a copy of the snapshot so later record writes cannot leak in."""
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def from_record(cls, record, locale: str) -> "ValidationContext":
        """Snapshot a record's current field values.

        Args:
            record: Object implementing RecordProtocol
            locale: Active engine language

        Returns:
            New context
        """
        return cls(record.get(), locale)

    def get(self, field_name: str) -> Any:
        """Current value of a field, None when the record has no such field."""
        return self.values.get(field_name)

    def as_dict(self) -> dict[str, Any]:
        """Mutable copy of the snapshot for handing to an engine."""
        return dict(self.values)
