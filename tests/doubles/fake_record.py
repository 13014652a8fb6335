"""Fake record for testing without a data model.

This fake implements RecordProtocol structurally.
"""

from typing import Any, Callable, Dict, List, Optional


class FakeRecord:
    """In-memory record with named hooks.

    Attributes:
        data: Current field values
        hooks: Registered callbacks per hook name

    Example:
        >>> record = FakeRecord({"country": "US"})
        >>> record.add_hook("validate", lambda rec, intent=None: None)
        >>> record.hook("validate")
        [None]
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        """Initialize fake record."""
        self.data: Dict[str, Any] = dict(data or {})
        self.hooks: Dict[str, List[Callable]] = {}

    def get(self) -> Dict[str, Any]:
        """Return a copy of the current field values."""
        return dict(self.data)

    def set(self, field: str, value: Any) -> "FakeRecord":
        """Set a field value."""
        self.data[field] = value
        return self

    def add_hook(self, name: str, callback: Callable) -> None:
        """Register a callback on a hook."""
        self.hooks.setdefault(name, []).append(callback)

    def hook(self, name: str, *args) -> List[Any]:
        """Invoke every callback of a hook with this record.

        Returns:
            Callback results in registration order
        """
        return [callback(self, *args) for callback in self.hooks.get(name, [])]
