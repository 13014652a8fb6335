"""RecordProtocol for the record a validator is attached to.

Uses structural typing so any record-like object with these two methods
can host a validator.
"""

from typing import Any, Callable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class RecordProtocol(Protocol):
    """Narrow capability interface of a validated record."""

    def get(self) -> Mapping[str, Any]:
        """Return the current field values keyed by field name."""

    def add_hook(self, name: str, callback: Callable[..., Any]) -> Any:
        """Register a callback invoked with the record on the named hook."""
