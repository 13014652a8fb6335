"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

Types of test doubles:
- Fake: Lightweight working implementation (e.g., in-memory record)
- Stub: Returns predetermined values
- Spy: Records calls for verification

Example:
    >>> from tests.doubles import FakeRecord
    >>> record = FakeRecord({"email": ""})
    >>> validator = Validator(record)
    >>> errors = record.hook("validate")
"""

from .fake_engine import FakeEngine, FakeEngineFactory
from .fake_record import FakeRecord
from .fake_rule_registry import FakeRuleRegistry

__all__ = [
    "FakeEngine",
    "FakeEngineFactory",
    "FakeRecord",
    "FakeRuleRegistry",
]
