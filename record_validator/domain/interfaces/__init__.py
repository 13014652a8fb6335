"""Domain interfaces.

Contracts the validator depends on. The record, the validation engine and
the engine's rule registry are collaborators; fakes implementing these
contracts are used in tests.
"""

from .i_rule_registry import IRuleRegistry, RuleSetup
from .i_validation_engine import IValidationEngine
from .record_protocol import RecordProtocol

__all__ = [
    "IRuleRegistry",
    "IValidationEngine",
    "RecordProtocol",
    "RuleSetup",
]
