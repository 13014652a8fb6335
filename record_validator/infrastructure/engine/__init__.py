"""Default validation engine adapter."""

from .builtin_rules import BUILTIN_RULES
from .rule_engine import RuleEngine, format_message
from .rule_registry import RuleRegistry

__all__ = [
    "BUILTIN_RULES",
    "RuleEngine",
    "RuleRegistry",
    "format_message",
]
