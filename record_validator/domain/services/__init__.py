"""Domain services: pure functions over rules, conditions and errors."""

from .condition_evaluator import evaluate_condition
from .error_normalizer import ErrorMap, RawErrors, normalize_errors
from .rule_normalizer import normalize_rule_set, normalize_rules
from .rule_set_resolver import resolve_rule_set

__all__ = [
    "ErrorMap",
    "RawErrors",
    "evaluate_condition",
    "normalize_errors",
    "normalize_rule_set",
    "normalize_rules",
    "resolve_rule_set",
]
