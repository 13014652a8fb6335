"""Value objects for rule composition.

Value objects are immutable and compared by value.
"""

from .condition import Condition
from .conditional_rule import ConditionalRule
from .rule_spec import FieldRules, RuleCheck, RuleSet, RuleSpec
from .validation_context import ValidationContext

__all__ = [
    "Condition",
    "ConditionalRule",
    "FieldRules",
    "RuleCheck",
    "RuleSet",
    "RuleSpec",
    "ValidationContext",
]
