"""Pure helper functions for the domain layer."""

from .comparison import is_numeric, is_truthy, loose_equals, to_number
from .rule_sets import copy_rule_set, count_rules, merge_into, merge_rule_sets

__all__ = [
    "copy_rule_set",
    "count_rules",
    "is_numeric",
    "is_truthy",
    "loose_equals",
    "merge_into",
    "merge_rule_sets",
    "to_number",
]
