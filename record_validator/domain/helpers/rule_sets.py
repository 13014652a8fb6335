"""Rule set copy and merge helpers.

Merging accumulates: rules for a field are concatenated, never replaced,
and identical rules are not deduplicated.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from ..value_objects.rule_spec import RuleSet, RuleSpec

# Any per-field rule mapping: plain rule sets or frozen branches
RuleMapping = Mapping[str, Sequence[RuleSpec]]


def copy_rule_set(rule_set: RuleMapping) -> RuleSet:
    """Copy a rule set so the per-field lists can be extended safely.

    Example:
        >>> original = {"email": [RuleSpec("required")]}
        >>> copy = copy_rule_set(original)
        >>> copy["email"].append(RuleSpec("email"))
        >>> len(original["email"])
        1
    """
    return {field_name: list(rules) for field_name, rules in rule_set.items()}


def merge_into(target: RuleSet, other: RuleMapping) -> RuleSet:
    """Append every rule of ``other`` to ``target`` in place.

    Args:
        target: Rule set being built (mutated)
        other: Rules to accumulate

    Returns:
        The target, for chaining
    """
    for field_name, rules in other.items():
        target.setdefault(field_name, []).extend(rules)
    return target


def merge_rule_sets(*rule_sets: RuleMapping) -> RuleSet:
    """Deep-merge rule sets left to right into a new rule set.

    Example:
        >>> merged = merge_rule_sets(
        ...     {"zip": [RuleSpec("required")]},
        ...     {"zip": [RuleSpec("zipCode")], "state": [RuleSpec("required")]},
        ... )
        >>> [str(rule) for rule in merged["zip"]]
        ['required()', 'zipCode()']
    """
    result: RuleSet = {}
    for rule_set in rule_sets:
        merge_into(result, rule_set)
    return result


def count_rules(rule_set: RuleMapping) -> int:
    """Total number of rules across all fields."""
    return sum(len(rules) for rules in rule_set.values())
