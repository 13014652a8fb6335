"""ConditionalRule value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .condition import Condition
from .rule_spec import RuleSpec

# Read-only rule set held by a conditional rule
FrozenRuleSet = Mapping[str, tuple[RuleSpec, ...]]


def _freeze(rule_set: Mapping) -> FrozenRuleSet:
    return MappingProxyType({name: tuple(rules) for name, rules in rule_set.items()})


@dataclass(frozen=True)
class ConditionalRule:
    """Rules applied depending on whether a condition holds.

    Created once per ``add_conditional`` call and never mutated. Both
    branches are copied into read-only mappings of rule tuples. The
    condition is evaluated fresh on every validation run.

    Conditional rules compare by value but are not hashable.

    Attributes:
        condition: Condition evaluated against the record
        then_rules: Rules merged when the condition holds
        else_rules: Rules merged when it does not
    """

    condition: Condition
    then_rules: FrozenRuleSet = field(default_factory=dict)
    else_rules: FrozenRuleSet = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "then_rules", _freeze(self.then_rules))
        object.__setattr__(self, "else_rules", _freeze(self.else_rules))

    def branch(self, satisfied: bool) -> FrozenRuleSet:
        """Return the rule set for the given condition outcome."""
        return self.then_rules if satisfied else self.else_rules
