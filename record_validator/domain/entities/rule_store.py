"""RuleStore entity.

Holds the rules declared for one validator: unconditional rules per field
and an ordered list of conditional rules. Rules only accumulate; there is
no removal.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Optional

from ..helpers.rule_sets import copy_rule_set, count_rules
from ..services.rule_normalizer import normalize_rule_set, normalize_rules
from ..value_objects.condition import Condition
from ..value_objects.conditional_rule import ConditionalRule
from ..value_objects.rule_spec import FieldRules, RuleSet

_LOGGER = logging.getLogger(__name__)


class RuleStore:
    """Registry of unconditional and conditional rules.

    Registration methods return the store so calls can be chained. Appends
    are serialized per instance.

    Example:
        >>> store = RuleStore()
        >>> _ = store.add_rule("email", "required").add_rule("email", ["email"])
        >>> [spec.name for spec in store.rules["email"]]
        ['required', 'email']
        >>> _ = store.add_conditional({"country": "US"}, {"zip": ["required"]})
        >>> len(store.conditional_rules)
        1
    """

    def __init__(self):
        """Initialize an empty store."""
        self._rules: RuleSet = {}
        self._conditional_rules: list[ConditionalRule] = []
        self._lock = threading.Lock()

    @property
    def rules(self) -> RuleSet:
        """Copy of the unconditional rule set."""
        with self._lock:
            return copy_rule_set(self._rules)

    @property
    def conditional_rules(self) -> tuple[ConditionalRule, ...]:
        """Conditional rules in registration order."""
        with self._lock:
            return tuple(self._conditional_rules)

    def rules_for(self, field_name: str) -> FieldRules:
        """Unconditional rules declared for one field."""
        with self._lock:
            return list(self._rules.get(field_name, []))

    def add_rule(self, field_name: str, expression: Any) -> "RuleStore":
        """Append rules to a field.

        Repeated calls accumulate, identical rules included.

        Args:
            field_name: Field the rules apply to
            expression: Rule expression (see rule_normalizer)

        Returns:
            This store
        """
        specs = normalize_rules(expression)
        with self._lock:
            self._rules.setdefault(field_name, []).extend(specs)
        _LOGGER.debug("Added %d rule(s) to field '%s'", len(specs), field_name)
        return self

    def add_rules(self, rules: Mapping[str, Any]) -> "RuleStore":
        """Append rules for several fields, in mapping order."""
        for field_name, expression in rules.items():
            self.add_rule(field_name, expression)
        return self

    def add_conditional(
        self,
        condition: Mapping[str, Any] | Condition,
        then_rules: Mapping[str, Any],
        else_rules: Optional[Mapping[str, Any]] = None,
    ) -> "RuleStore":
        """Register rules that depend on current field values.

        Args:
            condition: Field to expected value pairs, all of which must match
            then_rules: Rules applied when the condition holds
            else_rules: Rules applied otherwise (default: none)

        Returns:
            This store
        """
        if not isinstance(condition, Condition):
            condition = Condition(condition)

        conditional = ConditionalRule(
            condition=condition,
            then_rules=normalize_rule_set(then_rules),
            else_rules=normalize_rule_set(else_rules),
        )
        with self._lock:
            self._conditional_rules.append(conditional)
            position = len(self._conditional_rules)

        _LOGGER.debug("Registered conditional rule #%d on %s", position, condition)
        return self

    def __len__(self) -> int:
        """Number of unconditional rules."""
        with self._lock:
            return count_rules(self._rules)
