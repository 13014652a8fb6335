"""Default validation engine.

Evaluates a rule set against a snapshot of field values, collecting every
failure message per field in evaluation order.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ...const import DEFAULT_RULE_MESSAGE, EMPTY_VALUE_RULES, field_label
from ...domain.exceptions import UnknownRuleError
from ...domain.interfaces.i_validation_engine import IValidationEngine
from ...domain.value_objects.rule_spec import RuleSet, RuleSpec
from .builtin_rules import is_missing
from .rule_registry import RuleRegistry

_LOGGER = logging.getLogger(__name__)


def format_message(template: str, field_name: str, params: tuple) -> str:
    """Fill a message template with the field label and rule params.

    Example:
        >>> format_message("{field} must be at least {0}", "user_age", (18,))
        'User Age must be at least 18'
    """
    try:
        return template.format(*params, field=field_label(field_name))
    except (IndexError, KeyError, ValueError):
        _LOGGER.debug("Message template %r could not be formatted", template)
        return template


class RuleEngine(IValidationEngine):
    """Engine resolving named rules through a RuleRegistry.

    For a missing value (None, "" or an empty list) the field's rules are
    skipped unless one of them is ``required`` or ``accepted``. A
    whitespace-only string is a value and is checked.

    Example:
        >>> engine = RuleEngine({"email": ""}, registry)
        >>> engine.map_fields_rules(
        ...     {"email": [RuleSpec("required"), RuleSpec("email")]}
        ... )
        >>> engine.evaluate()
        False
        >>> engine.errors()["email"]
        ['Email is required', 'Email is not a valid email address']
    """

    def __init__(self, data: Mapping[str, Any], registry: RuleRegistry):
        """Initialize engine.

        Args:
            data: Snapshot of field values
            registry: Registry resolving rule names
        """
        self._data = dict(data)
        self._registry = registry
        self._rules: RuleSet = {}
        self._errors: dict[str, list[str]] = {}

    def map_fields_rules(self, rule_set: RuleSet) -> None:
        """Set the rules to evaluate.

        Raises:
            UnknownRuleError: If a named rule is not registered
        """
        for field_name, specs in rule_set.items():
            for spec in specs:
                if not spec.is_callable and not self._registry.has_rule(spec.name):
                    raise UnknownRuleError(spec.name, field_name)
            self._rules.setdefault(field_name, []).extend(specs)

    def evaluate(self) -> bool:
        """Run every mapped rule.

        Returns:
            True if no rule failed
        """
        self._errors = {}

        for field_name, specs in self._rules.items():
            value = self._data.get(field_name)
            if is_missing(value) and not any(
                spec.name in EMPTY_VALUE_RULES for spec in specs
            ):
                continue

            for spec in specs:
                if not self._check(field_name, value, spec):
                    self._errors.setdefault(field_name, []).append(
                        self._message(field_name, spec)
                    )

        if self._errors:
            _LOGGER.debug("Validation failed for fields: %s", ", ".join(self._errors))
        return not self._errors

    def errors(self) -> dict[str, list[str]]:
        """Messages of failed rules per field, in evaluation order."""
        return {name: list(messages) for name, messages in self._errors.items()}

    def _check(self, field_name: str, value: Any, spec: RuleSpec) -> bool:
        check = spec.name if spec.is_callable else self._registry.get_check(spec.name)
        return bool(check(field_name, value, spec.params, self._data))

    def _message(self, field_name: str, spec: RuleSpec) -> str:
        template = spec.message
        if template is None and not spec.is_callable:
            template = self._registry.get_message(spec.name)
        return format_message(template or DEFAULT_RULE_MESSAGE, field_name, spec.params)
