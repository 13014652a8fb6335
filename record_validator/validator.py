"""Validator attached to a record.

Rules are declared on the validator over time; the record calls
``validate`` through its ``"validate"`` hook and receives the error map.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .application.services.validation_runner import ValidationRunner
from .const import HOOK_VALIDATE, VALIDATOR_ATTRIBUTE
from .container import get_default_container
from .domain.entities.rule_store import RuleStore
from .domain.interfaces.record_protocol import RecordProtocol
from .domain.services.error_normalizer import ErrorMap, normalize_errors
from .domain.services.rule_set_resolver import resolve_rule_set
from .domain.value_objects.conditional_rule import ConditionalRule
from .domain.value_objects.rule_spec import RuleSet

_LOGGER = logging.getLogger(__name__)


class Validator:
    """Conditional rule validator for one record.

    On construction the validator registers itself on the record's
    ``"validate"`` hook and becomes ``record.validator`` unless the record
    already has one.

    Example:
        >>> validator = Validator(record)
        >>> validator.add_rule("email", ["required", ["email"]]).add_conditional(
        ...     {"country": "US"}, {"zip": [["zipCode"]]}, {"zip": "required"}
        ... )
        >>> validator.validate(record)
        {'email': 'Email is not a valid email address'}
    """

    def __init__(
        self,
        record: RecordProtocol,
        runner: Optional[ValidationRunner] = None,
        store: Optional[RuleStore] = None,
    ):
        """Attach to a record.

        Args:
            record: Record to validate
            runner: Validation runner (default: process-wide runner)
            store: Rule store (default: new empty store)
        """
        self.record = record
        self._runner = runner or get_default_container().runner
        self._store = store or RuleStore()

        if getattr(record, VALIDATOR_ATTRIBUTE, None) is None:
            setattr(record, VALIDATOR_ATTRIBUTE, self)

        record.add_hook(HOOK_VALIDATE, self.validate)

    @property
    def store(self) -> RuleStore:
        """Rules declared on this validator."""
        return self._store

    @property
    def rules(self) -> RuleSet:
        """Unconditional rules."""
        return self._store.rules

    @property
    def conditional_rules(self) -> tuple[ConditionalRule, ...]:
        """Conditional rules in registration order."""
        return self._store.conditional_rules

    def add_rule(self, field_name: str, expression: Any) -> "Validator":
        """Append rules to a field. See rule_normalizer for accepted shapes."""
        self._store.add_rule(field_name, expression)
        return self

    def add_rules(self, rules: Mapping[str, Any]) -> "Validator":
        """Append rules for several fields."""
        self._store.add_rules(rules)
        return self

    def add_conditional(
        self,
        condition: Mapping[str, Any],
        then_rules: Mapping[str, Any],
        else_rules: Optional[Mapping[str, Any]] = None,
    ) -> "Validator":
        """Register rules applied only when the condition holds (or not).

        Args:
            condition: Field to expected value pairs, all of which must match
            then_rules: Rules applied when the condition holds
            else_rules: Rules applied otherwise
        """
        self._store.add_conditional(condition, then_rules, else_rules)
        return self

    def validate(
        self, record: Optional[RecordProtocol] = None, intent: Optional[str] = None
    ) -> Optional[ErrorMap]:
        """Run all validations against the record's current values.

        Args:
            record: Record passed by the hook (default: attached record)
            intent: Caller intent, accepted for subclasses and not used here

        Returns:
            Field to message mapping, or None if every rule passed

        Raises:
            ConfigurationError: On custom rule registration failures or
                unknown rule names
        """
        record = self.record if record is None else record

        context = self._runner.create_context(record)
        rule_set = resolve_rule_set(self._store, context)
        errors = normalize_errors(self._runner.run(rule_set, context))

        if errors:
            _LOGGER.debug("Validation failed (intent=%s): %s", intent, sorted(errors))
        return errors
