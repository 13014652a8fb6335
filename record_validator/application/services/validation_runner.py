"""Service bridging resolved rules and a record snapshot to the engine."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from ...domain.interfaces.i_validation_engine import IValidationEngine
from ...domain.services.error_normalizer import RawErrors
from ...domain.value_objects.rule_spec import RuleSet
from ...domain.value_objects.validation_context import ValidationContext
from .locale_registration_tracker import LocaleRegistrationTracker

_LOGGER = logging.getLogger(__name__)

EngineFactory = Callable[[Mapping[str, Any]], IValidationEngine]


class ValidationRunner:
    """Runs one validation pass through an engine.

    Custom rules are registered first when the engine language changed
    since the last run. Engine and registration failures propagate.
    """

    def __init__(
        self,
        engine_factory: EngineFactory,
        tracker: LocaleRegistrationTracker,
    ):
        """Initialize runner.

        Args:
            engine_factory: Builds an engine from a field value snapshot
            tracker: Custom rule registration tracker
        """
        self._engine_factory = engine_factory
        self._tracker = tracker

    @property
    def tracker(self) -> LocaleRegistrationTracker:
        """Custom rule registration tracker."""
        return self._tracker

    def create_context(self, record) -> ValidationContext:
        """Snapshot a record together with the engine's active language."""
        return ValidationContext.from_record(record, self._tracker.language)

    def run(self, rule_set: RuleSet, context: ValidationContext) -> Optional[RawErrors]:
        """Evaluate a rule set against a snapshot.

        Args:
            rule_set: Effective rules for this run
            context: Record snapshot and active language

        Returns:
            Raw per-field messages from the engine, None if validation passed

        Raises:
            RuleDiscoveryError: If custom rule registration fails
            UnknownRuleError: If the engine cannot resolve a rule name
        """
        self._tracker.ensure_registered(context.locale)

        engine = self._engine_factory(context.as_dict())
        engine.map_fields_rules(rule_set)

        if engine.evaluate():
            _LOGGER.debug("Validation passed (%d field(s) checked)", len(rule_set))
            return None

        return engine.errors()
