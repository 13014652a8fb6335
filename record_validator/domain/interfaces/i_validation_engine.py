"""IValidationEngine interface for the engine executing atomic checks."""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from ..value_objects.rule_spec import RuleSet


class IValidationEngine(ABC):
    """Interface for a field validation engine.

    An engine is constructed per run with the record's field values, given
    the effective rule set, then evaluated once.

    Example:
        >>> engine = RuleEngine({"email": ""}, registry)
        >>> engine.map_fields_rules({"email": [RuleSpec("required")]})
        >>> engine.evaluate()
        False
        >>> engine.errors()
        {'email': ['Email is required']}
    """

    @abstractmethod
    def __init__(self, data: Mapping[str, Any]):
        """Initialize with a snapshot of field values."""

    @abstractmethod
    def map_fields_rules(self, rule_set: RuleSet) -> None:
        """Set the rules to evaluate.

        Raises:
            UnknownRuleError: If a rule name is not registered
        """

    @abstractmethod
    def evaluate(self) -> bool:
        """Run every rule.

        Returns:
            True if no rule failed
        """

    @abstractmethod
    def errors(self) -> dict[str, list[str]]:
        """Messages of failed rules per field, in evaluation order."""
