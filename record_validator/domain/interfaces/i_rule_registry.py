"""IRuleRegistry interface for the engine's rule-type registry."""

from abc import ABC, abstractmethod
from typing import Callable

from ..value_objects.rule_spec import RuleCheck

# Custom rule setup entry: receives the registry and registers rule types
RuleSetup = Callable[["IRuleRegistry"], None]


class IRuleRegistry(ABC):
    """Registry of named rule types and their localized messages.

    Custom rule modules register against this interface; the language tells
    them which message table to use.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Currently active message language."""

    @abstractmethod
    def add_rule(self, name: str, check: RuleCheck, message: str) -> None:
        """Register or replace a rule type.

        Args:
            name: Rule identifier used in rule expressions
            check: Callable ``check(field, value, params, fields) -> bool``
            message: Default failure message template
        """
