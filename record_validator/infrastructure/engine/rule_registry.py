"""Rule type registry of the default engine.

Holds the check callable and message template of every named rule plus the
active message language. Built-in rules are loaded at construction and their
messages follow ``set_language`` immediately; custom rules keep the
messages they were registered with until they are registered again.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from ...const import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from ...domain.exceptions import ConfigurationError, UnknownRuleError
from ...domain.interfaces.i_rule_registry import IRuleRegistry
from ...domain.value_objects.rule_spec import RuleCheck
from .builtin_rules import BUILTIN_RULES
from .messages import BUILTIN_MESSAGES

_LOGGER = logging.getLogger(__name__)


class RuleRegistry(IRuleRegistry):
    """Registry of rule checks and localized messages.

    Example:
        >>> registry = RuleRegistry()
        >>> registry.get_message("required")
        '{field} is required'
        >>> registry.set_language("fr")
        >>> registry.get_message("required")
        '{field} est obligatoire'
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        """Initialize with the built-in rules.

        Args:
            language: Initial message language

        Raises:
            ConfigurationError: If the language is not supported
        """
        self._lock = threading.RLock()
        self._checks: dict[str, RuleCheck] = {}
        self._messages: dict[str, str] = {}
        self._language = DEFAULT_LANGUAGE
        self.set_language(language)

    @property
    def language(self) -> str:
        """Currently active message language."""
        return self._language

    def set_language(self, language: str) -> None:
        """Switch the message language.

        Built-in messages switch at once. Custom rules are re-registered by
        the next validation run, which notices the change.

        Raises:
            ConfigurationError: If the language is not supported
        """
        if language not in SUPPORTED_LANGUAGES:
            raise ConfigurationError(
                f"Unsupported language '{language}' "
                f"(supported: {', '.join(SUPPORTED_LANGUAGES)})"
            )

        with self._lock:
            self._language = language
            messages = BUILTIN_MESSAGES[language]
            for name, check in BUILTIN_RULES.items():
                self._checks[name] = check
                self._messages[name] = messages[name]

        _LOGGER.debug("Rule registry language set to '%s'", language)

    def add_rule(self, name: str, check: RuleCheck, message: str) -> None:
        """Register or replace a rule type.

        Raises:
            ConfigurationError: If check is not callable
        """
        if not callable(check):
            raise ConfigurationError(f"Check for rule '{name}' is not callable")

        with self._lock:
            replaced = name in self._checks
            self._checks[name] = check
            self._messages[name] = message

        _LOGGER.debug(
            "%s rule '%s' (%s)", "Replaced" if replaced else "Added", name, self._language
        )

    def has_rule(self, name: str) -> bool:
        """Check if a rule name is registered."""
        with self._lock:
            return name in self._checks

    def get_check(self, name: str) -> RuleCheck:
        """Check callable of a registered rule.

        Raises:
            UnknownRuleError: If the rule is not registered
        """
        with self._lock:
            try:
                return self._checks[name]
            except KeyError:
                raise UnknownRuleError(name) from None

    def get_message(self, name: str) -> Optional[str]:
        """Default message template of a rule, None if not registered."""
        with self._lock:
            return self._messages.get(name)
