"""Fake rule registry recording registrations."""

from typing import Callable, Dict, List, Tuple

from record_validator.domain.interfaces import IRuleRegistry


class FakeRuleRegistry(IRuleRegistry):
    """Spy registry with a settable language.

    Attributes:
        added: (language, name, message) for every add_rule call
        checks: Registered checks by name
    """

    def __init__(self, language: str = "en"):
        """Initialize fake registry."""
        self._language = language
        self.added: List[Tuple[str, str, str]] = []
        self.checks: Dict[str, Callable] = {}

    @property
    def language(self) -> str:
        """Currently active language."""
        return self._language

    def set_language(self, language: str) -> None:
        """Switch language without any checks."""
        self._language = language

    def add_rule(self, name: str, check: Callable, message: str) -> None:
        """Record the registration."""
        self.added.append((self._language, name, message))
        self.checks[name] = check
