"""Service running custom rule setups once per engine language."""

from __future__ import annotations

import logging
import threading
from typing import Sequence

from ...domain.exceptions import RuleDiscoveryError
from ...domain.interfaces.i_rule_registry import IRuleRegistry, RuleSetup
from ...infrastructure.state_machines.locale_state_machine import LocaleStateMachine

_LOGGER = logging.getLogger(__name__)


class LocaleRegistrationTracker:
    """Registers custom rule types whenever the engine language changes.

    The tracker remembers the language the setups last ran for. Runs with
    the same language skip registration; a run observing a different
    language runs every setup again. Check-then-register is serialized by
    a lock so concurrent runs neither duplicate nor miss a registration.

    Example:
        >>> tracker = LocaleRegistrationTracker(registry, RULE_SETUPS)
        >>> tracker.ensure_registered("en")
        True
        >>> tracker.ensure_registered("en")
        False
    """

    def __init__(self, registry: IRuleRegistry, setups: Sequence[RuleSetup]):
        """Initialize tracker.

        Args:
            registry: Registry the setups register into
            setups: Custom rule setup callables, run in order
        """
        self._registry = registry
        self._setups = tuple(setups)
        self._state_machine = LocaleStateMachine()
        self._lock = threading.Lock()
        self._registration_count = 0

    @property
    def registry(self) -> IRuleRegistry:
        """Registry the setups register into."""
        return self._registry

    @property
    def language(self) -> str:
        """Language currently active in the registry."""
        return self._registry.language

    @property
    def registered_locale(self) -> str | None:
        """Language the setups last ran for, None before the first run."""
        return self._state_machine.locale

    @property
    def registration_count(self) -> int:
        """Number of times the setups have been run."""
        return self._registration_count

    def ensure_registered(self, locale: str) -> bool:
        """Run the setups if they have not run for this locale yet.

        Args:
            locale: Language observed by the current validation run

        Returns:
            True if the setups ran, False if registration was skipped

        Raises:
            RuleDiscoveryError: If a setup is not callable or fails; the
                locale is then not marked as registered
        """
        with self._lock:
            event = self._state_machine.next_event(locale)
            if event is None:
                _LOGGER.debug("Custom rules already registered for '%s'", locale)
                return False

            _LOGGER.info(
                "Registering %d custom rule setup(s) for language '%s' (was %s)",
                len(self._setups),
                locale,
                self._state_machine.locale,
            )
            for rule_setup in self._setups:
                self._run_setup(rule_setup)

            self._state_machine.transition(event, locale)
            self._registration_count += 1
            return True

    def reset(self) -> None:
        """Forget the registered language so the next run registers again."""
        with self._lock:
            self._state_machine.reset()

    def _run_setup(self, rule_setup: RuleSetup) -> None:
        name = getattr(rule_setup, "__module__", None) or repr(rule_setup)
        if not callable(rule_setup):
            raise RuleDiscoveryError(f"Rule setup {rule_setup!r} is not callable")
        try:
            rule_setup(self._registry)
        except RuleDiscoveryError:
            raise
        except Exception as err:
            raise RuleDiscoveryError(f"Rule setup '{name}' failed: {err}") from err
