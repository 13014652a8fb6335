"""Locale registration state machine for explicit state management."""

import logging
from enum import Enum, auto
from typing import Optional

_LOGGER = logging.getLogger(__name__)


class LocaleRegistrationState(Enum):
    """Custom rule registration states."""

    UNREGISTERED = auto()
    REGISTERED = auto()


class LocaleRegistrationEvent(Enum):
    """Events that trigger state transitions."""

    REGISTER = auto()
    LOCALE_CHANGED = auto()
    RESET = auto()


class LocaleStateMachine:
    """State machine tracking which locale custom rules were registered for.

    Valid transitions:
        UNREGISTERED -> REGISTERED (on REGISTER, first run)
        REGISTERED -> REGISTERED (on LOCALE_CHANGED, new locale)
        REGISTERED -> UNREGISTERED (on RESET)

    Example:
        >>> sm = LocaleStateMachine()
        >>> sm.next_event("en")
        <LocaleRegistrationEvent.REGISTER: 1>
        >>> sm.transition(LocaleRegistrationEvent.REGISTER, "en")
        True
        >>> sm.next_event("en") is None
        True
        >>> sm.next_event("fr")
        <LocaleRegistrationEvent.LOCALE_CHANGED: 2>
    """

    def __init__(self):
        """Initialize state machine in UNREGISTERED state."""
        self._state = LocaleRegistrationState.UNREGISTERED
        self._locale: Optional[str] = None

        # Valid transitions: (current_state, event) -> new_state
        self._transitions = {
            (
                LocaleRegistrationState.UNREGISTERED,
                LocaleRegistrationEvent.REGISTER,
            ): LocaleRegistrationState.REGISTERED,
            (
                LocaleRegistrationState.REGISTERED,
                LocaleRegistrationEvent.LOCALE_CHANGED,
            ): LocaleRegistrationState.REGISTERED,
            (
                LocaleRegistrationState.REGISTERED,
                LocaleRegistrationEvent.RESET,
            ): LocaleRegistrationState.UNREGISTERED,
        }

    @property
    def state(self) -> LocaleRegistrationState:
        """Get current state."""
        return self._state

    @property
    def locale(self) -> Optional[str]:
        """Locale custom rules were last registered for."""
        return self._locale

    @property
    def is_registered(self) -> bool:
        """Check if custom rules have been registered at least once."""
        return self._state == LocaleRegistrationState.REGISTERED

    def next_event(self, locale: str) -> Optional[LocaleRegistrationEvent]:
        """Event a run with this locale should fire, None if nothing to do."""
        if not self.is_registered:
            return LocaleRegistrationEvent.REGISTER
        if self._locale != locale:
            return LocaleRegistrationEvent.LOCALE_CHANGED
        return None

    def transition(
        self, event: LocaleRegistrationEvent, locale: Optional[str] = None
    ) -> bool:
        """Attempt state transition.

        Args:
            event: Event triggering transition
            locale: Locale registered by REGISTER / LOCALE_CHANGED

        Returns:
            True if transition valid and executed, False otherwise
        """
        key = (self._state, event)

        if key not in self._transitions:
            _LOGGER.warning(
                "Invalid transition: %s + %s", self._state.name, event.name
            )
            return False

        previous_locale = self._locale
        self._state = self._transitions[key]
        self._locale = None if event == LocaleRegistrationEvent.RESET else locale

        _LOGGER.debug(
            "Locale registration: %s -> %s (%s)",
            previous_locale,
            self._locale,
            event.name,
        )
        return True

    def reset(self) -> None:
        """Forget the registered locale."""
        if self.is_registered:
            self.transition(LocaleRegistrationEvent.RESET)
