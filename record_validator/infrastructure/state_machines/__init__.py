"""State machines for explicit state management."""

from .locale_state_machine import (
    LocaleRegistrationEvent,
    LocaleRegistrationState,
    LocaleStateMachine,
)

__all__ = [
    "LocaleRegistrationEvent",
    "LocaleRegistrationState",
    "LocaleStateMachine",
]
