"""Application services."""

from .locale_registration_tracker import LocaleRegistrationTracker
from .validation_runner import EngineFactory, ValidationRunner

__all__ = [
    "EngineFactory",
    "LocaleRegistrationTracker",
    "ValidationRunner",
]
