"""Dependency wiring for validators.

The container holds the engine's rule registry, the custom rule
registration tracker and the runner built on them. One process-wide
container is shared by every validator that is not given its own runner,
so the "last registered language" is tracked once per process.

Example:
    >>> container = get_default_container()
    >>> container.registry.set_language("fr")
    >>> validator = Validator(record)  # uses container.runner
"""

from __future__ import annotations

import functools
import logging
import threading
from dataclasses import dataclass
from typing import Optional, Sequence

from .application.services.locale_registration_tracker import (
    LocaleRegistrationTracker,
)
from .application.services.validation_runner import ValidationRunner
from .const import DEFAULT_LANGUAGE
from .domain.interfaces.i_rule_registry import RuleSetup
from .infrastructure.engine.rule_engine import RuleEngine
from .infrastructure.engine.rule_registry import RuleRegistry
from .infrastructure.rules import RULE_SETUPS

_LOGGER = logging.getLogger(__name__)

_default_container: Optional["ValidatorContainer"] = None
_default_lock = threading.Lock()


@dataclass
class ValidatorContainer:
    """Wired dependencies of a validation run.

    Attributes:
        registry: Rule registry of the default engine
        tracker: Custom rule registration tracker
        runner: Validation runner using both
    """

    registry: RuleRegistry
    tracker: LocaleRegistrationTracker
    runner: ValidationRunner


def create_container(
    language: str = DEFAULT_LANGUAGE,
    setups: Optional[Sequence[RuleSetup]] = None,
) -> ValidatorContainer:
    """Build an independent registry, tracker and runner.

    Args:
        language: Initial engine language
        setups: Custom rule setups (default: RULE_SETUPS)

    Returns:
        New container
    """
    registry = RuleRegistry(language)
    tracker = LocaleRegistrationTracker(
        registry, RULE_SETUPS if setups is None else setups
    )
    runner = ValidationRunner(functools.partial(RuleEngine, registry=registry), tracker)
    return ValidatorContainer(registry=registry, tracker=tracker, runner=runner)


def get_default_container() -> ValidatorContainer:
    """Return the process-wide container, creating it on first use."""
    global _default_container

    with _default_lock:
        if _default_container is None:
            _LOGGER.debug("Creating default validator container")
            _default_container = create_container()
        return _default_container
