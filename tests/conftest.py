"""Pytest configuration and fixtures for record validator tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import record_validator
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from record_validator import Validator, create_container
from record_validator.application.services import (
    LocaleRegistrationTracker,
    ValidationRunner,
)
from record_validator.infrastructure.engine import RuleRegistry

from tests.doubles import FakeEngineFactory, FakeRecord, FakeRuleRegistry


@pytest.fixture
def container():
    """Return an isolated container with the real engine and custom rules."""
    return create_container()


@pytest.fixture
def registry(container) -> RuleRegistry:
    """Return the container's rule registry."""
    return container.registry


@pytest.fixture
def record() -> FakeRecord:
    """Return an empty fake record."""
    return FakeRecord()


@pytest.fixture
def validator(record, container) -> Validator:
    """Return a validator attached to the fake record."""
    return Validator(record, runner=container.runner)


@pytest.fixture
def fake_registry() -> FakeRuleRegistry:
    """Return a spy rule registry."""
    return FakeRuleRegistry()


@pytest.fixture
def engine_factory() -> FakeEngineFactory:
    """Return a fake engine factory reporting no errors."""
    return FakeEngineFactory()


@pytest.fixture
def fake_runner(fake_registry, engine_factory) -> ValidationRunner:
    """Return a runner wired to fakes, with no custom rule setups."""
    tracker = LocaleRegistrationTracker(fake_registry, [])
    return ValidationRunner(engine_factory, tracker)
