"""Tests for dependency wiring."""

from record_validator import Validator, create_container, get_default_container
from record_validator.infrastructure.rules import RULE_SETUPS

from tests.doubles import FakeRecord


class TestContainer:
    """Test container creation."""

    def test_create_container_wiring(self):
        """Test runner uses the container's tracker and registry."""
        container = create_container("fr")
        assert container.registry.language == "fr"
        assert container.tracker.registry is container.registry
        assert container.runner.tracker is container.tracker

    def test_containers_are_independent(self):
        """Test separate containers keep separate language state."""
        first = create_container()
        second = create_container()
        first.registry.set_language("de")
        assert second.registry.language == "en"

    def test_default_setups(self):
        """Test the default setups are the static rule list."""
        container = create_container()
        container.tracker.ensure_registered("en")
        for name in ("phone", "zipCode"):
            assert container.registry.has_rule(name)
        assert len(RULE_SETUPS) == 2

    def test_default_container_is_shared(self):
        """Test the process-wide container is created once."""
        assert get_default_container() is get_default_container()

    def test_validator_uses_default_runner(self):
        """Test validators without a runner share the default one."""
        validator = Validator(FakeRecord({"zip": ""}))
        validator.add_rule("zip", "required")
        default = get_default_container()
        language = default.registry.language

        errors = validator.validate()

        assert default.tracker.registered_locale == language
        assert list(errors) == ["zip"]
