"""Tests for custom rule modules."""

import pytest

from record_validator.infrastructure.rules import RULE_SETUPS, phone, zip_code

from tests.doubles import FakeRuleRegistry


class TestRuleSetups:
    """Test the static setup list."""

    def test_every_setup_registers(self):
        """Test each setup registers its rule."""
        registry = FakeRuleRegistry()
        for rule_setup in RULE_SETUPS:
            rule_setup(registry)
        assert set(registry.checks) == {"phone", "zipCode"}

    @pytest.mark.parametrize("language", ["en", "fr", "de"])
    def test_localized_messages(self, language):
        """Test messages come from the registry language."""
        registry = FakeRuleRegistry(language)
        zip_code.setup(registry)
        assert registry.added == [(language, "zipCode", zip_code.MESSAGES[language])]

    def test_unknown_language_falls_back_to_english(self):
        """Test default message for languages without a table."""
        registry = FakeRuleRegistry("xx")
        phone.setup(registry)
        assert registry.added[0][2] == phone.MESSAGES["en"]


class TestZipCode:
    """Test zipCode check."""

    @pytest.mark.parametrize("value", ["12345", "12345-6789", 2134])
    def test_valid(self, value):
        """Test accepted ZIP codes."""
        assert zip_code.check("zip", value, (), {})

    @pytest.mark.parametrize("value", ["1234", "ABCDE", "12345-67", None])
    def test_invalid(self, value):
        """Test rejected ZIP codes."""
        assert not zip_code.check("zip", value, (), {})


class TestPhone:
    """Test phone check."""

    @pytest.mark.parametrize("value", ["+1 (555) 123-4567", "0612345678", "555.1234"])
    def test_valid(self, value):
        """Test accepted phone numbers."""
        assert phone.check("phone", value, (), {})

    @pytest.mark.parametrize("value", ["12345", "call me", "+1234567890123456", 5551234])
    def test_invalid(self, value):
        """Test rejected phone numbers."""
        assert not phone.check("phone", value, (), {})
