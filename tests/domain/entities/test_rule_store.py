"""Tests for RuleStore entity."""

import threading

from record_validator.domain.entities import RuleStore
from record_validator.domain.value_objects import Condition, RuleSpec


class TestRuleStore:
    """Test RuleStore entity."""

    def test_starts_empty(self):
        """Test a new store holds no rules."""
        store = RuleStore()
        assert store.rules == {}
        assert store.conditional_rules == ()
        assert len(store) == 0

    def test_add_rule_accumulates(self):
        """Test adding to the same field appends, never replaces."""
        store = RuleStore()
        store.add_rule("email", "required")
        store.add_rule("email", ["email"])
        assert store.rules_for("email") == [RuleSpec("required"), RuleSpec("email")]

    def test_duplicates_accumulate(self):
        """Test repeated identical calls keep duplicates."""
        store = RuleStore().add_rule("a", "required").add_rule("a", "required")
        assert len(store.rules_for("a")) == 2

    def test_add_rules(self):
        """Test several fields registered in mapping order."""
        store = RuleStore().add_rules({"email": "email", "zip": ["required"]})
        assert list(store.rules) == ["email", "zip"]
        assert len(store) == 2

    def test_chaining(self):
        """Test registration methods return the store."""
        store = RuleStore()
        assert store.add_rule("a", "required") is store
        assert store.add_rules({"b": "email"}) is store
        assert store.add_conditional({"a": 1}, {"b": "required"}) is store

    def test_add_conditional(self):
        """Test conditional rules are normalized and appended."""
        store = RuleStore()
        store.add_conditional({"country": "US"}, {"zip": ["required"]})
        store.add_conditional({"country": "FR"}, {}, {"zip": "alphaNum"})

        first, second = store.conditional_rules
        assert first.condition == Condition({"country": "US"})
        assert first.then_rules == {"zip": (RuleSpec("required"),)}
        assert first.else_rules == {}
        assert second.else_rules == {"zip": (RuleSpec("alphaNum"),)}

    def test_add_conditional_accepts_condition(self):
        """Test a Condition instance is used directly."""
        condition = Condition({"a": 1})
        store = RuleStore().add_conditional(condition, {"b": "required"})
        assert store.conditional_rules[0].condition is condition

    def test_rules_returns_copy(self):
        """Test callers cannot modify the store through rules."""
        store = RuleStore().add_rule("a", "required")
        store.rules["a"].append(RuleSpec("email"))
        assert store.rules_for("a") == [RuleSpec("required")]

    def test_rules_for_unknown_field(self):
        """Test an unknown field has no rules."""
        assert RuleStore().rules_for("missing") == []

    def test_concurrent_appends(self):
        """Test appends from several threads are all kept."""
        store = RuleStore()

        def register():
            for _ in range(100):
                store.add_rule("field", "required")

        threads = [threading.Thread(target=register) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store.rules_for("field")) == 400
