"""Tests for rule set resolution."""

from record_validator.domain.entities import RuleStore
from record_validator.domain.services import resolve_rule_set
from record_validator.domain.value_objects import RuleSpec, ValidationContext


def context(**values):
    return ValidationContext(values, "en")


class TestResolveRuleSet:
    """Test resolve_rule_set function."""

    def test_unconditional_rules_only(self):
        """Test the base rules are returned when nothing is conditional."""
        store = RuleStore().add_rule("email", ["required", ["email"]])
        assert resolve_rule_set(store, context()) == {
            "email": [RuleSpec("required"), RuleSpec("email")]
        }

    def test_then_branch_when_condition_holds(self):
        """Test then rules merge and else rules do not."""
        store = RuleStore().add_conditional(
            {"status": "active"}, {"owner": "required"}, {"reason": "required"}
        )
        resolved = resolve_rule_set(store, context(status="active"))
        assert resolved == {"owner": [RuleSpec("required")]}

    def test_else_branch_when_condition_fails(self):
        """Test else rules merge and then rules do not."""
        store = RuleStore().add_conditional(
            {"status": "active"}, {"owner": "required"}, {"reason": "required"}
        )
        resolved = resolve_rule_set(store, context(status="inactive"))
        assert resolved == {"reason": [RuleSpec("required")]}

    def test_conditional_rules_appended_after_base(self):
        """Test conditional rules accumulate after unconditional ones."""
        store = (
            RuleStore()
            .add_rule("zip", "alphaNum")
            .add_conditional({"country": "US"}, {"zip": [["zipCode"]]})
        )
        resolved = resolve_rule_set(store, context(country="US"))
        assert resolved["zip"] == [RuleSpec("alphaNum"), RuleSpec("zipCode")]

    def test_registration_order_kept(self):
        """Test several conditionals apply in registration order."""
        store = (
            RuleStore()
            .add_conditional({"a": 1}, {"x": "first"})
            .add_conditional({}, {"x": "second"})
            .add_conditional({"a": 2}, {"x": "never"}, {"x": "third"})
        )
        resolved = resolve_rule_set(store, context(a="1"))
        assert [spec.name for spec in resolved["x"]] == ["first", "second", "third"]

    def test_store_not_modified(self):
        """Test resolution does not leak into the store."""
        store = (
            RuleStore()
            .add_rule("zip", "required")
            .add_conditional({}, {"zip": "zipCode"})
        )
        resolve_rule_set(store, context())
        resolve_rule_set(store, context())
        assert store.rules == {"zip": [RuleSpec("required")]}

    def test_deterministic(self):
        """Test same store and context give the same result."""
        store = (
            RuleStore()
            .add_rule("email", "email")
            .add_conditional({"country": "US"}, {"zip": "required"}, {"zip": "alphaNum"})
        )
        ctx = context(country="FR")
        assert resolve_rule_set(store, ctx) == resolve_rule_set(store, ctx)

    def test_evaluated_against_live_values(self):
        """Test each run sees the values of its own snapshot."""
        store = RuleStore().add_conditional({"country": "US"}, {"zip": "required"})
        assert "zip" in resolve_rule_set(store, context(country="US"))
        assert "zip" not in resolve_rule_set(store, context(country="FR"))

    def test_branch_rules_not_modified(self):
        """Test extending a resolved set leaves the conditional branch intact."""
        store = RuleStore().add_conditional({}, {"zip": "required"})
        resolved = resolve_rule_set(store, context())
        resolved["zip"].append(RuleSpec("zipCode"))

        assert store.conditional_rules[0].then_rules == {"zip": (RuleSpec("required"),)}
        assert resolve_rule_set(store, context()) == {"zip": [RuleSpec("required")]}
