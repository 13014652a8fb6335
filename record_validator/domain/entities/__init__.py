"""Domain entities."""

from .rule_store import RuleStore

__all__ = ["RuleStore"]
