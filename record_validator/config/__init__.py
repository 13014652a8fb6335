"""Declarative rule configuration."""

from .rule_loader import apply_rule_config, load_rule_config, validate_rule_config

__all__ = ["apply_rule_config", "load_rule_config", "validate_rule_config"]
