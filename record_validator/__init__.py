"""Conditional rule composition for record validation.

Declare per-field rules (optionally conditional on other field values) on a
Validator bound to a record. On every ``validate`` hook the applicable rules
are merged for the record's current state, handed to a validation engine, and
the engine's output is reduced to one message per failing field.

Example:
    >>> validator = Validator(record)
    >>> validator.add_rule("email", ["required", ["email"]])
    >>> validator.add_conditional({"country": "US"}, {"zip": ["required"]})
    >>> errors = record.validator.validate(record)
"""

from .config.rule_loader import apply_rule_config, load_rule_config
from .container import ValidatorContainer, create_container, get_default_container
from .domain.entities import RuleStore
from .domain.exceptions import (
    ConfigurationError,
    RecordValidatorError,
    RuleConfigError,
    RuleDiscoveryError,
    UnknownRuleError,
)
from .domain.value_objects import Condition, ConditionalRule, RuleSpec, ValidationContext
from .validator import Validator

__version__ = "1.0.0"

__all__ = [
    "Condition",
    "ConditionalRule",
    "ConfigurationError",
    "RecordValidatorError",
    "RuleConfigError",
    "RuleDiscoveryError",
    "RuleSpec",
    "RuleStore",
    "UnknownRuleError",
    "ValidationContext",
    "Validator",
    "ValidatorContainer",
    "apply_rule_config",
    "create_container",
    "get_default_container",
    "load_rule_config",
]
