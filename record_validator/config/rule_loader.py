"""Declarative rule files.

Rules can be kept in YAML next to the model they validate:

    version: "1.0"
    rules:
      email: [required, [email]]
    conditional:
      - when: {country: US}
        then: {zip: [required]}
        else: {}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from ..const import RULE_CONFIG_VERSIONS
from ..domain.exceptions import RuleConfigError

_LOGGER = logging.getLogger(__name__)

CONF_VERSION = "version"
CONF_RULES = "rules"
CONF_CONDITIONAL = "conditional"
CONF_WHEN = "when"
CONF_THEN = "then"
CONF_ELSE = "else"

RULE_EXPRESSION = vol.Any(str, list, vol.Schema({str: object}))
SCALAR = vol.Any(None, bool, int, float, str)
RULES_SCHEMA = vol.Schema({str: RULE_EXPRESSION})

CONDITIONAL_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_WHEN): vol.Schema({str: SCALAR}),
        vol.Required(CONF_THEN): RULES_SCHEMA,
        vol.Optional(CONF_ELSE, default=dict): RULES_SCHEMA,
    }
)

RULE_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_VERSION): vol.All(vol.Coerce(str), vol.In(RULE_CONFIG_VERSIONS)),
        vol.Optional(CONF_RULES, default=dict): RULES_SCHEMA,
        vol.Optional(CONF_CONDITIONAL, default=list): [CONDITIONAL_SCHEMA],
    }
)


def validate_rule_config(config: Any) -> dict[str, Any]:
    """Check a rule mapping against the schema.

    Args:
        config: Parsed rule file content

    Returns:
        Validated mapping with defaults applied

    Raises:
        RuleConfigError: If the mapping does not match the schema
    """
    if not config:
        raise RuleConfigError("Rule configuration is empty")

    try:
        return RULE_CONFIG_SCHEMA(config)
    except vol.Invalid as err:
        raise RuleConfigError(f"Invalid rule configuration: {err}") from err


def load_rule_config(path: str | Path) -> dict[str, Any]:
    """Load and validate a YAML rule file.

    Args:
        path: Path of the rule file

    Returns:
        Validated configuration dict

    Raises:
        FileNotFoundError: If the file does not exist
        RuleConfigError: If the YAML is invalid or fails the schema
    """
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Rule file not found: {config_file}")

    try:
        config = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise RuleConfigError(f"Invalid YAML in {config_file}: {err}") from err

    config = validate_rule_config(config)
    _LOGGER.debug(
        "Loaded %d field rule(s) and %d conditional rule(s) from %s",
        len(config[CONF_RULES]),
        len(config[CONF_CONDITIONAL]),
        config_file,
    )
    return config


def apply_rule_config(validator, config: dict[str, Any]):
    """Register the rules of a validated configuration on a validator.

    Args:
        validator: Validator (or RuleStore) to register on
        config: Output of load_rule_config / validate_rule_config

    Returns:
        The validator
    """
    validator.add_rules(config.get(CONF_RULES, {}))
    for conditional in config.get(CONF_CONDITIONAL, []):
        validator.add_conditional(
            conditional[CONF_WHEN],
            conditional[CONF_THEN],
            conditional.get(CONF_ELSE, {}),
        )
    return validator