"""ZIP code rule (``zipCode``): five digits with optional ZIP+4 suffix."""

import voluptuous as vol

from ...const import DEFAULT_LANGUAGE
from ...domain.interfaces.i_rule_registry import IRuleRegistry
from ..engine.builtin_rules import passes

RULE_NAME = "zipCode"

MESSAGES = {
    "en": "{field} is not a valid ZIP code",
    "fr": "{field} n'est pas un code ZIP valide",
    "de": "{field} ist keine gültige Postleitzahl",
}

_ZIP_CODE = vol.Match(r"^\d{5}(-\d{4})?$")


def check(field, value, params, fields) -> bool:
    if isinstance(value, int) and not isinstance(value, bool):
        value = f"{value:05d}"
    return passes(_ZIP_CODE, value)


def setup(registry: IRuleRegistry) -> None:
    """Register the rule with the message of the registry's language."""
    message = MESSAGES.get(registry.language, MESSAGES[DEFAULT_LANGUAGE])
    registry.add_rule(RULE_NAME, check, message)
