"""Phone number rule (``phone``).

Accepts an optional leading ``+`` followed by digits, spaces, dots, dashes
and parentheses, with 7 to 15 digits in total.
"""

import re

import voluptuous as vol

from ...const import DEFAULT_LANGUAGE
from ...domain.interfaces.i_rule_registry import IRuleRegistry
from ..engine.builtin_rules import passes

RULE_NAME = "phone"

MESSAGES = {
    "en": "{field} is not a valid phone number",
    "fr": "{field} n'est pas un numéro de téléphone valide",
    "de": "{field} ist keine gültige Telefonnummer",
}

MIN_DIGITS = 7
MAX_DIGITS = 15

_PHONE = vol.Match(r"^\+?[0-9 ().-]+$")


def check(field, value, params, fields) -> bool:
    if not passes(_PHONE, value):
        return False
    digits = re.sub(r"\D", "", value)
    return MIN_DIGITS <= len(digits) <= MAX_DIGITS


def setup(registry: IRuleRegistry) -> None:
    """Register the rule with the message of the registry's language."""
    message = MESSAGES.get(registry.language, MESSAGES[DEFAULT_LANGUAGE])
    registry.add_rule(RULE_NAME, check, message)
