"""Constants for the record validator.

This file contains only the constants shared across layers. Per-language
message templates live with the engine adapter.
"""

from __future__ import annotations

# Hook the validator registers itself on
HOOK_VALIDATE = "validate"

# Attribute used for the record -> validator back-reference
VALIDATOR_ATTRIBUTE = "validator"

# Named entry carrying a custom failure message inside a rule expression
MESSAGE_KEY = "message"

# Engine languages
DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "fr", "de")

# Rules that disable empty-value skipping for a field
EMPTY_VALUE_RULES = ("required", "accepted")

# Fallback template for rules registered without a message
DEFAULT_RULE_MESSAGE = "{field} is invalid"

# Supported declarative rule file versions
RULE_CONFIG_VERSIONS = ("1.0",)


def field_label(field: str) -> str:
    """Return the human label for a field name.

    Args:
        field: Field name as stored on the record

    Returns:
        Label with underscores replaced and words capitalised

    Example:
        >>> field_label("zip_code")
        'Zip Code'
    """
    return " ".join(word[:1].upper() + word[1:] for word in field.replace("_", " ").split())
