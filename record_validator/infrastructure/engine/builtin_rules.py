"""Built-in rule checks of the default engine.

Each check has the signature ``check(field, value, params, fields) -> bool``.
Format and range checks delegate to voluptuous validators.
"""

from __future__ import annotations

import re
from typing import Any, Callable

import voluptuous as vol

from ...domain.helpers.comparison import is_numeric, loose_equals, to_number
from ...domain.value_objects.rule_spec import RuleCheck

_ACCEPTED_VALUES = ("yes", "on", 1, "1", True)
_BOOLEAN_VALUES = (True, False, 0, 1, "0", "1")
_INTEGER = vol.Match(r"^[-+]?\d+$")
_ALPHA = vol.Match(r"^[a-zA-Z]+$")
_ALPHA_NUM = vol.Match(r"^[a-zA-Z0-9]+$")
_SLUG = vol.Match(re.compile(r"^[-a-z0-9_]+$", re.IGNORECASE))


def passes(validator: Callable[[Any], Any], value: Any) -> bool:
    """Run a voluptuous validator and report whether it accepted the value."""
    try:
        validator(value)
    except (vol.Invalid, TypeError, ValueError):
        return False
    return True


def is_empty(value: Any) -> bool:
    """Check if a value counts as not provided."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def is_missing(value: Any) -> bool:
    """Check if a value is absent: None, "" or an empty list.

    Unlike is_empty, whitespace is a value here.
    """
    return value is None or (isinstance(value, (str, list, tuple)) and len(value) == 0)


def _number_in_range(value: Any, minimum=None, maximum=None) -> bool:
    if to_number(value) is None:
        return False
    return passes(
        vol.All(vol.Coerce(float), vol.Range(min=minimum, max=maximum)), value
    )


def _string_length(value: Any, minimum=None, maximum=None) -> bool:
    return isinstance(value, str) and passes(vol.Length(min=minimum, max=maximum), value)


def check_required(field, value, params, fields) -> bool:
    return not is_empty(value)


def check_equals(field, value, params, fields) -> bool:
    return params[0] in fields and loose_equals(value, fields[params[0]])


def check_different(field, value, params, fields) -> bool:
    return params[0] in fields and not loose_equals(value, fields[params[0]])


def check_accepted(field, value, params, fields) -> bool:
    return value in _ACCEPTED_VALUES


def check_numeric(field, value, params, fields) -> bool:
    return is_numeric(value)


def check_integer(field, value, params, fields) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and passes(_INTEGER, value.strip())


def check_boolean(field, value, params, fields) -> bool:
    return value in _BOOLEAN_VALUES


def check_length(field, value, params, fields) -> bool:
    if len(params) > 1:
        return _string_length(value, int(params[0]), int(params[1]))
    return _string_length(value, int(params[0]), int(params[0]))


def check_length_between(field, value, params, fields) -> bool:
    return _string_length(value, int(params[0]), int(params[1]))


def check_length_min(field, value, params, fields) -> bool:
    return _string_length(value, minimum=int(params[0]))


def check_length_max(field, value, params, fields) -> bool:
    return _string_length(value, maximum=int(params[0]))


def check_min(field, value, params, fields) -> bool:
    return _number_in_range(value, minimum=float(params[0]))


def check_max(field, value, params, fields) -> bool:
    return _number_in_range(value, maximum=float(params[0]))


def check_between(field, value, params, fields) -> bool:
    return _number_in_range(value, float(params[0]), float(params[1]))


def check_in(field, value, params, fields) -> bool:
    return any(loose_equals(value, allowed) for allowed in params[0])


def check_not_in(field, value, params, fields) -> bool:
    return not check_in(field, value, params, fields)


def check_email(field, value, params, fields) -> bool:
    return isinstance(value, str) and passes(vol.Email(), value)


def check_url(field, value, params, fields) -> bool:
    return isinstance(value, str) and passes(vol.Url(), value)


def check_alpha(field, value, params, fields) -> bool:
    return passes(_ALPHA, value)


def check_alpha_num(field, value, params, fields) -> bool:
    return passes(_ALPHA_NUM, value)


def check_slug(field, value, params, fields) -> bool:
    return passes(_SLUG, value)


def check_regex(field, value, params, fields) -> bool:
    # Pattern is matched from the start of the value
    return passes(vol.Match(params[0]), value)


BUILTIN_RULES: dict[str, RuleCheck] = {
    "required": check_required,
    "equals": check_equals,
    "different": check_different,
    "accepted": check_accepted,
    "numeric": check_numeric,
    "integer": check_integer,
    "boolean": check_boolean,
    "length": check_length,
    "lengthBetween": check_length_between,
    "lengthMin": check_length_min,
    "lengthMax": check_length_max,
    "min": check_min,
    "max": check_max,
    "between": check_between,
    "in": check_in,
    "notIn": check_not_in,
    "email": check_email,
    "url": check_url,
    "alpha": check_alpha,
    "alphaNum": check_alpha_num,
    "slug": check_slug,
    "regex": check_regex,
}
