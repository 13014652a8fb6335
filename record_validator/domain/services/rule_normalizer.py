"""Rule expression normalization.

Callers declare rules in several shapes. All of them are turned into an
ordered list of RuleSpec before storage:

    "required"                                  -> [required]
    check_function                              -> [check_function]
    ["required", ["email"]]                     -> [required, email]
    ["lengthBetween", 4, 10]                    -> [lengthBetween(4, 10)]
    [["lengthBetween", 4, 10, {"message": m}]]  -> [lengthBetween(4, 10) m]
    {"rule": "min", "params": [18]}             -> [min(18)]

An outer list is a list of rules, except when its head is a rule name and
its tail holds a value that cannot itself be a rule (a number, None, a
message entry). Rules whose parameters are strings or lists must therefore
be wrapped in their own list: ``[["in", ["a", "b"]]]``.

Rule names are not checked here; the engine reports unknown names.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ...const import MESSAGE_KEY
from ..value_objects.rule_spec import FieldRules, RuleSet, RuleSpec

_LOGGER = logging.getLogger(__name__)

RULE_KEY = "rule"
PARAMS_KEY = "params"


def _is_identifier(item: Any) -> bool:
    return isinstance(item, str) or (callable(item) and not isinstance(item, type))


def _is_message_entry(item: Any) -> bool:
    return isinstance(item, Mapping) and MESSAGE_KEY in item and RULE_KEY not in item


def _could_be_rule(item: Any) -> bool:
    """Check if an element of a list may stand for a whole rule."""
    if isinstance(item, (RuleSpec, list, tuple)):
        return True
    if isinstance(item, Mapping):
        return RULE_KEY in item
    return _is_identifier(item)


def _is_single_rule(items: list | tuple) -> bool:
    if not items or not _is_identifier(items[0]):
        return False
    return any(not _could_be_rule(item) for item in items[1:])


def _spec_from_sequence(items: list | tuple) -> RuleSpec:
    """Build a RuleSpec from ``[name, *params, {"message": ...}]``."""
    name, *params = items
    message = None
    if params and _is_message_entry(params[-1]):
        message = params.pop()[MESSAGE_KEY]
    return RuleSpec(name, tuple(params), message)


def _spec_from_mapping(entry: Mapping[str, Any]) -> RuleSpec:
    params = entry.get(PARAMS_KEY, ())
    if not isinstance(params, (list, tuple)):
        params = (params,)
    return RuleSpec(entry[RULE_KEY], tuple(params), entry.get(MESSAGE_KEY))


def _normalize_one(item: Any) -> RuleSpec:
    """Normalize an element that stands for exactly one rule."""
    if isinstance(item, RuleSpec):
        return item
    if isinstance(item, Mapping):
        return _spec_from_mapping(item)
    if isinstance(item, (list, tuple)):
        return _spec_from_sequence(item)
    return RuleSpec(item)


def normalize_rules(expression: Any) -> FieldRules:
    """Convert a rule expression into an ordered list of RuleSpec.

    Already-normalized input comes back unchanged, so normalizing twice is
    the same as normalizing once.

    Args:
        expression: Rule name, callable, RuleSpec, rule mapping, or a list
            describing one or several rules

    Returns:
        New list of RuleSpec preserving declaration order

    Examples:
        >>> [str(spec) for spec in normalize_rules(["required", ["email"]])]
        ['required()', 'email()']
        >>> normalize_rules(["lengthBetween", 4, 10])[0].params
        (4, 10)
    """
    if expression is None:
        return []
    if isinstance(expression, (list, tuple)):
        if _is_single_rule(expression):
            return [_spec_from_sequence(expression)]
        return [_normalize_one(item) for item in expression]
    return [_normalize_one(expression)]


def normalize_rule_set(rules: Mapping[str, Any] | None) -> RuleSet:
    """Normalize a ``{field: expression}`` mapping into a RuleSet.

    Example:
        >>> rule_set = normalize_rule_set({"zip": ["required"]})
        >>> rule_set["zip"]
        [RuleSpec(name='required', params=(), message=None)]
    """
    rule_set: RuleSet = {}
    for field_name, expression in (rules or {}).items():
        rule_set.setdefault(field_name, []).extend(normalize_rules(expression))
    _LOGGER.debug("Normalized rules for %d field(s)", len(rule_set))
    return rule_set
