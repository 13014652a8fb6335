"""Resolution of the effective rule set for one validation run."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..helpers.rule_sets import count_rules, merge_rule_sets
from ..value_objects.rule_spec import RuleSet
from ..value_objects.validation_context import ValidationContext
from .condition_evaluator import evaluate_condition

if TYPE_CHECKING:
    from ..entities.rule_store import RuleStore

_LOGGER = logging.getLogger(__name__)


def resolve_rule_set(store: RuleStore, context: ValidationContext) -> RuleSet:
    """Merge unconditional and applicable conditional rules.

    Conditional rules are visited in registration order. Each contributes
    its then-branch or its else-branch, appended after the rules already
    collected for the same field.

    Args:
        store: Registered rules
        context: Snapshot the conditions are evaluated against

    Returns:
        New rule set; the store is not modified
    """
    branches = []
    for index, conditional in enumerate(store.conditional_rules):
        satisfied = evaluate_condition(conditional.condition, context)
        _LOGGER.debug(
            "Conditional rule #%d %s -> %s",
            index,
            conditional.condition,
            "then" if satisfied else "else",
        )
        branches.append(conditional.branch(satisfied))

    resolved = merge_rule_sets(store.rules, *branches)
    _LOGGER.debug(
        "Resolved %d rule(s) across %d field(s)", count_rules(resolved), len(resolved)
    )
    return resolved
