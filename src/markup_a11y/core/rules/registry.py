from __future__ import annotations

"""
Rule Registry.

Central lookup of the available rules and the entry points used by hosts:
run one rule on one element, or run a set of rules over a whole tree.
"""

import logging
from types import ModuleType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from markup_a11y.core.rules import (
    aria_props,
    click_events_have_key_events,
    heading_has_content,
    img_redundant_alt,
    label_has_associated_control,
)
from markup_a11y.core.rules.base import RuleContext
from markup_a11y.domain.markup_models import ElementNode, MarkupNode, iter_elements
from markup_a11y.domain.results import Violation

logger = logging.getLogger(__name__)

RULES: Dict[str, ModuleType] = {
    module.RULE_ID: module
    for module in (
        aria_props,
        click_events_have_key_events,
        heading_has_content,
        img_redundant_alt,
        label_has_associated_control,
    )
}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_rule(rule_id: str) -> ModuleType:
    """
    Fetch a rule module by identifier.

    Raises:
        KeyError: If no rule has that identifier.
    """
    try:
        return RULES[rule_id]
    except KeyError:
        raise KeyError(f"Unknown rule: {rule_id}") from None


def prepare_rule(rule_id: str, settings: Any = None, options: Any = None, *, strict: bool = False) -> RuleContext:
    """Validate options and build the alias configuration for a rule."""
    context = get_rule(rule_id).prepare(settings, options, strict=strict)
    for warning in context.warnings:
        logger.warning(f"[{rule_id}] {warning}")
    return context


def run_rule(
        rule_id: str,
        node: ElementNode,
        settings: Any = None,
        options: Any = None,
) -> List[Violation]:
    """
    Run a single rule on a single element.

    Args:
        rule_id: Rule identifier.
        node: Element to check.
        settings: Raw project-wide settings.
        options: Raw options for this rule.

    Returns:
        List[Violation]: Violations found on the element.
    """
    rule = get_rule(rule_id)
    return rule.check(node, rule.prepare(settings, options))


def check_tree(
        root: MarkupNode,
        rule_ids: Optional[Iterable[str]] = None,
        settings: Any = None,
        options_by_rule: Optional[Mapping[str, Any]] = None,
) -> List[Violation]:
    """
    Run rules over every element of a tree.

    Contexts are prepared once per rule; configuration warnings are logged.

    Args:
        root: Root of the tree.
        rule_ids: Rules to run. Defaults to all registered rules.
        settings: Raw project-wide settings shared by all rules.
        options_by_rule: Raw options keyed by rule identifier.

    Returns:
        List[Violation]: Violations in document order, then rule order.
    """
    options_by_rule = options_by_rule or {}
    selected = list(rule_ids) if rule_ids is not None else sorted(RULES)
    contexts = [
        (get_rule(rule_id), prepare_rule(rule_id, settings, options_by_rule.get(rule_id)))
        for rule_id in selected
    ]

    violations: List[Violation] = []
    visited = 0
    for element in iter_elements(root):
        visited += 1
        for rule, context in contexts:
            violations.extend(rule.check(element, context))

    logger.debug(f"Checked {visited} elements with {len(contexts)} rules: {len(violations)} violations")
    return violations
