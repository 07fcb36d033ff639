from __future__ import annotations

"""
Label/Control Association Matcher.

Evaluates a label element under one of four association policies. Two
signals are computed independently, a pointer association (a `for`-style
attribute or a direct accessible name) and a nested form control, and the
policy decides which of them are required. A label without discoverable
text always fails first; a label whose text depends on unknown custom
components is reported as indeterminate.
"""

import logging
from typing import Iterable, List, Tuple

from markup_a11y.core.analysis.alias_resolver import resolve_attribute_names, resolve_tag
from markup_a11y.core.analysis.content_walker import scan_accessible_content
from markup_a11y.core.analysis.props import get_prop, is_hidden_input, may_supply_text
from markup_a11y.domain.alias_models import AliasConfig
from markup_a11y.domain.constants import CONTROL_TAGS, DIRECT_NAME_ATTRIBUTES, ROLE_FOR
from markup_a11y.domain.markup_models import ElementNode
from markup_a11y.domain.results import (
    POLICY_FAILURES,
    AssociationPolicy,
    ContentVerdict,
    LabelVerdict,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def evaluate(
        label: ElementNode,
        config: AliasConfig,
        policy: AssociationPolicy,
        depth_budget: int,
        label_attributes: Iterable[str] = (),
) -> LabelVerdict:
    """
    Decide whether a label is properly associated with a control.

    Args:
        label: The label element (native or aliased).
        config: Alias configuration.
        policy: Required association.
        depth_budget: Deepest level searched below the label (label is 0).
        label_attributes: Extra attribute names that supply label text.

    Returns:
        LabelVerdict: PASS, INDETERMINATE or the failure kind.
    """
    policy = AssociationPolicy(policy)
    text = scan_accessible_content(label, config, depth_budget, label_attributes)

    if text is ContentVerdict.ABSENT:
        verdict = LabelVerdict.FAIL_ACCESSIBLE_LABEL
    elif text is ContentVerdict.INDETERMINATE:
        verdict = LabelVerdict.INDETERMINATE
    else:
        pointer = has_pointer_association(label, config)
        nested = has_nested_control(label, config, depth_budget)
        verdict = _apply_policy(policy, pointer, nested)

    logger.debug(f"Label <{label.tag_name}> evaluated as {verdict.value} under '{policy.value}'")
    return verdict


def has_pointer_association(label: ElementNode, config: AliasConfig) -> bool:
    """
    Check whether the label points at its control or names itself directly.

    Args:
        label: The label element.
        config: Alias configuration, consulted for the `for` role names.

    Returns:
        bool: True for a filled `for`-role attribute or a filled
              `aria-label` / `aria-labelledby`.
    """
    names = resolve_attribute_names(ROLE_FOR, config) + DIRECT_NAME_ATTRIBUTES
    for name in names:
        attr = get_prop(label, name)
        if attr is not None and may_supply_text(attr.value):
            return True
    return False


def has_nested_control(label: ElementNode, config: AliasConfig, depth_budget: int) -> bool:
    """
    Search the label's descendants for a form control.

    Args:
        label: The label element (depth 0, never a match itself).
        config: Alias configuration, used to recognize aliased controls.
        depth_budget: Deepest level searched.

    Returns:
        bool: True if a native or aliased control (other than a hidden
              input) is found within the budget.
    """
    worklist: List[Tuple[ElementNode, int]] = [(label, 0)]
    while worklist:
        current, depth = worklist.pop()
        if depth >= depth_budget:
            continue
        for child in current.children:
            if not isinstance(child, ElementNode):
                continue
            if resolve_tag(child.tag_name, config) in CONTROL_TAGS and not is_hidden_input(child, config):
                return True
            worklist.append((child, depth + 1))
    return False


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _apply_policy(policy: AssociationPolicy, pointer: bool, nested: bool) -> LabelVerdict:
    if policy is AssociationPolicy.HTML_FOR:
        ok = pointer
    elif policy is AssociationPolicy.NESTING:
        ok = nested
    elif policy is AssociationPolicy.EITHER:
        ok = pointer or nested
    else:
        ok = pointer and nested
    return LabelVerdict.PASS if ok else POLICY_FAILURES[policy]
