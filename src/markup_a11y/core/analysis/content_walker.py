from __future__ import annotations

"""
Accessible Content Walker.

Decides whether an element exposes text that a screen reader would
announce: a labelling attribute, literal text, an expression that may
render something, or a descendant (within a depth budget) that does.
Unknown custom components make the answer indeterminate instead of
negative, since their rendered output cannot be seen statically.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from markup_a11y.core.analysis.alias_resolver import is_unknown_component, resolve_attribute_names
from markup_a11y.core.analysis.props import (
    has_spread,
    is_hidden_from_screen_reader,
    is_hidden_input,
    may_render_content,
    may_supply_text,
)
from markup_a11y.domain.alias_models import AliasConfig
from markup_a11y.domain.constants import ROLE_CHILDREN, ROLE_INNER_HTML, ROLE_LABEL
from markup_a11y.domain.markup_models import ElementNode, ExpressionNode, MarkupNode, TextNode
from markup_a11y.domain.results import ContentVerdict

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def has_accessible_content(
        node: MarkupNode,
        config: AliasConfig,
        depth_budget: int,
        label_attributes: Iterable[str] = (),
) -> bool:
    """
    Check whether a node may expose accessible text.

    Indeterminate results count as content so that callers never report a
    node whose content could not be established.

    Args:
        node: Root of the scan (depth 0).
        config: Alias configuration.
        depth_budget: Deepest level whose nodes may be inspected.
        label_attributes: Extra attribute names that supply a label.

    Returns:
        bool: False only when the absence of content is certain.
    """
    verdict = scan_accessible_content(node, config, depth_budget, label_attributes)
    return verdict is not ContentVerdict.ABSENT


def scan_accessible_content(
        node: MarkupNode,
        config: AliasConfig,
        depth_budget: int,
        label_attributes: Iterable[str] = (),
) -> ContentVerdict:
    """
    Scan a node and its descendants for accessible content.

    Uses an explicit (node, depth) worklist. A node at depth `d` always has
    its own attributes inspected; its children are inspected only while
    `d < depth_budget`. Descendants hidden from assistive technology are
    skipped with their whole subtree; the root's own `aria-hidden` is left
    to the caller.

    Args:
        node: Root of the scan (depth 0).
        config: Alias configuration.
        depth_budget: Deepest level whose nodes may be inspected.
        label_attributes: Extra attribute names that supply a label.

    Returns:
        ContentVerdict: PRESENT, ABSENT or INDETERMINATE.
    """
    if isinstance(node, TextNode):
        return ContentVerdict.PRESENT if node.text.strip() else ContentVerdict.ABSENT
    if isinstance(node, ExpressionNode):
        return ContentVerdict.PRESENT if may_render_content(node.value) else ContentVerdict.ABSENT

    if is_hidden_input(node, config):
        return ContentVerdict.ABSENT

    text_attributes = _text_attribute_names(config, label_attributes)
    indeterminate = False
    worklist: List[Tuple[ElementNode, int]] = [(node, 0)]

    while worklist:
        current, depth = worklist.pop()

        own = _own_verdict(current, text_attributes)
        if own is ContentVerdict.PRESENT:
            logger.debug(f"Accessible content found on <{current.tag_name}> at depth {depth}")
            return ContentVerdict.PRESENT
        if own is ContentVerdict.INDETERMINATE:
            indeterminate = True

        if depth >= depth_budget:
            continue

        for child in current.children:
            if isinstance(child, TextNode):
                if child.text.strip():
                    return ContentVerdict.PRESENT
            elif isinstance(child, ExpressionNode):
                if may_render_content(child.value):
                    return ContentVerdict.PRESENT
            elif isinstance(child, ElementNode):
                if is_hidden_from_screen_reader(child, config):
                    continue
                if is_unknown_component(child, config):
                    indeterminate = True
                worklist.append((child, depth + 1))

    return ContentVerdict.INDETERMINATE if indeterminate else ContentVerdict.ABSENT


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _text_attribute_names(config: AliasConfig, label_attributes: Iterable[str]) -> Tuple[str, ...]:
    """Collect every attribute name that can supply text for one scan."""
    names = resolve_attribute_names(ROLE_LABEL, config, label_attributes)
    names += resolve_attribute_names(ROLE_INNER_HTML, config)
    names += resolve_attribute_names(ROLE_CHILDREN, config)
    return tuple(dict.fromkeys(names))


def _own_verdict(node: ElementNode, text_attributes: Tuple[str, ...]) -> Optional[ContentVerdict]:
    """Judge an element by its own attributes only."""
    wanted = {name.lower() for name in text_attributes}
    for attr in node.attributes:
        if not attr.is_spread and attr.name.lower() in wanted and may_supply_text(attr.value):
            return ContentVerdict.PRESENT
    return ContentVerdict.INDETERMINATE if has_spread(node) else None
