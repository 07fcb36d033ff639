from __future__ import annotations

"""
Rule: click-events-have-key-events.

Visible, non-interactive native elements with a click handler need at
least one keyboard handler. Custom components with no native alias are
not checked.
"""

from typing import Any, List

from markup_a11y.core.analysis.alias_resolver import resolve_tag
from markup_a11y.core.analysis.props import (
    get_any_prop,
    get_prop,
    is_hidden_from_screen_reader,
    literal_string,
)
from markup_a11y.core.rules.base import RuleContext, prepare_context, report
from markup_a11y.domain.constants import INTERACTIVE_TAGS, LINK_TAGS, PRESENTATION_ROLES
from markup_a11y.domain.markup_models import ElementNode
from markup_a11y.domain.results import Violation

RULE_ID = "click-events-have-key-events"

MESSAGES = {
    "error": "Visible, non-interactive elements with click handlers must have at least one keyboard listener.",
}

KEY_HANDLERS = ("onKeyDown", "onKeyUp", "onKeyPress")

DEFAULT_OPTIONS: dict = {}


def prepare(settings: Any = None, options: Any = None, *, strict: bool = False) -> RuleContext:
    return prepare_context(RULE_ID, settings, options, DEFAULT_OPTIONS, strict=strict)


def check(node: ElementNode, context: RuleContext) -> List[Violation]:
    if get_prop(node, "onClick") is None:
        return []

    tag = resolve_tag(node.tag_name, context.config)
    if tag is None:
        return []
    if is_hidden_from_screen_reader(node, context.config):
        return []

    role = literal_string(get_prop(node, "role"))
    if role is not None and role.strip().lower() in PRESENTATION_ROLES:
        return []
    if is_interactive(node, tag):
        return []
    if get_any_prop(node, KEY_HANDLERS) is not None:
        return []

    return report(context, node, "error", MESSAGES)


def is_interactive(node: ElementNode, tag: str) -> bool:
    """Check whether a native element is focusable and operable by itself."""
    if tag in INTERACTIVE_TAGS:
        return True
    return tag in LINK_TAGS and get_prop(node, "href") is not None
