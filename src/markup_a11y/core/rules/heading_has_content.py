from __future__ import annotations

"""
Rule: heading-has-content.

Headings (`h1`-`h6` and components aliased to them) must have content a
screen reader can announce. Headings hidden from assistive technology are
not checked.
"""

from typing import Any, Dict, List

from markup_a11y.core.analysis.alias_resolver import resolve_tag
from markup_a11y.core.analysis.content_walker import has_accessible_content
from markup_a11y.core.analysis.props import is_hidden_from_screen_reader
from markup_a11y.core.rules.base import RuleContext, prepare_context, report
from markup_a11y.domain.constants import DEFAULT_HEADING_DEPTH, HEADING_TAGS
from markup_a11y.domain.markup_models import ElementNode
from markup_a11y.domain.results import Violation

RULE_ID = "heading-has-content"

MESSAGES = {
    "error": "Headings must have content and the content must be accessible by a screen reader.",
}

DEFAULT_OPTIONS: Dict[str, Any] = {
    "components": [],
    "depth": DEFAULT_HEADING_DEPTH,
}


def prepare(settings: Any = None, options: Any = None, *, strict: bool = False) -> RuleContext:
    return prepare_context(
        RULE_ID, settings, options, DEFAULT_OPTIONS,
        component_targets=lambda opts: [(opts["components"], "h1")],
        strict=strict,
    )


def check(node: ElementNode, context: RuleContext) -> List[Violation]:
    if resolve_tag(node.tag_name, context.config) not in HEADING_TAGS:
        return []
    if is_hidden_from_screen_reader(node, context.config):
        return []
    if has_accessible_content(node, context.config, context.options["depth"]):
        return []
    return report(context, node, "error", MESSAGES)
