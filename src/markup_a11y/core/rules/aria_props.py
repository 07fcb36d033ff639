from __future__ import annotations

"""
Rule: aria-props.

Every `aria-*` attribute must be a valid ARIA property. Invalid names get
the closest valid names as suggestions.
"""

from typing import Any, List

from markup_a11y.core.analysis.suggestion import suggest
from markup_a11y.core.rules.base import RuleContext, prepare_context, report
from markup_a11y.domain.markup_models import ElementNode
from markup_a11y.domain.results import Violation
from markup_a11y.domain.vocabulary import ARIA_VOCABULARY

RULE_ID = "aria-props"

MESSAGES = {
    "error": "{name}: This attribute is an invalid ARIA attribute.",
    "error-with-suggestions": (
        "{name}: This attribute is an invalid ARIA attribute. "
        "Did you mean to use {suggestion_text}?"
    ),
}

DEFAULT_OPTIONS: dict = {}


def prepare(settings: Any = None, options: Any = None, *, strict: bool = False) -> RuleContext:
    return prepare_context(RULE_ID, settings, options, DEFAULT_OPTIONS, strict=strict)


def check(node: ElementNode, context: RuleContext) -> List[Violation]:
    """Report each invalid `aria-*` attribute on the element."""
    violations: List[Violation] = []
    for attr in node.attributes:
        if attr.is_spread or not attr.name.lower().startswith("aria-"):
            continue
        if attr.name in ARIA_VOCABULARY:
            continue

        suggestions = suggest(attr.name, ARIA_VOCABULARY)
        if suggestions:
            violations += report(
                context, node, "error-with-suggestions", MESSAGES,
                name=attr.name, suggestions=suggestions, suggestion_text=", ".join(suggestions),
            )
        else:
            violations += report(context, node, "error", MESSAGES, name=attr.name)
    return violations
