from __future__ import annotations

"""
Rule: label-has-associated-control.

A label (native or aliased) must have accessible text and be associated
with a control according to the configured `assert` policy.

Options:
    labelComponents: Component patterns treated as labels.
    controlComponents: Component patterns treated as form controls.
    labelAttributes: Extra attributes that supply label text.
    assert: One of htmlFor, nesting, either, both.
    depth: How deep to search below the label.
"""

from typing import Any, Dict, List

from markup_a11y.core.analysis.alias_resolver import resolve_tag
from markup_a11y.core.analysis.label_matcher import evaluate
from markup_a11y.core.rules.base import RuleContext, prepare_context, report
from markup_a11y.domain.constants import DEFAULT_LABEL_DEPTH
from markup_a11y.domain.markup_models import ElementNode
from markup_a11y.domain.results import AssociationPolicy, Violation

RULE_ID = "label-has-associated-control"

MESSAGES = {
    "accessibleLabel": "A form label must have accessible text.",
    "htmlFor": "A form label must have a valid htmlFor attribute.",
    "nesting": "A form label must have an associated control as a descendant.",
    "either": "A form label must either have a valid htmlFor attribute or a control as a descendant.",
    "both": "A form label must have a valid htmlFor attribute and a control as a descendant.",
}

DEFAULT_OPTIONS: Dict[str, Any] = {
    "labelComponents": [],
    "controlComponents": [],
    "labelAttributes": [],
    "assert": AssociationPolicy.EITHER.value,
    "depth": DEFAULT_LABEL_DEPTH,
}

OPTION_CHOICES = {
    "assert": tuple(p.value for p in AssociationPolicy),
}


def prepare(settings: Any = None, options: Any = None, *, strict: bool = False) -> RuleContext:
    # Label patterns are declared before control patterns
    return prepare_context(
        RULE_ID, settings, options, DEFAULT_OPTIONS,
        choices=OPTION_CHOICES,
        component_targets=lambda opts: [
            (opts["labelComponents"], "label"),
            (opts["controlComponents"], "input"),
        ],
        strict=strict,
    )


def check(node: ElementNode, context: RuleContext) -> List[Violation]:
    if resolve_tag(node.tag_name, context.config) != "label":
        return []

    verdict = evaluate(
        node,
        context.config,
        AssociationPolicy(context.options["assert"]),
        context.options["depth"],
        context.options["labelAttributes"],
    )
    if not verdict.is_failure:
        return []
    return report(context, node, verdict.value, MESSAGES)
