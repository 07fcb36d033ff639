from __future__ import annotations

from markup_a11y.core.analysis.alias_resolver import resolve_attribute_names, resolve_tag
from markup_a11y.core.analysis.content_walker import has_accessible_content, scan_accessible_content
from markup_a11y.core.analysis.glob_matcher import matches
from markup_a11y.core.analysis.label_matcher import evaluate
from markup_a11y.core.analysis.suggestion import suggest
from markup_a11y.core.rules.registry import RULES, check_tree, run_rule
from markup_a11y.domain.alias_models import AliasConfig, AliasLayer, AttributeMap, ComponentMap
from markup_a11y.domain.markup_models import (
    Attribute,
    ElementNode,
    ExpressionNode,
    LiteralBoolean,
    LiteralString,
    Spread,
    TextNode,
    UnresolvedExpression,
    el,
    node_from_dict,
)
from markup_a11y.domain.results import AssociationPolicy, ContentVerdict, LabelVerdict, Violation
from markup_a11y.domain.vocabulary import ARIA_VOCABULARY, Vocabulary

__version__ = "0.1.0"

__all__ = [
    "ARIA_VOCABULARY",
    "AliasConfig",
    "AliasLayer",
    "AssociationPolicy",
    "Attribute",
    "AttributeMap",
    "ComponentMap",
    "ContentVerdict",
    "ElementNode",
    "ExpressionNode",
    "LabelVerdict",
    "LiteralBoolean",
    "LiteralString",
    "RULES",
    "Spread",
    "TextNode",
    "UnresolvedExpression",
    "Violation",
    "Vocabulary",
    "check_tree",
    "el",
    "evaluate",
    "has_accessible_content",
    "matches",
    "node_from_dict",
    "resolve_attribute_names",
    "resolve_tag",
    "run_rule",
    "scan_accessible_content",
    "suggest",
]
