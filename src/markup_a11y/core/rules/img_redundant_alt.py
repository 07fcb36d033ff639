from __future__ import annotations

"""
Rule: img-redundant-alt.

Image alt text should not repeat that it is an image: screen readers
already announce the element as one.
"""

import re
from typing import Any, Dict, Iterable, List, Optional

from markup_a11y.core.analysis.alias_resolver import resolve_tag
from markup_a11y.core.analysis.props import get_prop, is_aria_hidden, literal_string
from markup_a11y.core.rules.base import RuleContext, prepare_context, report
from markup_a11y.domain.markup_models import ElementNode, UnresolvedExpression
from markup_a11y.domain.results import Violation

RULE_ID = "img-redundant-alt"

MESSAGES = {
    "error": (
        "Redundant alt attribute. Screen-readers already announce `img` tags as an image. "
        "You don’t need to use the words `image`, `photo,` or `picture` "
        "(or any specified custom words) in the alt prop."
    ),
}

REDUNDANT_WORDS = ("image", "photo", "picture")

DEFAULT_OPTIONS: Dict[str, Any] = {
    "components": [],
    "words": [],
}

_ASCII = re.compile(r"[\x20-\x7F]")


def prepare(settings: Any = None, options: Any = None, *, strict: bool = False) -> RuleContext:
    return prepare_context(
        RULE_ID, settings, options, DEFAULT_OPTIONS,
        component_targets=lambda opts: [(opts["components"], "img")],
        strict=strict,
    )


def check(node: ElementNode, context: RuleContext) -> List[Violation]:
    if resolve_tag(node.tag_name, context.config) != "img":
        return []
    if is_aria_hidden(node):
        return []

    prop = get_prop(node, "alt")
    alt = literal_string(prop)
    if alt is None and prop is not None and isinstance(prop.value, UnresolvedExpression):
        alt = template_static_text(prop.value.source)
    if alt is None:
        return []

    words = REDUNDANT_WORDS + tuple(context.options["words"])
    if contains_redundant_word(alt, words):
        return report(context, node, "error", MESSAGES)
    return []


def contains_redundant_word(value: str, words: Iterable[str]) -> bool:
    """
    Check alt text for redundant words, case-insensitively.

    Text with ASCII characters is compared whole word by whole word; other
    scripts, which may not separate words with spaces, by substring.
    """
    lowered = [w.lower() for w in words]
    if _ASCII.search(value):
        return any(token.lower() in lowered for token in value.split())
    folded = value.lower()
    return any(w in folded for w in lowered)


def template_static_text(source: str) -> Optional[str]:
    """
    Return the literal parts of a template literal source.

    Each `${...}` substitution is replaced by a space, so a substituted
    name never reads as a redundant word. Returns None for any other
    expression.
    """
    source = source.strip()
    if len(source) < 2 or source[0] != "`" or source[-1] != "`":
        return None

    body = source[1:-1]
    parts: List[str] = []
    depth = 0
    i = 0
    while i < len(body):
        if depth == 0 and body.startswith("${", i):
            parts.append(" ")
            depth = 1
            i += 2
            continue
        char = body[i]
        if depth == 0:
            parts.append(char)
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        i += 1
    return "".join(parts)
