from __future__ import annotations

"""
Attribute Inspection Helpers.

Read-only queries over an element's attributes. Every helper handles the
four attribute value kinds explicitly; unresolved expressions are treated
as inconclusive (possibly present) rather than as proof of absence.
"""

from typing import Iterable, Optional

from markup_a11y.core.analysis.alias_resolver import resolve_tag
from markup_a11y.domain.alias_models import AliasConfig
from markup_a11y.domain.markup_models import (
    Attribute,
    AttributeValue,
    ElementNode,
    LiteralBoolean,
    LiteralString,
    Spread,
    UnresolvedExpression,
)

# -----------------------------------------------------------------------------
# LOOKUP
# -----------------------------------------------------------------------------

def get_prop(node: ElementNode, name: str, ignore_case: bool = True) -> Optional[Attribute]:
    """
    Find the first non-spread attribute with the given name.

    Args:
        node: Element to inspect.
        name: Attribute name.
        ignore_case: Compare names case-insensitively.

    Returns:
        Optional[Attribute]: The attribute, or None if absent.
    """
    wanted = name.lower() if ignore_case else name
    for attr in node.attributes:
        if attr.is_spread:
            continue
        current = attr.name.lower() if ignore_case else attr.name
        if current == wanted:
            return attr
    return None


def get_any_prop(node: ElementNode, names: Iterable[str], ignore_case: bool = True) -> Optional[Attribute]:
    """Return the first attribute (in `names` order) that the element carries."""
    for name in names:
        attr = get_prop(node, name, ignore_case)
        if attr is not None:
            return attr
    return None


def has_spread(node: ElementNode) -> bool:
    return any(attr.is_spread for attr in node.attributes)


def literal_string(attr: Optional[Attribute]) -> Optional[str]:
    """Return the literal string value of an attribute, if it has one."""
    if attr is not None and isinstance(attr.value, LiteralString):
        return attr.value.value
    return None


# -----------------------------------------------------------------------------
# VALUE CLASSIFICATION
# -----------------------------------------------------------------------------

def may_supply_text(value: AttributeValue) -> bool:
    """
    Check whether an attribute value can supply announced text.

    Non-empty literal strings qualify; so do unresolved expressions other
    than `undefined`, which cannot be ruled out.
    """
    if isinstance(value, LiteralString):
        return bool(value.value)
    if isinstance(value, UnresolvedExpression):
        return not value.is_undefined
    if isinstance(value, (LiteralBoolean, Spread)):
        return False
    return False


def may_render_content(value: AttributeValue) -> bool:
    """
    Check whether an expression child may render something.

    Only the `undefined` literal is known to render nothing; literal
    strings and booleans are given the benefit of the doubt.
    """
    return not (isinstance(value, UnresolvedExpression) and value.is_undefined)


def may_be_truthy_flag(value: AttributeValue) -> bool:
    """
    Check whether a boolean-like attribute may be switched on.

    Used for flags such as `aria-hidden`, where `"false"` and `false` are off
    and an unresolved expression may be on.
    """
    if isinstance(value, LiteralBoolean):
        return value.value
    if isinstance(value, LiteralString):
        return value.value.strip().lower() not in ("", "false")
    if isinstance(value, UnresolvedExpression):
        return not value.is_undefined
    if isinstance(value, Spread):
        return False
    return False


# -----------------------------------------------------------------------------
# VISIBILITY
# -----------------------------------------------------------------------------

def is_hidden_input(node: ElementNode, config: AliasConfig) -> bool:
    """Check whether the element resolves to `<input type="hidden">`."""
    if resolve_tag(node.tag_name, config) != "input":
        return False
    input_type = literal_string(get_prop(node, "type"))
    return input_type is not None and input_type.strip().lower() == "hidden"


def is_aria_hidden(node: ElementNode) -> bool:
    attr = get_prop(node, "aria-hidden")
    return attr is not None and may_be_truthy_flag(attr.value)


def is_hidden_from_screen_reader(node: ElementNode, config: AliasConfig) -> bool:
    """
    Check whether assistive technology may skip the element.

    Args:
        node: Element to inspect.
        config: Alias configuration, used to recognize aliased inputs.

    Returns:
        bool: True for hidden inputs and for `aria-hidden` that is, or may
              be, switched on.
    """
    return is_hidden_input(node, config) or is_aria_hidden(node)
