from __future__ import annotations

"""
Markup Tree Data Models.

Provides the closed set of node and attribute value types the analysis
engine reasons over, plus small builders used by hosts and tests to
construct trees. Trees are immutable once built; the engine only reads them.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# ATTRIBUTE VALUES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LiteralString:
    """A statically known string value (`alt="foo"`, `alt={"foo"}`)."""
    value: str


@dataclass(frozen=True)
class LiteralBoolean:
    """A statically known boolean (`aria-hidden`, `aria-hidden={false}`)."""
    value: bool


@dataclass(frozen=True)
class UnresolvedExpression:
    """
    An expression whose runtime value cannot be computed statically.

    Attributes:
        source: Source text of the expression, kept for diagnostics. The
                bare identifier `undefined` is recognized as a known value.
    """
    source: str = ""

    @property
    def is_undefined(self) -> bool:
        return self.source.strip() == "undefined"


@dataclass(frozen=True)
class Spread:
    """A spread of unknown attributes (`{...props}`)."""
    source: str = ""


AttributeValue = Union[LiteralString, LiteralBoolean, UnresolvedExpression, Spread]

UNDEFINED = UnresolvedExpression("undefined")

# -----------------------------------------------------------------------------
# NODES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Attribute:
    """
    A single attribute of an element.

    Attributes:
        name: Attribute name as written. Empty for spread attributes.
        value: Classified attribute value.
    """
    name: str
    value: AttributeValue

    @property
    def is_spread(self) -> bool:
        return isinstance(self.value, Spread)


@dataclass(frozen=True)
class ElementNode:
    """
    An element or component in the markup tree.

    Attributes:
        tag_name: Element name (`div`) or component name (`CustomInput`).
        attributes: Ordered attributes, spreads included.
        children: Ordered child nodes.
    """
    tag_name: str
    attributes: Tuple[Attribute, ...] = ()
    children: Tuple["MarkupNode", ...] = ()


@dataclass(frozen=True)
class TextNode:
    """Literal text content between tags."""
    text: str


@dataclass(frozen=True)
class ExpressionNode:
    """An expression container child (`{foo}`, `{undefined}`, `{"text"}`)."""
    value: AttributeValue


MarkupNode = Union[ElementNode, TextNode, ExpressionNode]

_VALUE_KINDS: Dict[str, Any] = {
    "string": LiteralString,
    "boolean": LiteralBoolean,
    "expression": UnresolvedExpression,
    "spread": Spread,
}

# -----------------------------------------------------------------------------
# BUILDERS
# -----------------------------------------------------------------------------

def el(
        tag: str,
        *children: Any,
        attrs: Optional[Mapping[str, Any]] = None,
        **props: Any,
) -> ElementNode:
    """
    Build an element node.

    Positional `Attribute` instances become attributes (in order, before
    `attrs` and keyword props); strings become text children and attribute
    values become expression children. Keyword names use `_` for `-`
    (`aria_label` -> `aria-label`); `attrs` takes names verbatim.

    Args:
        tag: Element or component name.
        *children: Child nodes, strings, values, attributes or nested lists.
        attrs: Attributes keyed by their exact names.
        **props: Attributes keyed by Python-friendly names.

    Returns:
        ElementNode: The immutable element.
    """
    attributes: List[Attribute] = []
    flat: List[MarkupNode] = []

    for child in _flatten(children):
        if isinstance(child, Attribute):
            attributes.append(child)
        else:
            flat.append(_as_node(child))

    for name, value in (attrs or {}).items():
        attributes.append(Attribute(name, as_value(value)))
    for name, value in props.items():
        attributes.append(Attribute(name.replace("_", "-"), as_value(value)))

    return ElementNode(tag_name=tag, attributes=tuple(attributes), children=tuple(flat))


def text(value: str) -> TextNode:
    return TextNode(value)


def expr(source: str = "") -> UnresolvedExpression:
    return UnresolvedExpression(source)


def spread(source: str = "props") -> Attribute:
    return Attribute("", Spread(source))


def as_value(value: Any) -> AttributeValue:
    """
    Classify a Python value as an attribute value.

    Args:
        value: A str, bool, None (the `undefined` literal) or an existing value.

    Returns:
        AttributeValue: The tagged value.
    """
    if isinstance(value, (LiteralString, LiteralBoolean, UnresolvedExpression, Spread)):
        return value
    if isinstance(value, bool):
        return LiteralBoolean(value)
    if value is None:
        return UNDEFINED
    if isinstance(value, str):
        return LiteralString(value)
    return UnresolvedExpression(repr(value))


def node_from_dict(data: Mapping[str, Any]) -> MarkupNode:
    """
    Build a tree from a JSON-style mapping.

    Shapes:
        {"type": "element", "name": str, "attributes": [...], "children": [...]}
        {"type": "text", "value": str}
        {"type": "expression", "value": {"kind": ..., "value": ...}}
    Attribute entries are {"name": str, "value": {"kind": ..., "value": ...}};
    kinds are string, boolean, expression and spread.

    Raises:
        ValueError: If a node type or value kind is unknown.
    """
    node_type = data.get("type")

    if node_type == "text":
        return TextNode(str(data.get("value", "")))

    if node_type == "expression":
        return ExpressionNode(_value_from_dict(data.get("value") or {}))

    if node_type == "element":
        attributes = tuple(
            Attribute(str(a.get("name", "")), _value_from_dict(a.get("value") or {}))
            for a in data.get("attributes", [])
        )
        children = tuple(node_from_dict(c) for c in data.get("children", []))
        return ElementNode(str(data.get("name", "")), attributes, children)

    raise ValueError(f"Unknown node type: {node_type!r}")


def iter_elements(root: MarkupNode) -> Iterator[ElementNode]:
    """Yield every element of the tree in document order."""
    stack: List[MarkupNode] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, ElementNode):
            yield node
            stack.extend(reversed(node.children))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _flatten(items: Tuple[Any, ...]) -> Iterator[Any]:
    for item in items:
        if item is None:
            continue
        if isinstance(item, (list, tuple)):
            yield from _flatten(tuple(item))
        else:
            yield item


def _as_node(child: Any) -> MarkupNode:
    if isinstance(child, (ElementNode, TextNode, ExpressionNode)):
        return child
    if isinstance(child, str):
        return TextNode(child)
    return ExpressionNode(as_value(child))


def _value_from_dict(data: Mapping[str, Any]) -> AttributeValue:
    kind = data.get("kind", "expression")
    factory = _VALUE_KINDS.get(kind)
    if factory is None:
        raise ValueError(f"Unknown attribute value kind: {kind!r}")
    if factory is LiteralBoolean:
        return LiteralBoolean(bool(data.get("value", True)))
    if factory is LiteralString:
        return LiteralString(str(data.get("value", "")))
    return factory(str(data.get("value", data.get("source", ""))))
