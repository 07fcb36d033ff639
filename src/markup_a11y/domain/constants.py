from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the static reference tables used by the
analysis engine: native element names, ARIA property names, attribute role
defaults, form control tags and per-rule traversal limits.
"""

from typing import Dict, FrozenSet, Tuple

# -----------------------------------------------------------------------------
# NATIVE ELEMENTS
# -----------------------------------------------------------------------------

DOM_ELEMENTS: FrozenSet[str] = frozenset({
    "a", "abbr", "acronym", "address", "applet", "area", "article", "aside",
    "audio", "b", "base", "bdi", "bdo", "big", "blink", "blockquote", "body",
    "br", "button", "canvas", "caption", "center", "cite", "code", "col",
    "colgroup", "content", "data", "datalist", "dd", "del", "details", "dfn",
    "dialog", "dir", "div", "dl", "dt", "em", "embed", "fieldset",
    "figcaption", "figure", "font", "footer", "form", "frame", "frameset",
    "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hgroup", "hr",
    "html", "i", "iframe", "img", "input", "ins", "kbd", "keygen", "label",
    "legend", "li", "link", "main", "map", "mark", "marquee", "menu",
    "menuitem", "meta", "meter", "nav", "noembed", "noscript", "object",
    "ol", "optgroup", "option", "output", "p", "param", "picture", "pre",
    "progress", "q", "rb", "rp", "rt", "rtc", "ruby", "s", "samp", "script",
    "section", "select", "small", "source", "spacer", "span", "strike",
    "strong", "style", "sub", "summary", "sup", "table", "tbody", "td",
    "textarea", "tfoot", "th", "thead", "time", "title", "tr", "track",
    "tt", "u", "ul", "var", "video", "wbr", "xmp",
})

HEADING_TAGS: Tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

# Elements that can be the target of a <label>
CONTROL_TAGS: FrozenSet[str] = frozenset({
    "button", "input", "meter", "output", "progress", "select", "textarea",
})

INTERACTIVE_TAGS: FrozenSet[str] = frozenset({
    "button", "details", "embed", "iframe", "input", "menuitem", "option",
    "select", "summary", "textarea",
})

# Interactive only when they carry an href
LINK_TAGS: FrozenSet[str] = frozenset({"a", "area"})

PRESENTATION_ROLES: FrozenSet[str] = frozenset({"presentation", "none"})

# -----------------------------------------------------------------------------
# ARIA REFERENCE LIST
# -----------------------------------------------------------------------------

ARIA_PROPERTIES: Tuple[str, ...] = (
    "aria-activedescendant",
    "aria-atomic",
    "aria-autocomplete",
    "aria-braillelabel",
    "aria-brailleroledescription",
    "aria-busy",
    "aria-checked",
    "aria-colcount",
    "aria-colindex",
    "aria-colindextext",
    "aria-colspan",
    "aria-controls",
    "aria-current",
    "aria-describedby",
    "aria-description",
    "aria-details",
    "aria-disabled",
    "aria-dropeffect",
    "aria-errormessage",
    "aria-expanded",
    "aria-flowto",
    "aria-grabbed",
    "aria-haspopup",
    "aria-hidden",
    "aria-invalid",
    "aria-keyshortcuts",
    "aria-label",
    "aria-labelledby",
    "aria-level",
    "aria-live",
    "aria-modal",
    "aria-multiline",
    "aria-multiselectable",
    "aria-orientation",
    "aria-owns",
    "aria-placeholder",
    "aria-posinset",
    "aria-pressed",
    "aria-readonly",
    "aria-relevant",
    "aria-required",
    "aria-roledescription",
    "aria-rowcount",
    "aria-rowindex",
    "aria-rowindextext",
    "aria-rowspan",
    "aria-selected",
    "aria-setsize",
    "aria-sort",
    "aria-valuemax",
    "aria-valuemin",
    "aria-valuenow",
    "aria-valuetext",
)

# -----------------------------------------------------------------------------
# ATTRIBUTE ROLES
# -----------------------------------------------------------------------------

ROLE_FOR = "for"
ROLE_LABEL = "label"
ROLE_INNER_HTML = "innerHTML"
ROLE_CHILDREN = "children"

DEFAULT_ATTRIBUTE_ROLES: Dict[str, Tuple[str, ...]] = {
    ROLE_FOR: ("htmlFor",),
    ROLE_LABEL: ("alt", "aria-label", "aria-labelledby"),
    ROLE_INNER_HTML: ("dangerouslySetInnerHTML",),
    ROLE_CHILDREN: ("children",),
}

# Attributes on the label element itself that name it directly
DIRECT_NAME_ATTRIBUTES: Tuple[str, ...] = ("aria-label", "aria-labelledby")

# -----------------------------------------------------------------------------
# TRAVERSAL AND SUGGESTION LIMITS
# -----------------------------------------------------------------------------

MAX_DEPTH = 25
DEFAULT_LABEL_DEPTH = 2
DEFAULT_HEADING_DEPTH = 5

DEFAULT_SUGGESTION_LIMIT = 2
DEFAULT_SUGGESTION_DISTANCE = 2

SETTINGS_NAMESPACE = "jsx-a11y"
