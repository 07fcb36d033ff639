from __future__ import annotations

"""
Component and Attribute Alias Resolution.

Maps custom component names to the native element they stand in for, and
attribute roles (such as the `for` pointer of a label) to the literal
attribute names that fill them. Both lookups share one algorithm over the
two configuration layers: options exact, options glob, settings exact,
settings glob. Native tags are never remapped.
"""

import logging
from typing import Iterable, Optional, Tuple

from markup_a11y.core.analysis.glob_matcher import matches
from markup_a11y.domain.alias_models import AliasConfig
from markup_a11y.domain.constants import DEFAULT_ATTRIBUTE_ROLES, DOM_ELEMENTS
from markup_a11y.domain.markup_models import ElementNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_native_tag(name: str) -> bool:
    """Check whether a name is a built-in lowercase element name."""
    return name in DOM_ELEMENTS


def resolve_tag(component_name: str, config: AliasConfig) -> Optional[str]:
    """
    Resolve a component name to the native tag it represents.

    Args:
        component_name: Declared element or component name.
        config: Two-layer alias configuration.

    Returns:
        Optional[str]: The native tag, or None when the name is an unknown
                       custom component.
    """
    if is_native_tag(component_name):
        return component_name

    for layer in config.layers:
        target = layer.components.lookup(component_name, matches)
        if target is not None:
            logger.debug(f"Resolved component '{component_name}' to '{target}'")
            return str(target)
    return None


def resolve_attribute_names(
        role: str,
        config: AliasConfig,
        extra: Iterable[str] = (),
) -> Tuple[str, ...]:
    """
    Resolve an attribute role to the literal attribute names that fill it.

    Configured layers take precedence over the built-in role table. Names in
    `extra` are appended (rule options that extend a role for one call).

    Args:
        role: Role key, e.g. "for" or "label".
        config: Two-layer alias configuration.
        extra: Additional names to accept for this call.

    Returns:
        Tuple[str, ...]: Accepted attribute names, in priority order.
    """
    names: Optional[Tuple[str, ...]] = None
    for layer in config.layers:
        found = layer.attributes.lookup(role, matches)
        if found is not None:
            names = tuple(found)  # type: ignore[arg-type]
            break

    if names is None:
        names = DEFAULT_ATTRIBUTE_ROLES.get(role, ())

    extra_names = tuple(n for n in extra if n not in names)
    return names + extra_names


def is_unknown_component(node: ElementNode, config: AliasConfig) -> bool:
    """Check whether an element has no native semantics at all."""
    return resolve_tag(node.tag_name, config) is None
