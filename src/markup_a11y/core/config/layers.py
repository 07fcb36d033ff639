from __future__ import annotations

"""
Alias Layer Construction.

Turns already-parsed project settings and normalized rule options into
the two ordered lookup layers of an AliasConfig. Settings may be given
bare or nested under the conventional `jsx-a11y` namespace.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from markup_a11y.domain.alias_models import AliasConfig, AliasLayer, AttributeMap, ComponentMap
from markup_a11y.domain.constants import SETTINGS_NAMESPACE

logger = logging.getLogger(__name__)

ComponentTargets = Sequence[Tuple[Iterable[str], str]]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_settings(settings: Any, *, strict: bool = False) -> Tuple[AliasLayer, List[str]]:
    """
    Build the project-wide settings layer.

    Args:
        settings: Mapping with optional "components" ({name: tag}) and
                  "attributes" ({role: [names]}) entries, possibly nested
                  under "jsx-a11y".
        strict: If True, raise on malformed entries instead of dropping them.

    Returns:
        Tuple[AliasLayer, List[str]]: The layer and a list of warnings.

    Raises:
        TypeError: In strict mode, when an entry has the wrong shape.
    """
    warnings: List[str] = []
    if not settings:
        return AliasLayer(), warnings

    if not isinstance(settings, Mapping):
        msg = f"Invalid settings type: expected dict, received {type(settings).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Ignored.")
        return AliasLayer(), warnings

    scoped = settings.get(SETTINGS_NAMESPACE, settings)
    if not isinstance(scoped, Mapping):
        scoped = {}

    components: List[Tuple[str, str]] = []
    for name, tag in _mapping_items(scoped.get("components"), "components", warnings, strict):
        if isinstance(tag, str) and tag.strip():
            components.append((str(name), tag.strip()))
        else:
            _reject(f"Invalid component target for '{name}': expected str.", warnings, strict)

    attributes: List[Tuple[str, Tuple[str, ...]]] = []
    for role, names in _mapping_items(scoped.get("attributes"), "attributes", warnings, strict):
        if isinstance(names, (list, tuple)) and all(isinstance(n, str) for n in names):
            attributes.append((str(role), tuple(names)))
        else:
            _reject(f"Invalid attribute names for role '{role}': expected list[str].", warnings, strict)

    layer = AliasLayer(ComponentMap.from_pairs(components), AttributeMap.from_pairs(attributes))
    return layer, warnings


def options_layer(
        component_targets: ComponentTargets = (),
        attributes: Optional[Mapping[str, Iterable[str]]] = None,
) -> AliasLayer:
    """
    Build the rule-option layer.

    Args:
        component_targets: Groups of component patterns and the native tag
                           they all map to, in declaration order.
        attributes: Role overrides coming from rule options.

    Returns:
        AliasLayer: The option layer.
    """
    pairs = [(pattern, tag) for patterns, tag in component_targets for pattern in patterns]
    return AliasLayer(
        ComponentMap.from_pairs(pairs),
        AttributeMap.from_pairs(attributes or {}),
    )


def build_alias_config(
        settings: Any = None,
        component_targets: ComponentTargets = (),
        attributes: Optional[Mapping[str, Iterable[str]]] = None,
        *,
        strict: bool = False,
) -> Tuple[AliasConfig, List[str]]:
    """
    Assemble a complete two-layer configuration.

    `strict` is forwarded to `parse_settings`.

    Returns:
        Tuple[AliasConfig, List[str]]: The configuration and settings warnings.
    """
    settings_layer, warnings = parse_settings(settings, strict=strict)
    config = AliasConfig(options=options_layer(component_targets, attributes), settings=settings_layer)
    logger.debug(
        f"Alias config built: {len(config.options.components)} option components, "
        f"{len(config.settings.components)} settings components"
    )
    return config, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _mapping_items(value: Any, field: str, warnings: List[str], strict: bool) -> List[Tuple[Any, Any]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return list(value.items())
    _reject(f"Invalid settings field '{field}': expected dict, received {type(value).__name__}.", warnings, strict)
    return []


def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Entry discarded.")
