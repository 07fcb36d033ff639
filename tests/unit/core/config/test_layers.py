from __future__ import annotations

"""
Unit tests for Alias Layer Construction.

Verifies:
1. Settings are read bare or under the 'jsx-a11y' namespace.
2. Malformed entries are dropped with warnings, or raise in strict mode.
3. Option layers keep the declaration order of component groups.
"""

import pytest

from markup_a11y.core.analysis.alias_resolver import resolve_attribute_names, resolve_tag
from markup_a11y.core.config.layers import build_alias_config, options_layer, parse_settings
from markup_a11y.domain.alias_models import AliasConfig
from markup_a11y.domain.constants import ROLE_FOR


def test_namespaced_settings(components_settings):
    layer, warnings = parse_settings(components_settings)
    assert warnings == []
    assert len(layer.components) == 5
    assert resolve_tag("Title", AliasConfig(settings=layer)) == "h1"


def test_bare_settings():
    layer, _ = parse_settings({"components": {"Link": "a"}})
    assert resolve_tag("Link", AliasConfig(settings=layer)) == "a"


def test_empty_settings():
    for value in (None, {}, {"jsx-a11y": {}}):
        layer, warnings = parse_settings(value)
        assert not layer.components and not layer.attributes
        assert warnings == []


def test_attribute_roles(attributes_settings):
    layer, _ = parse_settings(attributes_settings)
    assert resolve_attribute_names(ROLE_FOR, AliasConfig(settings=layer)) == ("htmlFor", "for")


def test_malformed_entries_are_dropped():
    settings = {
        "jsx-a11y": {
            "components": {"Good": "input", "Bad": 3, "Blank": " "},
            "attributes": {"for": "htmlFor", "label": ["aria-label"]},
        }
    }
    layer, warnings = parse_settings(settings)
    assert len(layer.components) == 1
    assert len(layer.attributes) == 1
    assert len(warnings) == 3


def test_non_mapping_settings():
    layer, warnings = parse_settings(["components"])
    assert not layer.components
    assert len(warnings) == 1


@pytest.mark.parametrize(
    "settings",
    [
        ["components"],
        {"components": ["CustomInput"]},
        {"components": {"CustomInput": None}},
        {"attributes": {"for": [1]}},
    ],
)
def test_strict_settings_raise(settings):
    with pytest.raises(TypeError):
        parse_settings(settings, strict=True)


def test_options_layer_keeps_group_order():
    """Patterns of the first group are declared before the second group."""
    layer = options_layer([(["Custom*"], "label"), (["CustomInput", "*Input"], "input")])
    config = AliasConfig(options=layer)
    assert resolve_tag("CustomLabel", config) == "label"
    assert resolve_tag("CustomInput", config) == "input"
    assert resolve_tag("CustomSelect", config) == "label"
    assert resolve_tag("TextInput", config) == "input"


def test_build_alias_config_combines_layers(components_settings):
    config, warnings = build_alias_config(
        components_settings,
        [(["Title"], "h3")],
        {ROLE_FOR: ["for"]},
    )
    assert warnings == []
    assert resolve_tag("Title", config) == "h3"
    assert resolve_tag("Heading", config) == "h2"
    assert resolve_attribute_names(ROLE_FOR, config) == ("for",)


def test_build_alias_config_forwards_strict():
    """Strict mode reaches the settings layer instead of being dropped."""
    config, warnings = build_alias_config({"components": {"X": 3}})
    assert resolve_tag("X", config) is None
    assert len(warnings) == 1
    with pytest.raises(TypeError):
        build_alias_config({"components": {"X": 3}}, strict=True)
