from __future__ import annotations

"""
Unit tests for the Attribute Inspection Helpers.

Verifies:
1. Attribute lookup ignores spreads and, by default, case.
2. Classification of values that may supply text or switch a flag on.
3. Visibility checks for hidden inputs and aria-hidden.
"""

from markup_a11y.core.analysis.props import (
    get_any_prop,
    get_prop,
    has_spread,
    is_aria_hidden,
    is_hidden_from_screen_reader,
    is_hidden_input,
    literal_string,
    may_be_truthy_flag,
    may_render_content,
    may_supply_text,
)
from markup_a11y.core.config.layers import build_alias_config
from markup_a11y.domain.alias_models import AliasConfig
from markup_a11y.domain.markup_models import (
    UNDEFINED,
    LiteralBoolean,
    LiteralString,
    Spread,
    el,
    expr,
    spread,
)

EMPTY = AliasConfig()


def test_get_prop_ignores_case_by_default():
    node = el("label", htmlFor="id")
    assert get_prop(node, "htmlfor") is not None
    assert get_prop(node, "htmlfor", ignore_case=False) is None


def test_get_prop_skips_spreads():
    node = el("div", spread())
    assert get_prop(node, "") is None
    assert has_spread(node) is True
    assert has_spread(el("div")) is False


def test_get_any_prop_follows_name_order():
    node = el("div", onKeyUp=expr("f"), onKeyDown=expr("g"))
    attr = get_any_prop(node, ["onKeyDown", "onKeyUp"])
    assert attr is not None and attr.name == "onKeyDown"
    assert get_any_prop(node, ["onKeyPress"]) is None


def test_literal_string():
    node = el("img", alt="A photo", title=expr("t"))
    assert literal_string(get_prop(node, "alt")) == "A photo"
    assert literal_string(get_prop(node, "title")) is None
    assert literal_string(None) is None


def test_may_supply_text():
    assert may_supply_text(LiteralString("x")) is True
    assert may_supply_text(LiteralString("  ")) is True
    assert may_supply_text(LiteralString("")) is False
    assert may_supply_text(expr("foo")) is True
    assert may_supply_text(UNDEFINED) is False
    assert may_supply_text(LiteralBoolean(True)) is False
    assert may_supply_text(Spread("props")) is False


def test_may_render_content():
    """Only the undefined literal is known to render nothing."""
    assert may_render_content(LiteralBoolean(False)) is True
    assert may_render_content(LiteralString("")) is True
    assert may_render_content(expr("foo")) is True
    assert may_render_content(UNDEFINED) is False


def test_may_be_truthy_flag():
    assert may_be_truthy_flag(LiteralBoolean(True)) is True
    assert may_be_truthy_flag(LiteralBoolean(False)) is False
    assert may_be_truthy_flag(LiteralString("true")) is True
    assert may_be_truthy_flag(LiteralString("False")) is False
    assert may_be_truthy_flag(LiteralString("")) is False
    assert may_be_truthy_flag(expr("isHidden")) is True
    assert may_be_truthy_flag(UNDEFINED) is False


def test_is_hidden_input():
    assert is_hidden_input(el("input", type="hidden"), EMPTY) is True
    assert is_hidden_input(el("input", type="HIDDEN"), EMPTY) is True
    assert is_hidden_input(el("input", type="text"), EMPTY) is False
    assert is_hidden_input(el("input", type=expr("t")), EMPTY) is False
    assert is_hidden_input(el("div", type="hidden"), EMPTY) is False


def test_is_hidden_input_through_alias(components_settings):
    config, _ = build_alias_config(components_settings)
    node = el("CustomInput", type="hidden")
    assert is_hidden_input(node, EMPTY) is False
    assert is_hidden_input(node, config) is True


def test_is_aria_hidden():
    assert is_aria_hidden(el("div", aria_hidden=True)) is True
    assert is_aria_hidden(el("div", aria_hidden=False)) is False
    assert is_aria_hidden(el("div", aria_hidden=expr("hidden"))) is True
    assert is_aria_hidden(el("div")) is False


def test_is_hidden_from_screen_reader():
    assert is_hidden_from_screen_reader(el("span", aria_hidden="true"), EMPTY) is True
    assert is_hidden_from_screen_reader(el("input", type="hidden"), EMPTY) is True
    assert is_hidden_from_screen_reader(el("span"), EMPTY) is False
