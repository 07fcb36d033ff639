from __future__ import annotations

"""
Unit tests for the Rule Registry.

Verifies:
1. All rules are registered under their identifiers.
2. Single-element and whole-tree entry points.
3. Configuration warnings are surfaced through logging.
"""

import logging

import pytest

from markup_a11y.core.rules.registry import RULES, check_tree, get_rule, prepare_rule, run_rule
from markup_a11y.domain.markup_models import el, expr


def test_registered_rules():
    assert sorted(RULES) == [
        "aria-props",
        "click-events-have-key-events",
        "heading-has-content",
        "img-redundant-alt",
        "label-has-associated-control",
    ]
    for rule_id, module in RULES.items():
        assert module.RULE_ID == rule_id
        assert set(module.MESSAGES)
        assert callable(module.prepare) and callable(module.check)


def test_unknown_rule():
    with pytest.raises(KeyError, match="Unknown rule: no-such-rule"):
        get_rule("no-such-rule")


def test_run_rule():
    violations = run_rule("heading-has-content", el("h1"))
    assert [v.rule_id for v in violations] == ["heading-has-content"]
    assert run_rule("heading-has-content", el("h1", "Foo")) == []


def test_run_rule_with_options_and_settings(components_settings):
    node = el("label", "A label", el("CustomInput"))
    assert run_rule("label-has-associated-control", node, options={"assert": "nesting"}) != []
    assert run_rule("label-has-associated-control", node, components_settings, {"assert": "nesting"}) == []


def test_check_tree_walks_every_element():
    tree = el(
        "main",
        el("h1"),
        el("div", el("img", alt="Photo of me"), onClick=expr("f")),
        el("label", "Name"),
    )
    violations = check_tree(tree)
    found = [(v.rule_id, v.node.tag_name) for v in violations]
    assert found == [
        ("heading-has-content", "h1"),
        ("click-events-have-key-events", "div"),
        ("img-redundant-alt", "img"),
        ("label-has-associated-control", "label"),
    ]


def test_check_tree_subset_and_options():
    tree = el("div", el("img", alt="Word1"), el("h1"))
    violations = check_tree(
        tree,
        rule_ids=["img-redundant-alt"],
        options_by_rule={"img-redundant-alt": {"words": ["Word1"]}},
    )
    assert [v.rule_id for v in violations] == ["img-redundant-alt"]


def test_prepare_rule_logs_warnings(caplog):
    with caplog.at_level(logging.WARNING, logger="markup_a11y"):
        context = prepare_rule("heading-has-content", options={"depth": -3, "colour": "red"})
    assert context.options["depth"] == 5
    assert len(context.warnings) == 2
    assert "[heading-has-content]" in caplog.text
