from __future__ import annotations

"""
Unit tests for the aria-props rule.

Verifies:
1. Every reference ARIA property is accepted, in any letter case.
2. Attributes that do not start with 'aria-' (in any case) are ignored.
3. Invalid names are reported with suggestions when one is close.
"""

import pytest

from markup_a11y.core.rules import aria_props as rule
from markup_a11y.domain.constants import ARIA_PROPERTIES
from markup_a11y.domain.markup_models import el, expr, spread


def _check(node):
    return rule.check(node, rule.prepare())


@pytest.mark.parametrize("name", ARIA_PROPERTIES)
def test_reference_properties_are_valid(name):
    assert _check(el("div", attrs={name.lower(): "foobar"})) == []


@pytest.mark.parametrize(
    "node",
    [
        el("div"),
        el("div", attrs={"aria": "wee"}),
        el("div", attrs={"abcARIAdef": "true"}),
        el("div", attrs={"fooaria-foobar": "true"}),
        el("div", attrs={"fooaria-hidden": "true"}),
        el("Bar", baz=True),
        el("input", type="text", aria_errormessage="foobar"),
        el("div", spread(), aria_label=expr("label")),
    ],
)
def test_valid(node):
    assert _check(node) == []


def test_misspelling_gets_suggestion():
    (violation,) = _check(el("div", aria_labeledby="foobar"))
    assert violation.message_id == "error-with-suggestions"
    assert violation.data["suggestions"] == ["aria-labelledby"]
    assert violation.message == (
        "aria-labeledby: This attribute is an invalid ARIA attribute. "
        "Did you mean to use aria-labelledby?"
    )


@pytest.mark.parametrize("name", ["aria-", "aria-skldjfaria-klajsd"])
def test_unrecognizable_name_has_no_suggestion(name):
    (violation,) = _check(el("div", attrs={name: "foobar"}))
    assert violation.message_id == "error"
    assert violation.message == f"{name}: This attribute is an invalid ARIA attribute."


def test_each_invalid_attribute_is_reported():
    violations = _check(el("div", aria_hidder="true", aria_label="ok", aria_foo="x"))
    assert [v.data["name"] for v in violations] == ["aria-hidder", "aria-foo"]


def test_uppercase_prefix_is_still_checked():
    (violation,) = _check(el("div", attrs={"ARIA-LABELEDBY": "foobar"}))
    assert violation.message_id == "error-with-suggestions"
    assert violation.data["suggestions"] == ["aria-labelledby"]
    assert _check(el("div", attrs={"ARIA-LABELLEDBY": "foobar"})) == []
