from __future__ import annotations

"""
Analysis Result Models.

Defines the discriminated outcomes returned by the engine and the
violation records that rule implementations hand to the reporting layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from markup_a11y.domain.markup_models import ElementNode

# -----------------------------------------------------------------------------
# ENGINE OUTCOMES
# -----------------------------------------------------------------------------

class AssociationPolicy(str, Enum):
    """Required relationship between a label and its control."""
    HTML_FOR = "htmlFor"
    NESTING = "nesting"
    EITHER = "either"
    BOTH = "both"


class ContentVerdict(str, Enum):
    """Tri-state outcome of an accessible content scan."""
    PRESENT = "present"
    ABSENT = "absent"
    INDETERMINATE = "indeterminate"


class LabelVerdict(str, Enum):
    """Outcome of a label/control association check."""
    PASS = "pass"
    FAIL_ACCESSIBLE_LABEL = "accessibleLabel"
    FAIL_HTML_FOR = "htmlFor"
    FAIL_NESTING = "nesting"
    FAIL_EITHER = "either"
    FAIL_BOTH = "both"
    INDETERMINATE = "indeterminate"

    @property
    def is_failure(self) -> bool:
        return self not in (LabelVerdict.PASS, LabelVerdict.INDETERMINATE)


POLICY_FAILURES: Dict[AssociationPolicy, LabelVerdict] = {
    AssociationPolicy.HTML_FOR: LabelVerdict.FAIL_HTML_FOR,
    AssociationPolicy.NESTING: LabelVerdict.FAIL_NESTING,
    AssociationPolicy.EITHER: LabelVerdict.FAIL_EITHER,
    AssociationPolicy.BOTH: LabelVerdict.FAIL_BOTH,
}

# -----------------------------------------------------------------------------
# RULE OUTPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Violation:
    """
    A single rule violation on one element.

    Attributes:
        rule_id: Identifier of the rule that produced it.
        message_id: Discriminator of the failure kind within the rule.
        message: Human-readable message.
        node: The offending element.
        data: Extra values for message formatting (names, suggestions).
    """
    rule_id: str
    message_id: str
    message: str
    node: ElementNode
    data: Dict[str, Any] = field(default_factory=dict, compare=False)
