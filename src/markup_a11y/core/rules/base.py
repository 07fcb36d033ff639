from __future__ import annotations

"""
Shared Rule Plumbing.

Every rule checks one element at a time against a prepared context: the
alias configuration built from project settings plus the rule's own
options, already validated. Preparing once and checking many nodes keeps
option validation out of the per-node path.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from markup_a11y.core.config.layers import ComponentTargets, build_alias_config
from markup_a11y.core.config.validator import validate_rule_options
from markup_a11y.domain.alias_models import AliasConfig
from markup_a11y.domain.markup_models import ElementNode
from markup_a11y.domain.results import Violation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """
    Everything a rule needs besides the node itself.

    Attributes:
        rule_id: Identifier of the rule the context was prepared for.
        config: Two-layer alias configuration.
        options: Normalized rule options.
        warnings: Problems found while normalizing settings and options.
    """
    rule_id: str
    config: AliasConfig
    options: Dict[str, Any] = field(default_factory=dict, compare=False)
    warnings: Tuple[str, ...] = ()


def prepare_context(
        rule_id: str,
        settings: Any,
        options: Any,
        defaults: Mapping[str, Any],
        *,
        choices: Optional[Mapping[str, Sequence[str]]] = None,
        component_targets: Callable[[Dict[str, Any]], ComponentTargets] = lambda opts: (),
        attribute_overrides: Callable[[Dict[str, Any]], Optional[Mapping[str, Iterable[str]]]] = lambda opts: None,
        strict: bool = False,
) -> RuleContext:
    """
    Validate options and build the alias configuration for one rule.

    Args:
        rule_id: Rule identifier, used in log messages.
        settings: Raw project-wide settings.
        options: Raw rule options.
        defaults: The rule's default options.
        choices: Allowed values for enumerated options.
        component_targets: Maps normalized options to component alias groups.
        attribute_overrides: Maps normalized options to attribute role overrides.
        strict: Raise on invalid options instead of coercing.

    Returns:
        RuleContext: The immutable context.
    """
    normalized, warnings = validate_rule_options(options, defaults, choices=choices, strict=strict)
    config, settings_warnings = build_alias_config(
        settings,
        component_targets(normalized),
        attribute_overrides(normalized),
        strict=strict,
    )
    all_warnings = tuple(warnings + settings_warnings)
    for warning in all_warnings:
        logger.debug(f"[{rule_id}] {warning}")
    return RuleContext(rule_id=rule_id, config=config, options=normalized, warnings=all_warnings)


def report(
        context: RuleContext,
        node: ElementNode,
        message_id: str,
        messages: Mapping[str, str],
        **data: Any,
) -> List[Violation]:
    """Build a single-violation list for a node."""
    message = messages[message_id].format(**data)
    return [Violation(context.rule_id, message_id, message, node, dict(data))]
