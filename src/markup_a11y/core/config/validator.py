from __future__ import annotations

"""
Rule Option Validation Service.

Normalizes raw rule options (as parsed from a host configuration file)
against a rule's defaults. Handles type coercion and default injection,
collecting human-readable warnings instead of failing, unless strict mode
is requested.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from markup_a11y.domain.constants import MAX_DEPTH

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_rule_options(
        options: Any,
        defaults: Mapping[str, Any],
        *,
        choices: Optional[Mapping[str, Sequence[str]]] = None,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a rule's option mapping.

    The field type is taken from the default value: lists become lists of
    non-empty strings, integers are depth budgets clamped to the engine
    maximum, and strings must be one of the values listed in `choices`
    (a string option without choices only accepts its default). Unknown keys are discarded.

    Args:
        options: Raw options (usually a dict, or None).
        defaults: Default value for every supported option.
        choices: Allowed values for enumerated string options.
        strict: If True, raise on invalid input instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized options and warnings.

    Raises:
        TypeError: In strict mode, when a value has the wrong type.
        ValueError: In strict mode, when a value is out of range.
    """
    warnings: List[str] = []
    choices = choices or {}
    normalized: Dict[str, Any] = {
        k: list(v) if isinstance(v, list) else v for k, v in defaults.items()
    }

    if options is None:
        return normalized, warnings

    # 1. Base Type Validation
    if not isinstance(options, Mapping):
        msg = f"Invalid options type: expected dict, received {type(options).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return normalized, warnings

    # 2. Field Processing & Normalization
    for key, value in options.items():
        if key not in defaults:
            msg = f"Unknown option '{key}'."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Ignored.")
            continue

        fallback = defaults[key]
        if isinstance(fallback, int):
            normalized[key] = _as_depth(value, fallback, key, warnings, strict)
        elif isinstance(fallback, list):
            normalized[key] = _as_list_str(value, fallback, key, warnings, strict)
        else:
            allowed = choices.get(key, (fallback,))
            normalized[key] = _as_choice(value, fallback, allowed, key, warnings, strict)

    return normalized, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_depth(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce a depth budget into the range [0, MAX_DEPTH]."""
    if value is None:
        return fallback

    number: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and not strict:
        try:
            number = int(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {number}.")
        except ValueError:
            number = None

    if number is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if number < 0:
        msg = f"Invalid field '{field}': {number} is negative."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if number > MAX_DEPTH:
        warnings.append(f"Field '{field}' clamped from {number} to {MAX_DEPTH}.")
        return MAX_DEPTH

    return number


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_choice(
        value: Any,
        fallback: str,
        allowed: Sequence[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Ensure input is one of the allowed enumerated values."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip() in allowed:
        return value.strip()

    msg = f"Invalid field '{field}': {value!r} is not one of {', '.join(allowed)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
