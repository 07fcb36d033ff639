from __future__ import annotations

"""
Glob Name Matching.

Matches component and attribute names against shell-style wildcard
patterns. Only `*` (any run of characters, possibly empty) and `?`
(exactly one character) are special; everything else is literal, and the
pattern must cover the whole name.
"""

import re
from functools import lru_cache

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def matches(name: str, pattern: str) -> bool:
    """
    Check whether a literal name matches a wildcard pattern.

    Args:
        name: Literal name to test (case-sensitive).
        pattern: Pattern built from literals, `*` and `?`.

    Returns:
        bool: True if the whole name matches.
    """
    if "*" not in pattern and "?" not in pattern:
        return name == pattern
    return _compile(pattern).fullmatch(name) is not None


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

@lru_cache(maxsize=512)
def _compile(pattern: str) -> re.Pattern:
    """Translate a wildcard pattern into an anchored regex."""
    parts = []
    for ch in pattern:
        if ch == "*":
            # Collapse runs of '*' to keep the regex linear
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)
