from __future__ import annotations

"""
Near-Miss Suggestion Engine.

Ranks vocabulary entries by bounded Levenshtein distance to an unknown
token so rules can offer a "did you mean" hint for misspelled names.
"""

from typing import Iterable, List, Tuple

from markup_a11y.domain.constants import DEFAULT_SUGGESTION_DISTANCE, DEFAULT_SUGGESTION_LIMIT

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def suggest(
        token: str,
        vocabulary: Iterable[str],
        max_results: int = DEFAULT_SUGGESTION_LIMIT,
        max_distance: int = DEFAULT_SUGGESTION_DISTANCE,
) -> List[str]:
    """
    Return the vocabulary entries closest to a token.

    Distances are computed case-insensitively. Entries farther than
    `max_distance` are dropped; the rest are sorted by distance, with ties
    kept in vocabulary order, and truncated to `max_results`.

    Args:
        token: The unknown name.
        vocabulary: Canonical names, in canonical order.
        max_results: Maximum number of suggestions.
        max_distance: Largest edit distance still worth suggesting.

    Returns:
        List[str]: Suggestions, closest first. Empty when nothing is close.
    """
    if max_results <= 0 or max_distance < 0:
        return []

    folded = token.lower()
    scored: List[Tuple[int, str]] = []
    for entry in vocabulary:
        distance = edit_distance(folded, entry.lower(), max_distance)
        if distance <= max_distance:
            scored.append((distance, entry))

    scored.sort(key=lambda pair: pair[0])
    return [entry for _, entry in scored[:max_results]]


def edit_distance(a: str, b: str, limit: int) -> int:
    """
    Compute the Levenshtein distance between two strings, bounded by `limit`.

    Args:
        a: First string.
        b: Second string.
        limit: Once the distance is known to exceed this, stop early.

    Returns:
        int: The exact distance when it is <= limit, otherwise limit + 1.
    """
    if abs(len(a) - len(b)) > limit:
        return limit + 1
    if a == b:
        return 0

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        if min(current) > limit:
            return limit + 1
        previous = current

    return min(previous[-1], limit + 1)
