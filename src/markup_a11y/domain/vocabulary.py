from __future__ import annotations

"""
Static Name Vocabularies.

An immutable, ordered set of canonical names used to validate attribute
names and to rank suggestions for near misses.
"""

from typing import Iterable, Iterator, Tuple

from markup_a11y.domain.constants import ARIA_PROPERTIES


class Vocabulary:
    """
    Ordered, read-only collection of canonical names.

    Membership is case-insensitive; iteration follows the canonical order
    of the reference list, which is also the tie-break order for suggestions.
    """

    __slots__ = ("_names", "_folded")

    def __init__(self, names: Iterable[str]) -> None:
        ordered: Tuple[str, ...] = tuple(dict.fromkeys(names))
        object.__setattr__(self, "_names", ordered)
        object.__setattr__(self, "_folded", frozenset(n.lower() for n in ordered))

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError("Vocabulary is immutable")

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._folded

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._names)} names)"


ARIA_VOCABULARY = Vocabulary(ARIA_PROPERTIES)
