from __future__ import annotations

"""
Alias Configuration Models.

Two-layer lookup tables that map custom component names to native tags
and attribute roles to the literal attribute names that fill them. Each
table keeps its declaration order: exact keys are consulted first, then
glob keys in the order they were declared.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

_WILDCARDS = ("*", "?")


def is_glob(pattern: str) -> bool:
    """Check whether a configuration key contains wildcard characters."""
    return any(w in pattern for w in _WILDCARDS)


# -----------------------------------------------------------------------------
# ORDERED LOOKUP TABLES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class _OrderedTable:
    """
    Ordered (pattern, value) entries with an exact-then-glob lookup.

    Attributes:
        entries: Declared entries in configuration order. Later duplicates
                 of an exact key are ignored; the first declaration wins.
    """
    entries: Tuple[Tuple[str, object], ...] = ()
    _exact: Dict[str, object] = field(default_factory=dict, init=False, repr=False, compare=False)
    _globs: Tuple[Tuple[str, object], ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        exact: Dict[str, object] = {}
        globs = []
        for pattern, value in self.entries:
            if is_glob(pattern):
                globs.append((pattern, value))
            else:
                exact.setdefault(pattern, value)
        object.__setattr__(self, "_exact", exact)
        object.__setattr__(self, "_globs", tuple(globs))

    def lookup(self, name: str, matcher: Callable[[str, str], bool]) -> Optional[object]:
        """
        Resolve a name against the table.

        Args:
            name: Literal name to resolve.
            matcher: Glob predicate `(name, pattern) -> bool`.

        Returns:
            Optional[object]: The mapped value, or None when nothing matches.
        """
        if name in self._exact:
            return self._exact[name]
        for pattern, value in self._globs:
            if matcher(name, pattern):
                return value
        return None

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


@dataclass(frozen=True)
class ComponentMap(_OrderedTable):
    """Component name pattern -> native tag."""

    @classmethod
    def from_pairs(cls, pairs: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> "ComponentMap":
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return cls(tuple((str(k), str(v)) for k, v in items))


@dataclass(frozen=True)
class AttributeMap(_OrderedTable):
    """Attribute role pattern -> ordered tuple of literal attribute names."""

    @classmethod
    def from_pairs(
            cls,
            pairs: Union[Mapping[str, Iterable[str]], Iterable[Tuple[str, Iterable[str]]]],
    ) -> "AttributeMap":
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return cls(tuple((str(k), tuple(str(n) for n in v)) for k, v in items))


# -----------------------------------------------------------------------------
# LAYERED CONFIGURATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AliasLayer:
    """
    One configuration source.

    Attributes:
        components: Component name patterns to native tags.
        attributes: Attribute roles to accepted literal attribute names.
    """
    components: ComponentMap = field(default_factory=ComponentMap)
    attributes: AttributeMap = field(default_factory=AttributeMap)


@dataclass(frozen=True)
class AliasConfig:
    """
    Resolved alias configuration for a single rule invocation.

    Attributes:
        options: Per-rule option layer. Always consulted first.
        settings: Project-wide settings layer.
    """
    options: AliasLayer = field(default_factory=AliasLayer)
    settings: AliasLayer = field(default_factory=AliasLayer)

    @property
    def layers(self) -> Tuple[AliasLayer, AliasLayer]:
        return self.options, self.settings
