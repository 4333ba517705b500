"""
Import tracking for generated code.

An ImportMap records which names each generated fragment needs from which
module. Maps are immutable: merging always returns a new map.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ImportMap:
    """Mapping of module name to the set of names imported from it."""

    entries: Mapping[str, FrozenSet[str]] = field(default_factory=dict)

    @classmethod
    def of(cls, module: str, *names: str) -> "ImportMap":
        """Create a map requiring ``names`` from a single module."""
        return cls({module: frozenset(names)})

    @classmethod
    def from_mapping(
        cls, mapping: Optional[Mapping[str, Iterable[str]]] = None
    ) -> "ImportMap":
        """
        Build an ImportMap from a plain mapping.

        Values may be any iterable of names; a bare string counts as one
        name, not a sequence of characters.
        """
        if not mapping:
            return cls()

        entries: Dict[str, FrozenSet[str]] = {}
        for module, names in mapping.items():
            if isinstance(names, str):
                names = [names]
            entries[module] = entries.get(module, frozenset()) | frozenset(names)
        return cls(entries)

    def merge(self, other: "ImportMap") -> "ImportMap":
        """Return a new map holding the union of both maps, per module."""
        if not other:
            return self
        if not self:
            return other

        merged: Dict[str, FrozenSet[str]] = dict(self.entries)
        for module, names in other.entries.items():
            merged[module] = merged.get(module, frozenset()) | names
        return ImportMap(merged)

    def __or__(self, other: "ImportMap") -> "ImportMap":
        return self.merge(other)

    def __bool__(self) -> bool:
        return any(self.entries.values())

    def __contains__(self, module: str) -> bool:
        return module in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImportMap):
            return NotImplemented
        return self._normalized() == other._normalized()

    def __hash__(self) -> int:
        return hash(frozenset(self._normalized().items()))

    def _normalized(self) -> Dict[str, FrozenSet[str]]:
        return {module: names for module, names in self.entries.items() if names}

    def names_for(self, module: str) -> Tuple[str, ...]:
        """Names imported from ``module``, sorted."""
        return tuple(sorted(self.entries.get(module, ())))

    def to_dict(self) -> Dict[str, List[str]]:
        """Plain, JSON-friendly view with sorted name lists."""
        return {module: list(self.names_for(module)) for module in self._normalized()}

    def to_statements(self) -> List[str]:
        """
        Format as ``from <module> import <names>`` lines.

        Modules keep first-seen order; names are sorted alphabetically.
        """
        return [
            f"from {module} import {', '.join(self.names_for(module))}"
            for module in self._normalized()
        ]
