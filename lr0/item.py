from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Self

from lr0.grammar import ARROW, Production

DOT = "•"


@dataclass(frozen=True, order=True)
class Item:
    production: Production
    dot_pos: int = 0

    def __post_init__(self):
        if not 0 <= self.dot_pos <= len(self.production):
            raise ValueError(f"Dot position {self.dot_pos} is out of range for `{self.production}`")

    @classmethod
    def from_production(cls, production: Production) -> Self:
        return cls(production=production, dot_pos=0)

    def advance(self) -> Self:
        if self.is_complete:
            raise IndexError("Dot position exceeds symbols amount")
        return type(self)(production=self.production, dot_pos=self.dot_pos + 1)

    @property
    def lhs(self) -> str:
        return self.production.lhs

    @property
    def is_complete(self) -> bool:
        return self.dot_pos == len(self.production)

    def next_symbol(self) -> str | None:
        """Returns the symbol right after the dot, `None` for a complete item."""
        if self.is_complete:
            return None
        return self.production.rhs[self.dot_pos]

    def __repr__(self):
        return f"Item({self})"

    def __str__(self) -> str:
        rule = list(self.production.rhs)
        rule.insert(self.dot_pos, DOT)
        return f"{self.lhs} {ARROW} {''.join(rule)}"


class ItemSet:
    """Immutable set of LR(0) items.

    Items are kept in a sorted tuple, which serves as the canonical form for
    equality, hashing and iteration order. Two item sets holding the same
    items are the same state no matter how they were produced.
    """

    __slots__ = ("_items", "_key")

    def __init__(self, items: Iterable[Item] = ()):
        self._items = frozenset(items)
        self._key = tuple(sorted(self._items))

    def __iter__(self) -> Iterator[Item]:
        return iter(self._key)

    def __len__(self) -> int:
        return len(self._key)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __bool__(self) -> bool:
        return bool(self._key)

    def __eq__(self, other) -> bool:
        if isinstance(other, ItemSet):
            return self._key == other._key
        if isinstance(other, (set, frozenset)):
            return self._items == other
        return NotImplemented

    def __hash__(self):
        return hash(self._key)

    def __or__(self, other: Iterable[Item]) -> "ItemSet":
        return ItemSet(self._items.union(other))

    def next_symbols(self) -> set[str]:
        return {s for s in (item.next_symbol() for item in self._key) if s is not None}

    def complete_items(self) -> list[Item]:
        return [item for item in self._key if item.is_complete]

    def kernel(self) -> "ItemSet":
        return ItemSet(item for item in self._key if item.dot_pos > 0 or item.production.is_start)

    def __repr__(self):
        return f"ItemSet({{{', '.join(str(v) for v in self._key)}}})"
