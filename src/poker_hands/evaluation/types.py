# src/poker_hands/evaluation/types.py
"""Common types for poker evaluation."""
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, Tuple


class StrengthThresholds(Protocol):
    """Anything that can list its comparison thresholds for cross-game tooling."""

    def strengths(self) -> Tuple[int, ...]:
        ...

    def iter_strengths(self) -> Iterator[int]:
        ...


@dataclass(frozen=True)
class HandRank:
    """
    Comparable result of a hand evaluation.

    Attributes:
        strength: Overall hand value, higher is better
        category: Coarse hand class (0 when not set)
        sub_rank: Position within the category, 1 is the weakest
        description: Human-readable description of hand
    """
    strength: int
    category: int = 0
    sub_rank: int = 0
    description: Optional[str] = None

    # Equality stays field-wise; ordering only looks at strength.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.strength < other.strength

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.strength <= other.strength

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.strength > other.strength

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.strength >= other.strength

    def strengths(self) -> Tuple[int, ...]:
        """Ordered comparison thresholds of this rank."""
        return (self.strength,)

    def iter_strengths(self) -> Iterator[int]:
        """Fresh iterator over :meth:`strengths`."""
        return iter(self.strengths())


@dataclass(frozen=True, eq=False)
class BadugiRank:
    """A badugi hand rank, compared and hashed by strength alone."""
    rank: HandRank

    @property
    def strength(self) -> int:
        return self.rank.strength

    @property
    def category(self) -> int:
        """Number of cards in the badugi."""
        return self.rank.category

    @property
    def sub_rank(self) -> int:
        return self.rank.sub_rank

    @property
    def description(self) -> Optional[str]:
        return self.rank.description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BadugiRank):
            return NotImplemented
        return self.strength == other.strength

    def __hash__(self) -> int:
        return hash(self.strength)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BadugiRank):
            return NotImplemented
        return self.strength < other.strength

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BadugiRank):
            return NotImplemented
        return self.strength <= other.strength

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BadugiRank):
            return NotImplemented
        return self.strength > other.strength

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BadugiRank):
            return NotImplemented
        return self.strength >= other.strength

    def strengths(self) -> Tuple[int, ...]:
        return self.rank.strengths()

    def iter_strengths(self) -> Iterator[int]:
        return self.rank.iter_strengths()
