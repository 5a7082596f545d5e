"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from typing import List


class Suit(Enum):
    """Card suits."""
    SPADES = 's'
    HEARTS = 'h'
    DIAMONDS = 'd'
    CLUBS = 'c'

    def __str__(self) -> str:
        return self.value

    @property
    def bit(self) -> int:
        """One-hot suit flag occupying bits 12-15 of a card's bit pattern."""
        return SUIT_BITS[self]


class Rank(Enum):
    """Card ranks, lowest first."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        """Position of the rank, 0 for Two up to 12 for Ace."""
        return RANK_INDEX[self]

    @property
    def prime(self) -> int:
        return RANK_PRIMES[self.index]

    @property
    def readable(self) -> str:
        """Rank name as used in hand descriptions ('10', 'Jack', 'Ace', ...)."""
        return READABLE_RANKS[self.index]

    @classmethod
    def from_index(cls, index: int) -> 'Rank':
        """
        Look up a rank by its index.

        Raises:
            ValueError: If index is not in [0, 12]
        """
        if not 0 <= index < len(RANKS):
            raise ValueError(f"Invalid rank index: {index}")
        return RANKS[index]


RANKS: List[Rank] = list(Rank)
RANK_INDEX = {rank: i for i, rank in enumerate(RANKS)}

# One prime per rank so a product of five ranks identifies the rank multiset
RANK_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)

READABLE_RANKS = (
    '2', '3', '4', '5', '6', '7', '8', '9', '10', 'Jack', 'Queen', 'King', 'Ace'
)

SUIT_BITS = {
    Suit.SPADES: 0x1000,
    Suit.HEARTS: 0x2000,
    Suit.DIAMONDS: 0x4000,
    Suit.CLUBS: 0x8000,
}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (spades, hearts, diamonds, clubs)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @property
    def bit_pattern(self) -> int:
        """
        32-bit encoding of the card used by the hand evaluators.

        Layout, most significant first::

            xxxbbbbb bbbbbbbb cdhsrrrr xxpppppp

        b: one-hot rank flag, cdhs: one-hot suit flag,
        r: rank index (0-12), p: rank prime.
        """
        index = self.rank.index
        return (1 << (16 + index)) | self.suit.bit | (index << 8) | RANK_PRIMES[index]

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)

    @classmethod
    def list_from_string(cls, cards_str: str) -> List['Card']:
        """
        Parse a run of cards such as '2d9d2c9h3h' (whitespace is ignored).

        Raises:
            ValueError: If the string does not split into valid cards
        """
        compact = ''.join(cards_str.split())
        if len(compact) % 2:
            raise ValueError(f"Invalid card list: {cards_str}")
        return [cls.from_string(compact[i:i + 2]) for i in range(0, len(compact), 2)]
