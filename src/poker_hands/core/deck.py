"""Deck implementation."""
from typing import List, Optional
import logging
import random
import secrets

from .card import Card, Rank, Suit

logger = logging.getLogger(__name__)


class Deck:
    """
    A deck of playing cards with a muck.

    Cards are dealt from the end of ``cards``. Discarded cards go to the muck
    and can be shuffled back in behind the cards still in the deck.

    Attributes:
        cards: List of cards in the deck
        muck: Discarded cards waiting to be reshuffled
        seed: Seed of the last shuffle, if the deck has been shuffled
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize a new deck.

        Args:
            seed: If given, shuffle the fresh deck with this seed
        """
        self.cards: List[Card] = []
        self.muck: List[Card] = []
        self.seed: Optional[int] = None
        self._initialize_deck()
        if seed is not None:
            self.shuffle(seed)

    def _initialize_deck(self) -> None:
        """Create a fresh deck of cards."""
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(rank=rank, suit=suit))

    @staticmethod
    def _shuffle_cards(cards: List[Card], seed: Optional[int]) -> int:
        """Shuffle cards in place and return the seed that was used."""
        if seed is None:
            seed = secrets.randbits(64)
        random.Random(seed).shuffle(cards)
        return seed

    def shuffle(self, seed: Optional[int] = None) -> int:
        """
        Shuffle the deck.

        Args:
            seed: Seed for a reproducible shuffle; drawn from system
                  entropy when omitted

        Returns:
            The seed used
        """
        self.seed = self._shuffle_cards(self.cards, seed)
        logger.debug(f"Shuffled {len(self.cards)} cards")
        return self.seed

    def muck_cards(self, cards: List[Card]) -> None:
        """Put cards into the muck."""
        self.muck.extend(cards)

    def check_deal_cards(self, count: int, include_muck: bool = False) -> bool:
        """Return True if ``count`` cards can be dealt."""
        available = len(self.cards)
        if include_muck:
            available += len(self.muck)
        return available >= count

    def deal_card(self) -> Optional[Card]:
        """
        Deal a single card from the top of the deck.

        Returns:
            Card or None if deck is empty
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def deal_cards(self, count: int, include_muck: bool = False) -> Optional[List[Card]]:
        """
        Deal multiple cards from the top of the deck.

        Args:
            count: Number of cards to deal
            include_muck: Reshuffle the muck back in if the deck runs short

        Returns:
            List of cards, or None if not enough cards are available
        """
        if not self.check_deal_cards(count, include_muck):
            return None
        if len(self.cards) < count:
            logger.debug(f"Deck short by {count - len(self.cards)} cards, reshuffling muck")
            self.reshuffle_muck()
        return [self.cards.pop() for _ in range(count)]

    def draw_cards(
        self,
        count: int,
        discards: Optional[List[Card]] = None,
        include_muck: bool = False
    ) -> Optional[List[Card]]:
        """
        Discard cards into the muck and deal replacements.

        Args:
            count: Number of replacement cards
            discards: Cards to put into the muck first
            include_muck: Allow the muck (discards included) to be reshuffled in

        Returns:
            The replacement cards, or None if not enough cards are available
        """
        pending = len(discards) if discards and include_muck else 0
        if not self.check_deal_cards(count - pending, include_muck):
            return None
        if discards:
            self.muck_cards(discards)
        return self.deal_cards(count, include_muck)

    def reshuffle_muck(self, seed: Optional[int] = None) -> int:
        """
        Shuffle the muck and place it behind the remaining cards.

        Returns:
            The seed used for the muck shuffle
        """
        used = self._shuffle_cards(self.muck, seed)
        self.cards = self.muck + self.cards
        self.muck = []
        return used

    # Direct card management
    def add_card(self, card: Card) -> None:
        """Add a card to the deck."""
        self.cards.append(card)

    def add_cards(self, cards: List[Card]) -> None:
        """Add multiple cards to the deck."""
        self.cards.extend(cards)

    def remove_card(self, card: Card) -> Card:
        """
        Remove a specific card from the deck.

        Raises:
            ValueError: If card not in deck
        """
        try:
            self.cards.remove(card)
        except ValueError:
            raise ValueError(f"Card {card} not in deck")
        return card

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    def clear(self) -> None:
        """Remove all cards from the deck and the muck."""
        self.cards.clear()
        self.muck.clear()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
