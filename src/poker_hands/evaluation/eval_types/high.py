"""Standard high-hand poker evaluation."""
from collections import Counter
from itertools import combinations
from typing import List, Optional, Sequence, Tuple
import logging

from poker_hands.core.card import Card
from poker_hands.evaluation.cache import get_lookup_tables
from poker_hands.evaluation.constants import (
    HIGH_STRENGTH_BASE, PRIME_MASK, RANK_FLAGS_SHIFT, STRENGTH_THRESHOLDS, SUIT_MASK
)
from poker_hands.evaluation.errors import DescriptionError, UnknownError
from poker_hands.evaluation.eval_types.base import BaseEvaluator
from poker_hands.evaluation.hand_description import describe_high_hand
from poker_hands.evaluation.tables import LookupTables, mix_product
from poker_hands.evaluation.types import HandRank

logger = logging.getLogger(__name__)


def find_fast(product: int, tables: LookupTables) -> int:
    """Perfect hash of a five-card prime product into ``hash_values``."""
    slot, bucket = mix_product(product)
    return slot ^ tables.hash_adjust[bucket]


def eval_five_cards(
    c0: int, c1: int, c2: int, c3: int, c4: int,
    tables: Optional[LookupTables] = None
) -> int:
    """
    Score five encoded cards.

    Returns:
        Raw score, 1 for a royal flush up to 7462 for the worst high card
    """
    if tables is None:
        tables = get_lookup_tables()

    q = (c0 | c1 | c2 | c3 | c4) >> RANK_FLAGS_SHIFT

    # A repeated card can be "suited" without holding five ranks
    if c0 & c1 & c2 & c3 & c4 & SUIT_MASK and q in tables.flushes:
        return tables.flushes[q]
    if q in tables.unique5:
        return tables.unique5[q]

    product = (
        (c0 & PRIME_MASK) * (c1 & PRIME_MASK) * (c2 & PRIME_MASK)
        * (c3 & PRIME_MASK) * (c4 & PRIME_MASK)
    )
    return tables.hash_values[find_fast(product, tables)]


def decompose_score(raw_score: int) -> Tuple[int, int]:
    """
    Split a raw score into (category, sub_rank).

    Categories are 1 (high card) to 9 (straight flush); the sub-rank is 1 for
    the weakest hand of its category. Returns (0, 0) for a score below 1.
    """
    if raw_score < 1:
        return 0, 0

    ranks_left = raw_score - 1
    for i in range(len(STRENGTH_THRESHOLDS) - 1, -1, -1):
        population = STRENGTH_THRESHOLDS[i]
        if ranks_left < population:
            return i + 1, population - ranks_left
        ranks_left -= population
    return 0, 0


class HighHandEvaluator(BaseEvaluator):
    """Evaluator for standard high-hand poker."""

    def __init__(self, eval_type: str = 'high', tables: Optional[LookupTables] = None):
        super().__init__(eval_type)
        self.tables = tables if tables is not None else get_lookup_tables()

    def evaluate(
        self,
        player_hand: Sequence[Card],
        board: Sequence[Card] = ()
    ) -> List[HandRank]:
        """
        Evaluate the best five-card high hand among the player's and board cards.

        Args:
            player_hand: Player's cards
            board: Community cards

        Returns:
            Single-element list with the hand's rank

        Raises:
            NotEnoughCards: Fewer than five cards in total
            TooManyCards: More than seven cards in total
            UnknownError: More than four cards share a rank or no five-card
                          combination could be scored
        """
        cards = self._collect_cards(player_hand, board)
        self._validate_hand_size(cards, "Set of cards")
        if max(Counter(card.rank for card in cards).values()) > 4:
            # Five of one rank has no entry in the scoring tables
            raise UnknownError("Set of cards holds more than four cards of one rank")

        patterns = [card.bit_pattern for card in cards]
        best_score = min(
            (eval_five_cards(*combo, tables=self.tables) for combo in combinations(patterns, 5)),
            default=None
        )
        if best_score is None:
            raise UnknownError("Could not get the minimum rank")

        category, sub_rank = decompose_score(best_score)
        try:
            description = describe_high_hand(category, sub_rank)
        except DescriptionError as e:
            logger.warning(f"No description for category {category}, sub rank {sub_rank}: {e}")
            description = str(e)

        rank = HandRank(
            strength=HIGH_STRENGTH_BASE - best_score,
            category=category,
            sub_rank=sub_rank,
            description=description,
        )
        logger.debug(f"Evaluated {''.join(str(c) for c in cards)}: {rank}")
        return [rank]
