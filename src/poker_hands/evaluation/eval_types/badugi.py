"""Badugi hand evaluation."""
from itertools import combinations
from math import comb
from typing import Optional, Sequence
import logging

from poker_hands.core.card import Card
from poker_hands.evaluation.constants import (
    RANK_COUNT, RANK_FLAGS_MASK, RANK_FLAGS_SHIFT, SUIT_FLAGS_MASK, SUIT_FLAGS_SHIFT
)
from poker_hands.evaluation.errors import UnknownError
from poker_hands.evaluation.eval_types.base import BaseEvaluator
from poker_hands.evaluation.types import BadugiRank, HandRank

logger = logging.getLogger(__name__)


def distinct_card_count(cards: Sequence[Card]) -> int:
    """
    Count how many cards can be kept with no rank or suit repeated.

    Clears the lowest rank flag and the lowest suit flag together until one
    of the two unions runs out.
    """
    suit_bits = 0
    rank_bits = 0
    for card in cards:
        pattern = card.bit_pattern
        suit_bits |= (pattern >> SUIT_FLAGS_SHIFT) & SUIT_FLAGS_MASK
        rank_bits |= (pattern >> RANK_FLAGS_SHIFT) & RANK_FLAGS_MASK

    count = 0
    while suit_bits and rank_bits:
        suit_bits &= suit_bits - 1
        rank_bits &= rank_bits - 1
        count += 1
    return count


def low_rank_index(card: Card) -> int:
    """Rank position with the ace low: Ace 0, Two 1, ... King 12."""
    return (card.rank.index + 1) % RANK_COUNT


class BadugiEvaluator(BaseEvaluator):
    """
    Evaluator for Badugi.

    In Badugi:
    - Only cards of different ranks and different suits count
    - More counting cards always beat fewer
    - Between hands of the same size, lower cards win, ace low
    """

    def __init__(self, eval_type: str = 'badugi'):
        super().__init__(eval_type)

    def _score(self, cards: Sequence[Card]) -> HandRank:
        """
        Rank a qualifying hand with the combinatorial number system.

        Every hand of ``n`` cards outranks all hands with fewer cards, so
        the base skips past the C(13, i) hands of each smaller size. The
        cards, highest first, then add the number of same-size hands that
        are worse.
        """
        card_ranks = sorted((low_rank_index(card) for card in cards), reverse=True)
        card_count = len(card_ranks)

        base_strength = 1 + sum(comb(RANK_COUNT, i) for i in range(1, card_count))

        offset = 0
        prev = RANK_COUNT
        for i, rank in enumerate(card_ranks):
            for s in range(rank + 1, prev):
                offset += comb(s - 1, card_count - 1 - i)
            prev = rank

        return HandRank(strength=base_strength + offset, category=card_count, sub_rank=offset)

    def evaluate(
        self,
        player_hand: Sequence[Card],
        board: Sequence[Card] = ()
    ) -> BadugiRank:
        """
        Evaluate a Badugi hand.

        Args:
            player_hand: Exactly four cards
            board: Ignored unless the badugi config sets uses_board

        Returns:
            The rank of the best qualifying subset

        Raises:
            NotEnoughCards: Fewer than four cards
            TooManyCards: More than four cards
            UnknownError: No qualifying subset was found
        """
        cards = self._collect_cards(player_hand, board)
        self._validate_hand_size(cards, "Player hand")

        # The flag count can overshoot when a suit clash and a rank clash
        # overlap (As2s3d3c), so step down until some subset qualifies.
        best: Optional[HandRank] = None
        target = distinct_card_count(cards)
        while best is None and target > 0:
            for candidate in combinations(cards, target):
                if distinct_card_count(candidate) != target:
                    continue
                rank = self._score(candidate)
                if best is None or rank > best:
                    best = rank
            target -= 1

        if best is None:
            raise UnknownError("No valid rank was generated")

        logger.debug(f"Evaluated badugi {''.join(str(c) for c in player_hand)}: {best}")
        return BadugiRank(best)
