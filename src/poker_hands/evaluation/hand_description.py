"""Readable descriptions of high hand categories and sub-ranks."""
import math
from typing import Callable, Dict

from poker_hands.core.card import Rank
from poker_hands.evaluation.constants import HIGH_CARD_BREAKPOINTS, HandCategory
from poker_hands.evaluation.errors import DescriptionError


class HandDescriber:
    """
    Generates human-readable descriptions for high hands.

    Works from the (category, sub_rank) decomposition of a raw score, so no
    cards are needed. Sub-ranks count from 1 for the weakest hand of each
    category.
    """

    def __init__(self):
        self._describers: Dict[int, Callable[[int], str]] = {
            HandCategory.HIGH_CARD: self._describe_high_card,
            HandCategory.PAIR: self._describe_pair,
            HandCategory.TWO_PAIR: self._describe_two_pair,
            HandCategory.TRIPS: self._describe_three_of_kind,
            HandCategory.STRAIGHT: self._describe_straight,
            HandCategory.FLUSH: self._describe_flush,
            HandCategory.FULL_HOUSE: self._describe_full_house,
            HandCategory.QUADS: self._describe_four_of_kind,
            HandCategory.STRAIGHT_FLUSH: self._describe_straight_flush,
        }

    def describe(self, category: int, sub_rank: int) -> str:
        """
        Describe a hand.

        Raises:
            DescriptionError: If the category is unknown or the sub-rank is
                              out of range for it
        """
        describer = self._describers.get(category)
        if describer is None:
            raise DescriptionError("Hand rank did not have a valid hand category")
        if sub_rank < 1:
            name = HandCategory(category).name.lower().replace('_', ' ')
            raise DescriptionError(f"Sub rank for {name} was not valid")
        return describer(sub_rank)

    @staticmethod
    def _plural(index: int, error: str) -> str:
        try:
            return Rank.from_index(index).readable + 's'
        except ValueError:
            raise DescriptionError(error)

    @staticmethod
    def _high_card_name(sub_rank: int, error: str) -> str:
        for upper, name in HIGH_CARD_BREAKPOINTS:
            if sub_rank <= upper:
                return name
        raise DescriptionError(error)

    def _describe_high_card(self, sub_rank: int) -> str:
        name = self._high_card_name(sub_rank, "Sub rank for high card was not valid")
        return f"{name} High"

    def _describe_flush(self, sub_rank: int) -> str:
        name = self._high_card_name(sub_rank, "Sub rank for flush was not valid")
        return f"{name} High Flush"

    def _describe_pair(self, sub_rank: int) -> str:
        pair = self._plural((sub_rank - 1) // 220, "Sub rank for one pair was not valid")
        return f"Pair of {pair}"

    def _describe_two_pair(self, sub_rank: int) -> str:
        # Pairs are numbered triangularly: high pair h owns h * (h - 1) / 2
        # low-pair slots of 11 kickers each.
        first_pair = math.floor(math.sqrt(0.25 + (2 * (sub_rank - 1)) // 11) - 0.5) + 1
        kicker_index = sub_rank - (first_pair - 1) * first_pair // 2 * 11

        error = "Sub rank for two pair was not valid"
        first = self._plural(first_pair, error)
        second = self._plural((kicker_index - 1) // 11, error)
        return f"Two Pair of {first} and {second}"

    def _describe_three_of_kind(self, sub_rank: int) -> str:
        trips = self._plural((sub_rank - 1) // 66, "Sub rank for three of a kind was not valid")
        return f"Trip {trips}"

    def _describe_straight(self, sub_rank: int) -> str:
        if sub_rank > 10:
            raise DescriptionError("Sub rank for straight was not valid")
        return f"{Rank.from_index(sub_rank + 2).readable} High Straight"

    def _describe_straight_flush(self, sub_rank: int) -> str:
        if sub_rank > 10:
            raise DescriptionError("Sub rank for straight flush was not valid")
        return f"{Rank.from_index(sub_rank + 2).readable} High Straight Flush"

    def _describe_full_house(self, sub_rank: int) -> str:
        trip_rank = (sub_rank - 1) // 12
        pair_rank = (sub_rank - 1) % 12
        if pair_rank >= trip_rank:
            pair_rank += 1

        error = "Sub rank for full house was not valid"
        return f"{self._plural(trip_rank, error)} Full of {self._plural(pair_rank, error)}"

    def _describe_four_of_kind(self, sub_rank: int) -> str:
        quads = self._plural((sub_rank - 1) // 12, "Sub rank for four of a kind was not valid")
        return f"Quad {quads}"


hand_describer = HandDescriber()


def describe_high_hand(category: int, sub_rank: int) -> str:
    """Convenience function wrapping the shared describer."""
    return hand_describer.describe(category, sub_rank)
