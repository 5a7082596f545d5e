"""Base class for poker hand evaluators."""
from abc import ABC, abstractmethod
from typing import Any, Sequence, List

from poker_hands.core.card import Card
from poker_hands.evaluation.constants import SUIT_ORDER, RANK_ORDERS
from poker_hands.evaluation.errors import NotEnoughCards, TooManyCards
from poker_hands.evaluation.evaluation_config import ConfigError, evaluation_config_loader


class BaseEvaluator(ABC):
    """Base class for hand evaluators."""

    def __init__(self, eval_type: str):
        """
        Initialize evaluator.

        Args:
            eval_type: Type of evaluation, used to look up its configuration

        Raises:
            ConfigError: If no configuration exists for the evaluation type
        """
        config = evaluation_config_loader.get_config(eval_type)
        if config is None:
            raise ConfigError(f"No configuration found for evaluation type: {eval_type}")

        self.eval_type = eval_type
        self.config = config
        self.min_cards = config.min_cards
        self.max_cards = config.max_cards
        self.uses_board = config.uses_board
        self.rank_order = RANK_ORDERS[config.rank_order]

    def _collect_cards(self, player_hand: Sequence[Card], board: Sequence[Card]) -> List[Card]:
        """Cards that take part in the hand; the board is dropped unless the config uses it."""
        if self.uses_board:
            return list(player_hand) + list(board)
        return list(player_hand)

    def _validate_hand_size(self, cards: Sequence[Card], context: str) -> None:
        """
        Ensure the cards fall within the configured bounds.

        Raises:
            NotEnoughCards: Fewer than min_cards
            TooManyCards: More than max_cards
        """
        if len(cards) < self.min_cards:
            raise NotEnoughCards(context, self.min_cards)
        if len(cards) > self.max_cards:
            raise TooManyCards(context, self.max_cards)

    def sort_cards(self, cards: Sequence[Card]) -> List[Card]:
        """
        Sort cards based on evaluation type's rank ordering.

        Args:
            cards: Cards to sort

        Returns:
            Sorted list, best rank first, ties broken by suit
        """
        def get_sort_key(card: Card) -> tuple:
            return (self.rank_order.index(card.rank.value), SUIT_ORDER[card.suit])

        return sorted(cards, key=get_sort_key)

    @abstractmethod
    def evaluate(
        self,
        player_hand: Sequence[Card],
        board: Sequence[Card] = ()
    ) -> Any:
        """Evaluate a poker hand."""
        pass
