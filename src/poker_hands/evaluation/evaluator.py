"""Main poker hand evaluation interface."""
from enum import Enum
from typing import Dict, List, Sequence, Type, Union
import logging

from poker_hands.core.card import Card
from poker_hands.evaluation.eval_types.badugi import BadugiEvaluator
from poker_hands.evaluation.eval_types.base import BaseEvaluator
from poker_hands.evaluation.eval_types.high import HighHandEvaluator
from poker_hands.evaluation.evaluation_config import evaluation_config_loader
from poker_hands.evaluation.types import BadugiRank, HandRank

logger = logging.getLogger(__name__)


class EvaluationType(str, Enum):
    """Types of poker hand evaluation."""
    HIGH = 'high'       # Traditional high-hand poker, 5 to 7 cards
    BADUGI = 'badugi'   # Four-card Badugi

    @classmethod
    def validate_with_config(cls, eval_type: 'EvaluationType') -> bool:
        """Validate that this enum value has a corresponding JSON configuration."""
        return evaluation_config_loader.get_config(eval_type.value) is not None


class HandEvaluator:
    """
    Main interface for poker hand evaluation.

    Evaluators are created on first use and reused afterwards.
    """

    EVALUATOR_CLASSES: Dict[EvaluationType, Type[BaseEvaluator]] = {
        EvaluationType.HIGH: HighHandEvaluator,
        EvaluationType.BADUGI: BadugiEvaluator,
    }

    def __init__(self):
        """Initialize evaluator."""
        self._evaluators: Dict[EvaluationType, BaseEvaluator] = {}

    def get_evaluator(self, eval_type: EvaluationType) -> BaseEvaluator:
        """
        Get evaluator for a specific game type.

        Raises:
            ValueError: If evaluation type not supported
        """
        if eval_type not in self._evaluators:
            evaluator_class = self.EVALUATOR_CLASSES.get(eval_type)
            if evaluator_class is None:
                raise ValueError(f"Unsupported evaluation type: {eval_type}")
            logger.debug(f"Creating {evaluator_class.__name__} for {eval_type.value}")
            self._evaluators[eval_type] = evaluator_class(eval_type.value)
        return self._evaluators[eval_type]

    def evaluate_hand(
        self,
        cards: Sequence[Card],
        eval_type: EvaluationType,
        board: Sequence[Card] = ()
    ) -> Union[HandRank, BadugiRank]:
        """
        Evaluate a poker hand.

        Args:
            cards: Player's cards
            eval_type: Type of evaluation to use
            board: Community cards, if the game has any

        Returns:
            The best rank the hand makes

        Raises:
            EvaluatorError: If the cards cannot be evaluated
        """
        result = self.get_evaluator(eval_type).evaluate(cards, board)
        if isinstance(result, list):
            return max(result)
        return result

    def compare_hands(
        self,
        hand1: Sequence[Card],
        hand2: Sequence[Card],
        eval_type: EvaluationType,
        board: Sequence[Card] = ()
    ) -> int:
        """
        Compare two poker hands sharing the same board.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie
        """
        result1 = self.evaluate_hand(hand1, eval_type, board)
        result2 = self.evaluate_hand(hand2, eval_type, board)

        if result1.strength > result2.strength:
            return 1
        if result1.strength < result2.strength:
            return -1
        return 0


# Global instance
evaluator = HandEvaluator()


def evaluate_high(player_hand: Sequence[Card], board: Sequence[Card] = ()) -> List[HandRank]:
    """Evaluate a 5 to 7 card high hand."""
    return evaluator.get_evaluator(EvaluationType.HIGH).evaluate(player_hand, board)


def evaluate_badugi(player_hand: Sequence[Card], board: Sequence[Card] = ()) -> BadugiRank:
    """Evaluate a four-card Badugi hand."""
    return evaluator.get_evaluator(EvaluationType.BADUGI).evaluate(player_hand, board)
