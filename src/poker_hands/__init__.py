"""Poker hand ranking package."""

from poker_hands.core.card import Card, Rank, Suit
from poker_hands.core.deck import Deck
from poker_hands.evaluation.errors import (
    EvaluatorError, NotEnoughCards, TooManyCards, UnknownError
)
from poker_hands.evaluation.evaluator import (
    EvaluationType, HandEvaluator, evaluate_badugi, evaluate_high
)
from poker_hands.evaluation.types import BadugiRank, HandRank

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "EvaluatorError",
    "NotEnoughCards",
    "TooManyCards",
    "UnknownError",
    "EvaluationType",
    "HandEvaluator",
    "evaluate_badugi",
    "evaluate_high",
    "BadugiRank",
    "HandRank",
]
