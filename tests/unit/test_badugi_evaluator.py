"""Tests for Badugi hand evaluation."""
from itertools import combinations

import pytest

from poker_hands.core.card import Card, Rank, Suit
from poker_hands.evaluation.errors import NotEnoughCards, TooManyCards
from poker_hands.evaluation.eval_types.badugi import (
    BadugiEvaluator, distinct_card_count, low_rank_index
)
from poker_hands.evaluation.evaluator import EvaluationType, HandEvaluator, evaluate_badugi
from poker_hands.evaluation.types import BadugiRank

# Ranks with the ace low, matching low_rank_index
LOW_RANKS = [Rank.ACE] + [rank for rank in Rank if rank != Rank.ACE]
SUITS = [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]


def badugi(cards_str: str) -> BadugiRank:
    return evaluate_badugi(Card.list_from_string(cards_str))


@pytest.mark.parametrize("hand,strength", [
    ("QsQhQdQc", 2),
    ("2h4hThQh", 12),
    ("2h4hTd2d", 78),
    ("3d7h6s7c", 294),
    ("As3dKc5h", 542),
    ("As2d5c6h", 871),
    ("As2d3c4h", 873),
])
def test_reference_strengths(hand, strength):
    assert badugi(hand).strength == strength


@pytest.mark.parametrize("hand,count", [
    ("QsQhQdQc", 1),
    ("2h4hThQh", 1),
    ("2h4hTd2d", 2),
    ("3d7h6s7c", 3),
    ("As2s3d4c", 3),
    ("As2d3c4h", 4),
])
def test_card_count_is_category(hand, count):
    assert badugi(hand).category == count


def test_three_card_hand_uses_best_subset():
    rank = badugi("As2s3d4c")
    assert rank.strength == 312
    assert rank.category == 3


def test_returns_badugi_rank():
    rank = badugi("As2d3c4h")
    assert isinstance(rank, BadugiRank)
    assert rank.description is None
    assert rank.strengths() == (873,)


def test_sub_rank_is_offset_within_card_count():
    assert badugi("KsQhJdTc").sub_rank == 0
    assert badugi("As2d3c4h").sub_rank == 495


def test_worst_four_beats_best_three():
    worst_four = badugi("KsQhJdTc")
    best_three = badugi("As2h3d4d")

    assert worst_four.strength == 378
    assert best_three.strength == 312
    assert worst_four > best_three


def test_order_of_cards_does_not_matter():
    assert badugi("4h3c2dAs") == badugi("As2d3c4h")
    assert badugi("7c6s7h3d") == badugi("3d7h6s7c")


def test_board_is_ignored():
    hand = Card.list_from_string("As3dKc5h")
    board = Card.list_from_string("2c2d2h")
    assert evaluate_badugi(hand, board) == evaluate_badugi(hand)


def test_equal_strength_ranks_are_equal():
    """Different rank sets can land on the same strength."""
    low_king = badugi("Ks2d3cAh")
    queen_nine = badugi("QsJdTc9h")

    assert low_king.strength == queen_nine.strength == 543
    assert low_king == queen_nine
    assert hash(low_king) == hash(queen_nine)


def test_not_enough_cards():
    with pytest.raises(NotEnoughCards) as excinfo:
        badugi("As2d3c")
    assert excinfo.value.minimum == 4
    assert str(excinfo.value) == "Player hand must have at least 4 cards"


def test_too_many_cards():
    with pytest.raises(TooManyCards) as excinfo:
        badugi("As2d3c4h5s")
    assert excinfo.value.maximum == 4


def test_evaluate_hand_through_facade():
    evaluator = HandEvaluator()
    hand = Card.list_from_string("As2d3c4h")
    rank = evaluator.evaluate_hand(hand, EvaluationType.BADUGI)
    assert rank.strength == 873


def test_four_card_badugis_never_invert():
    """Lower four-card badugis never score below higher ones."""
    evaluator = BadugiEvaluator()

    hands = []
    for ranks in combinations(LOW_RANKS, 4):
        cards = [Card(rank, suit) for rank, suit in zip(ranks, SUITS)]
        key = sorted((low_rank_index(card) for card in cards), reverse=True)
        hands.append((key, evaluator.evaluate(cards)))

    assert len(hands) == 715

    # Best (lowest) hands first
    hands.sort(key=lambda item: item[0])
    strengths = [rank.strength for _, rank in hands]
    assert strengths[0] == 873
    assert strengths[-1] == 378
    assert all(a >= b for a, b in zip(strengths, strengths[1:]))


@pytest.mark.parametrize("cards_str,expected", [
    ("As2d3c4h", 4),
    ("As2s3s4s", 1),
    ("AsAdAcAh", 1),
    ("As2s3d4d", 2),
    ("As2d2c3c", 3),
])
def test_distinct_card_count(cards_str, expected):
    assert distinct_card_count(Card.list_from_string(cards_str)) == expected


def test_low_rank_index():
    assert low_rank_index(Card(Rank.ACE, Suit.SPADES)) == 0
    assert low_rank_index(Card(Rank.TWO, Suit.SPADES)) == 1
    assert low_rank_index(Card(Rank.KING, Suit.SPADES)) == 12


@pytest.mark.parametrize("hand,strength", [
    ("As2s3d3c", 80),
    ("2h3h4d4c", 78),
])
def test_overlapping_clashes_fall_back_to_smaller_badugi(hand, strength):
    rank = badugi(hand)
    assert rank.category == 2
    assert rank.strength == strength


def test_every_low_hand_evaluates():
    """All four-card hands from aces to fours, clashes included, get a rank."""
    deck = [Card(rank, suit) for rank in LOW_RANKS[:4] for suit in SUITS]
    evaluator = BadugiEvaluator()

    for hand in combinations(deck, 4):
        rank = evaluator.evaluate(list(hand))
        assert 1 <= rank.category <= 4
        assert rank.category <= distinct_card_count(hand)


def test_board_used_when_config_enables_it():
    evaluator = BadugiEvaluator()
    evaluator.uses_board = True
    evaluator.max_cards = 7

    hand = Card.list_from_string("KsKhKdKc")
    board = Card.list_from_string("As2d3c")
    assert evaluator.evaluate(hand, board).category == 4
