"""Constants for poker hand evaluation."""
from enum import IntEnum

from poker_hands.core.card import Suit


class HandCategory(IntEnum):
    """High-hand categories, weakest first."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    TRIPS = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    QUADS = 8
    STRAIGHT_FLUSH = 9


# Suit ordering used when displaying cards
SUIT_ORDER = {
    Suit.SPADES: 0,
    Suit.HEARTS: 1,
    Suit.DIAMONDS: 2,
    Suit.CLUBS: 3,
}

# Standard rank ordering (A high)
BASE_RANKS = ['A', 'K', 'Q', 'J', 'T', '9', '8', '7', '6', '5', '4', '3', '2']

# Badugi
BADUGI_RANKS = ['A', '2', '3', '4', '5', '6', '7', '8', '9', 'T', 'J', 'Q', 'K']

RANK_ORDERS = {
    'BASE_RANKS': BASE_RANKS,
    'BADUGI_RANKS': BADUGI_RANKS,
}

# Number of distinct five-card hands per category, indexed by category - 1
# (high card first, straight flush last). Raw scores run the other way:
# straight flushes take 1-10, quads 11-166 and so on down to 7462.
STRENGTH_THRESHOLDS = (1277, 2860, 858, 858, 10, 1277, 156, 156, 10)

DISTINCT_HIGH_HANDS = sum(STRENGTH_THRESHOLDS)  # 7462
HIGH_STRENGTH_BASE = DISTINCT_HIGH_HANDS + 1

# Upper sub-rank bound of each high card for high card hands and flushes
HIGH_CARD_BREAKPOINTS = (
    (4, '7'),
    (18, '8'),
    (52, '9'),
    (121, '10'),
    (246, 'Jack'),
    (455, 'Queen'),
    (784, 'King'),
    (1277, 'Ace'),
)

# Bit pattern fields
SUIT_MASK = 0xF000
RANK_FLAGS_SHIFT = 16
RANK_FLAGS_MASK = 0x1FFF
SUIT_FLAGS_SHIFT = 12
SUIT_FLAGS_MASK = 0xF
PRIME_MASK = 0xFF

# Rank flags of the ten straights, ace high first, wheel last
STRAIGHT_MASKS = tuple(0x1F << shift for shift in range(8, -1, -1)) + (0x100F,)

RANK_COUNT = 13
