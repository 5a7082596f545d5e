"""
Lookup tables for five-card high hand scoring.

Raw scores run from 1 (royal flush) to 7462 (7-5-4-3-2 offsuit). Three key
domains cover every five-card hand:

* ``flushes``: 13-bit rank flags of a one-suited hand (flushes and
  straight flushes), 1287 keys.
* ``unique5``: 13-bit rank flags of a hand with five different ranks
  (straights and high cards), 1287 keys.
* everything else (pairs through quads) is keyed by the product of the five
  rank primes and resolved through a perfect hash: ``hash_adjust`` holds one
  displacement per 9-bit bucket and ``hash_values`` the raw score at each
  hashed slot, 4888 keys.

The tables are derived once from the ranking order and never mutated.
"""
from dataclasses import dataclass
from itertools import combinations
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple
import logging

from poker_hands.core.card import RANK_PRIMES
from poker_hands.evaluation.constants import STRAIGHT_MASKS

logger = logging.getLogger(__name__)

HASH_BUCKETS = 512
HASH_TABLE_SIZE = 1 << 14
UINT32 = 0xFFFFFFFF

# Strongest rank first
_RANKS_DESC = tuple(range(12, -1, -1))


@dataclass(frozen=True)
class LookupTables:
    """Read-only scoring tables."""
    flushes: Mapping[int, int]
    unique5: Mapping[int, int]
    hash_values: Tuple[int, ...]
    hash_adjust: Tuple[int, ...]


def mix_product(product: int) -> Tuple[int, int]:
    """
    Scramble a prime product into its (slot, bucket) pair.

    All arithmetic wraps at 32 bits. The bucket is a 9-bit slice selecting
    the displacement in ``hash_adjust``; the slot is XORed with it.
    """
    u = (product + 0xE91AAA35) & UINT32
    u ^= u >> 16
    u = (u + (u << 8)) & UINT32
    u ^= u >> 4
    bucket = (u >> 8) & 0x1FF
    slot = ((u + (u << 2)) & UINT32) >> 19
    return slot, bucket


def _flags(ranks) -> int:
    mask = 0
    for rank in ranks:
        mask |= 1 << rank
    return mask


def _product(*ranks: int) -> int:
    product = 1
    for rank in ranks:
        product *= RANK_PRIMES[rank]
    return product


def _distinct_rank_hands() -> List[int]:
    """Rank flags of the 1277 five-rank hands that are not straights, best first."""
    straights = set(STRAIGHT_MASKS)
    return [
        mask for mask in (_flags(ranks) for ranks in combinations(_RANKS_DESC, 5))
        if mask not in straights
    ]


def _paired_hands() -> Dict[str, List[int]]:
    """Prime products of every hand with a repeated rank, grouped by category, best first."""
    quads = [
        _product(quad, quad, quad, quad, kicker)
        for quad in _RANKS_DESC for kicker in _RANKS_DESC if kicker != quad
    ]
    full_houses = [
        _product(trip, trip, trip, pair, pair)
        for trip in _RANKS_DESC for pair in _RANKS_DESC if pair != trip
    ]
    trips = [
        _product(trip, trip, trip, *kickers)
        for trip in _RANKS_DESC
        for kickers in combinations([r for r in _RANKS_DESC if r != trip], 2)
    ]
    two_pairs = [
        _product(high, high, low, low, kicker)
        for high, low in combinations(_RANKS_DESC, 2)
        for kicker in _RANKS_DESC if kicker not in (high, low)
    ]
    pairs = [
        _product(pair, pair, *kickers)
        for pair in _RANKS_DESC
        for kickers in combinations([r for r in _RANKS_DESC if r != pair], 3)
    ]
    return {
        'quads': quads,
        'full_houses': full_houses,
        'trips': trips,
        'two_pairs': two_pairs,
        'pairs': pairs,
    }


def _build_perfect_hash(scores: Dict[int, int]) -> Tuple[List[int], List[int]]:
    """
    Find a displacement per bucket so every product lands on its own slot.

    Buckets are placed largest first; each takes the smallest displacement
    whose slots are all still free.

    Raises:
        RuntimeError: If some bucket cannot be placed
    """
    buckets: Dict[int, List[Tuple[int, int]]] = {}
    for product, score in scores.items():
        slot, bucket = mix_product(product)
        buckets.setdefault(bucket, []).append((slot, score))

    hash_adjust = [0] * HASH_BUCKETS
    hash_values = [0] * HASH_TABLE_SIZE
    taken = [False] * HASH_TABLE_SIZE

    for bucket in sorted(buckets, key=lambda b: (-len(buckets[b]), b)):
        entries = buckets[bucket]
        for adjust in range(HASH_TABLE_SIZE):
            slots = [slot ^ adjust for slot, _ in entries]
            if len(set(slots)) == len(slots) and not any(taken[s] for s in slots):
                break
        else:
            raise RuntimeError(f"Could not place hash bucket {bucket} ({len(entries)} keys)")

        hash_adjust[bucket] = adjust
        for s, (_, score) in zip(slots, entries):
            taken[s] = True
            hash_values[s] = score

    return hash_values, hash_adjust


def build_tables() -> LookupTables:
    """Derive all four scoring tables."""
    distinct = _distinct_rank_hands()
    paired = _paired_hands()

    flushes: Dict[int, int] = {}
    unique5: Dict[int, int] = {}
    products: Dict[int, int] = {}
    score = 1

    def assign(table: Dict[int, int], keys: List[int]) -> None:
        nonlocal score
        for key in keys:
            table[key] = score
            score += 1

    assign(flushes, list(STRAIGHT_MASKS))      # straight flushes
    assign(products, paired['quads'])
    assign(products, paired['full_houses'])
    assign(flushes, distinct)                  # flushes
    assign(unique5, list(STRAIGHT_MASKS))      # straights
    assign(products, paired['trips'])
    assign(products, paired['two_pairs'])
    assign(products, paired['pairs'])
    assign(unique5, distinct)                  # high cards

    hash_values, hash_adjust = _build_perfect_hash(products)

    logger.debug(
        f"Built scoring tables: {len(flushes)} flush keys, {len(unique5)} unique keys, "
        f"{len(products)} hashed products, {score - 1} scores"
    )
    return LookupTables(
        flushes=MappingProxyType(flushes),
        unique5=MappingProxyType(unique5),
        hash_values=tuple(hash_values),
        hash_adjust=tuple(hash_adjust),
    )
