"""
Best-hand scoring for 5, 6 and 7 known cards.

Hand strength is a category plus up to five tie-break ranks, packed into
a single integer so that comparing two hands is an integer comparison:

    value = [category][r1][r2][r3][r4][r5]   (base 15, zero padded)

The category sits in the most significant digit and every rank is at
most 14, so no field can carry into its neighbour.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from itertools import combinations
from typing import Sequence

from advisor.errors import InvalidArity
from .cards import Card, RANK_STR

BASE = 15
TIEBREAK_SLOTS = 5


class HandCategory(IntEnum):
    """Hand classes, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


def encode_strength(category: int, ranks: Sequence[int]) -> int:
    """Pack a category and tie-break ranks into one comparable integer."""
    padded = list(ranks) + [0] * (TIEBREAK_SLOTS - len(ranks))
    value = int(category)
    for rank in padded:
        value = value * BASE + rank
    return value


@dataclass(frozen=True, order=True)
class HandStrength:
    """
    Strength of a 5-card hand.

    Ordering and equality look only at the packed value, so two hands
    with the same category and tie-break ranks are equal whatever their
    suits.
    """
    value: int
    category: HandCategory = field(compare=False)
    ranks: tuple[int, ...] = field(compare=False)

    @classmethod
    def of(cls, category: HandCategory, ranks: Sequence[int]) -> "HandStrength":
        return cls(encode_strength(category, ranks), category, tuple(ranks))

    @property
    def display_ranks(self) -> list[str]:
        """Tie-break ranks as rank characters, e.g. ['A', 'K']."""
        return [RANK_STR[r] for r in self.ranks]

    def __str__(self) -> str:
        return f"{self.category.display_name} ({' '.join(self.display_ranks)})"


def straight_high(ranks: Sequence[int]) -> int:
    """
    High card of a five-rank straight, or 0.

    Expects five distinct ranks sorted descending. The wheel
    (A-5-4-3-2) is a straight with high card 5.
    """
    if len(ranks) != 5:
        return 0
    if ranks[0] - ranks[4] == 4:
        return ranks[0]
    if list(ranks) == [14, 5, 4, 3, 2]:
        return 5
    return 0


def score_five(cards: Sequence[Card]) -> HandStrength:
    """
    Score exactly five cards.

    Args:
        cards: Five distinct cards

    Returns:
        HandStrength with tie-break ranks ordered most significant first
    """
    if len(cards) != 5:
        raise InvalidArity(f"score_five expects 5 cards, got {len(cards)}")

    ranks = sorted((c.rank for c in cards), reverse=True)
    is_flush = len({c.suit for c in cards}) == 1

    counts: dict[int, int] = {}
    for r in ranks:
        counts[r] = counts.get(r, 0) + 1
    # Multiplicity first, then rank, both descending
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    pattern = [count for _, count in groups]

    high = straight_high(sorted(counts, reverse=True))

    if high and is_flush:
        return HandStrength.of(HandCategory.STRAIGHT_FLUSH, [high])
    if pattern == [4, 1]:
        return HandStrength.of(HandCategory.FOUR_OF_A_KIND, [groups[0][0], groups[1][0]])
    if pattern == [3, 2]:
        return HandStrength.of(HandCategory.FULL_HOUSE, [groups[0][0], groups[1][0]])
    if is_flush:
        return HandStrength.of(HandCategory.FLUSH, ranks)
    if high:
        return HandStrength.of(HandCategory.STRAIGHT, [high])
    if pattern == [3, 1, 1]:
        return HandStrength.of(HandCategory.THREE_OF_A_KIND, [g[0] for g in groups])
    if pattern == [2, 2, 1]:
        return HandStrength.of(HandCategory.TWO_PAIR, [g[0] for g in groups])
    if pattern == [2, 1, 1, 1]:
        return HandStrength.of(HandCategory.PAIR, [g[0] for g in groups])
    return HandStrength.of(HandCategory.HIGH_CARD, ranks)


def score_six(cards: Sequence[Card]) -> HandStrength:
    """Best hand out of six cards (each of the six drop-one subsets)."""
    if len(cards) != 6:
        raise InvalidArity(f"score_six expects 6 cards, got {len(cards)}")
    return max(
        score_five([c for i, c in enumerate(cards) if i != drop])
        for drop in range(6)
    )


def score_seven(cards: Sequence[Card]) -> HandStrength:
    """Best hand out of seven cards, checking all 21 five-card subsets."""
    if len(cards) != 7:
        raise InvalidArity(f"score_seven expects 7 cards, got {len(cards)}")
    return max(score_five(five) for five in combinations(cards, 5))


def score_best(cards: Sequence[Card]) -> HandStrength:
    """Score 5, 6 or 7 known cards."""
    n = len(cards)
    if n == 5:
        return score_five(cards)
    if n == 6:
        return score_six(cards)
    if n == 7:
        return score_seven(cards)
    raise InvalidArity(f"Expected 5, 6 or 7 known cards, got {n}")


def compare(a: HandStrength, b: HandStrength) -> int:
    """Return 1, 0 or -1 as a beats, ties or loses to b."""
    return (a.value > b.value) - (a.value < b.value)
