"""
Made-hand and draw analysis for display.

Describes what the hero holds now and which single next card would
improve it. None of this feeds the equity number.
"""

from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from typing import Optional, Sequence

from .cards import Card, build_deck, validate_hand
from .evaluator import HandCategory, HandStrength, score_best, score_five

# Consecutive five-rank windows; 1 stands for the ace playing low
STRAIGHT_WINDOWS = [(1, 2, 3, 4, 5)] + [
    tuple(range(low, low + 5)) for low in range(2, 11)
]


class DrawKind(Enum):
    """Kinds of one-card improvement."""
    FLUSH = "flush draw"
    OPEN_ENDED_STRAIGHT = "straight draw (open-ended)"
    GUTSHOT_STRAIGHT = "straight draw (gutshot)"
    SET = "set draw"
    TWO_PAIR = "two-pair draw"
    FULL_HOUSE = "full house draw"
    QUADS = "quads draw"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Draw:
    """Cards that would complete one kind of draw."""
    kind: DrawKind
    cards: tuple[Card, ...]

    @property
    def outs(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class MadeHand:
    """Current best hand with its tie-break ranks for display."""
    category: HandCategory
    kickers: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.category.display_name


@dataclass(frozen=True)
class HandCombination:
    """One 5-card subset of the known cards and its score."""
    category: HandCategory
    cards: tuple[Card, ...]
    strength: HandStrength

    @property
    def label(self) -> str:
        """e.g. 'A♥ K♥ 2♥ 7♥ 9♣ -> Flush'"""
        return f"{' '.join(c.pretty for c in self.cards)} -> {self.category.display_name}"


@dataclass(frozen=True)
class PossibleHands:
    """Made hands and draws for the hero's known cards."""
    made: tuple[MadeHand, ...] = ()
    draws: tuple[Draw, ...] = ()
    best_made: Optional[HandCombination] = None
    made_combos: tuple[HandCombination, ...] = field(default=())


def made_hand(hole: Sequence[Card], board: Sequence[Card]) -> Optional[MadeHand]:
    """
    Best current hand over the known cards.

    Returns None preflop, when only the two hole cards are known.
    """
    validate_hand(hole, board)
    if not board:
        return None
    strength = score_best([*hole, *board])
    return MadeHand(category=strength.category, kickers=tuple(strength.display_ranks))


def all_five_card_combinations(
    hole: Sequence[Card],
    board: Sequence[Card],
) -> list[HandCombination]:
    """
    Score every 5-card subset of the known cards.

    Args:
        hole: Hero's two cards
        board: Board cards

    Returns:
        1, 6 or 21 combinations sorted best to worst; empty preflop
    """
    validate_hand(hole, board)
    known = [*hole, *board]
    if len(known) < 5:
        return []

    combos = []
    for five in combinations(known, 5):
        strength = score_five(five)
        combos.append(HandCombination(strength.category, tuple(five), strength))
    combos.sort(key=lambda c: c.strength.value, reverse=True)
    return combos


def _straight_draws(known: list[Card], deck: list[Card]) -> list[Draw]:
    ranks = {c.rank for c in known}
    if 14 in ranks:
        ranks.add(1)

    draws = []
    for window in STRAIGHT_WINDOWS:
        present = [r for r in window if r in ranks]
        if len(present) != 4:
            continue
        missing = next(r for r in window if r not in ranks)
        out_rank = 14 if missing == 1 else missing
        outs = tuple(c for c in deck if c.rank == out_rank)

        # Missing an end card leaves four in a row; the run is open at
        # both ends unless the ace caps it (A-2-3-4 or J-Q-K-A).
        at_end = missing in (window[0], window[-1])
        uncapped = present[0] > 1 and present[-1] < 14
        kind = (
            DrawKind.OPEN_ENDED_STRAIGHT if at_end and uncapped
            else DrawKind.GUTSHOT_STRAIGHT
        )
        draws.append(Draw(kind, outs))
    return draws


def find_draws(hole: Sequence[Card], board: Sequence[Card]) -> list[Draw]:
    """
    Find cards that improve the hand on the next street.

    Draw kinds are independent: the same card can show up under more
    than one kind. Empty on the river (no card to come) and preflop.

    Returns:
        Draws sorted by out count, most outs first
    """
    validate_hand(hole, board)
    if len(board) not in (3, 4):
        return []

    known = [*hole, *board]
    deck = build_deck(known)
    draws: list[Draw] = []

    suit_counts: dict[int, int] = {}
    for c in known:
        suit_counts[c.suit] = suit_counts.get(c.suit, 0) + 1
    for suit in sorted(suit_counts):
        if suit_counts[suit] == 4:
            draws.append(Draw(DrawKind.FLUSH, tuple(c for c in deck if c.suit == suit)))

    draws.extend(_straight_draws(known, deck))

    rank_counts: dict[int, int] = {}
    for c in known:
        rank_counts[c.rank] = rank_counts.get(c.rank, 0) + 1
    for rank in sorted(rank_counts, reverse=True):
        count = rank_counts[rank]
        same_rank = tuple(c for c in deck if c.rank == rank)
        if count == 1:
            draws.append(Draw(DrawKind.TWO_PAIR, same_rank))
        elif count == 2:
            draws.append(Draw(DrawKind.SET, same_rank))
        elif count == 3:
            others = tuple(c for c in deck if c.rank != rank and c.rank in rank_counts)
            draws.append(Draw(DrawKind.FULL_HOUSE, others))
            draws.append(Draw(DrawKind.QUADS, same_rank))

    draws.sort(key=lambda d: d.outs, reverse=True)
    return draws


def list_possible_hands(hole: Sequence[Card], board: Sequence[Card]) -> PossibleHands:
    """Bundle made hand, draws and the ranked 5-card combinations."""
    current = made_hand(hole, board)
    combos = all_five_card_combinations(hole, board)
    return PossibleHands(
        made=(current,) if current else (),
        draws=tuple(find_draws(hole, board)),
        best_made=combos[0] if combos else None,
        made_combos=tuple(combos),
    )
