"""Game representation module."""

from .cards import Card, Deck, Rank, Suit, build_deck, parse_cards
from .evaluator import (
    HandCategory, HandStrength, score_best, score_five, score_seven, score_six,
)
from .equity import (
    EquityEstimate, EquitySimulator, SimulationConfig, estimate_equity,
)
from .draws import (
    Draw, DrawKind, PossibleHands, all_five_card_combinations, find_draws,
    list_possible_hands, made_hand,
)

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "build_deck",
    "parse_cards",
    "HandCategory",
    "HandStrength",
    "score_best",
    "score_five",
    "score_six",
    "score_seven",
    "EquityEstimate",
    "EquitySimulator",
    "SimulationConfig",
    "estimate_equity",
    "Draw",
    "DrawKind",
    "PossibleHands",
    "all_five_card_combinations",
    "find_draws",
    "list_possible_hands",
    "made_hand",
]
