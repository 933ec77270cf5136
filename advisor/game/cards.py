"""Card and deck representation utilities."""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence

import numpy as np
from treys import Card as TreysCard

from advisor.errors import (
    DuplicateCard, InvalidBoardLength, InvalidCard, InvalidHoleCards
)


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. The value only fixes canonical deck order."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

SUIT_SYMBOL = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}

# Community card counts: preflop, flop, turn, river
BOARD_SIZES = (0, 3, 4, 5)


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: int  # 2-14
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def pretty(self) -> str:
        """Card with a suit symbol, e.g. 'A♥'."""
        return f"{RANK_STR[self.rank]}{SUIT_SYMBOL[self.suit]}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c'."""
        if len(s) != 2:
            raise InvalidCard(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise InvalidCard(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise InvalidCard(f"Invalid suit: {suit_char}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


_FULL_DECK = tuple(
    Card(Rank(rank), Suit(suit))
    for rank in range(2, 15)
    for suit in range(4)
)


def is_valid_card(card) -> bool:
    """Check that a value is a well-formed Card."""
    return (
        isinstance(card, Card)
        and card.rank in RANK_STR
        and card.suit in SUIT_STR
    )


def full_deck() -> list[Card]:
    """
    All 52 cards in canonical order.

    Rank-major ascending (2 first, Ace last); within a rank the suits
    follow Suit order: clubs, diamonds, hearts, spades.
    """
    return list(_FULL_DECK)


def build_deck(excluded: Iterable[Card] = ()) -> list[Card]:
    """
    Build the deck minus excluded cards.

    Args:
        excluded: Cards already in play

    Returns:
        Remaining cards in canonical order
    """
    dead = set()
    for card in excluded:
        if not is_valid_card(card):
            raise InvalidCard(f"Invalid card: {card!r}")
        dead.add(card)
    return [c for c in full_deck() if c not in dead]


def ensure_unique(cards: Iterable[Card]) -> None:
    """Raise DuplicateCard on the first card seen twice."""
    seen = set()
    for card in cards:
        if card in seen:
            raise DuplicateCard(card)
        seen.add(card)


def validate_shape(hole: Sequence[Card], board: Sequence[Card]) -> None:
    """Check hole and board card counts."""
    if len(hole) != 2:
        raise InvalidHoleCards(f"Hole must be exactly 2 cards, got {len(hole)}")
    if len(board) not in BOARD_SIZES:
        raise InvalidBoardLength(f"Board must have 0, 3, 4 or 5 cards, got {len(board)}")


def validate_cards(hole: Sequence[Card], board: Sequence[Card]) -> None:
    """Check every card is well formed and none repeats."""
    for card in [*hole, *board]:
        if not is_valid_card(card):
            raise InvalidCard(f"Invalid card: {card!r}")
    ensure_unique([*hole, *board])


def validate_hand(hole: Sequence[Card], board: Sequence[Card]) -> None:
    """
    Check hole cards and board before any evaluation.

    Raises:
        InvalidHoleCards: hole is not exactly two cards
        InvalidBoardLength: board is not 0, 3, 4 or 5 cards
        InvalidCard: an entry is not a Card
        DuplicateCard: a card appears twice across hole and board
    """
    validate_shape(hole, board)
    validate_cards(hole, board)


def parse_cards(text: str) -> list[Card]:
    """
    Parse a run of two-character cards.

    Accepts 'AsKh', 'As Kh' or 'As,Kh'.
    """
    compact = re.sub(r"[\s,]+", "", text)
    if len(compact) % 2:
        raise InvalidCard(f"Invalid card list: {text}")
    return [Card.from_string(compact[i:i + 2]) for i in range(0, len(compact), 2)]


class Deck:
    """
    A working deck for a single deal.

    Each instance owns its card list; simulations give every trial its
    own copy of an unshuffled base deck instead of reusing a shared one.
    """

    def __init__(self, excluded: Iterable[Card] = ()):
        self.excluded = list(excluded)
        self.cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to the full deck minus excluded cards."""
        self.cards = build_deck(self.excluded)

    def shuffle(self, rng: Optional[np.random.Generator] = None) -> None:
        """Shuffle the deck with an unbiased permutation."""
        rng = rng if rng is not None else np.random.default_rng()
        order = rng.permutation(len(self.cards))
        self.cards = [self.cards[i] for i in order]

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck."""
        if n > len(self.cards):
            raise ValueError(f"Cannot deal {n} cards, only {len(self.cards)} remaining")
        dealt = self.cards[:n]
        self.cards = self.cards[n:]
        return dealt

    def copy(self) -> "Deck":
        """Independent deck with the same exclusions and current cards."""
        clone = Deck.__new__(Deck)
        clone.excluded = list(self.excluded)
        clone.cards = list(self.cards)
        return clone

    def __len__(self) -> int:
        return len(self.cards)
