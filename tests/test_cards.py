"""Tests for card and deck representation."""

import numpy as np
import pytest

from advisor.errors import (
    DuplicateCard, InvalidBoardLength, InvalidCard, InvalidHoleCards,
)
from advisor.game.cards import (
    Card, Deck, Rank, Suit, build_deck, ensure_unique, full_deck,
    parse_cards, validate_hand,
)


class TestCard:
    def test_from_string(self):
        card = Card.from_string("As")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_from_string_ten(self):
        card = Card.from_string("Th")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.HEARTS

    def test_from_string_lowercase(self):
        card = Card.from_string("kd")
        assert card.rank == Rank.KING
        assert card.suit == Suit.DIAMONDS

    def test_str(self):
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "As"

    def test_pretty(self):
        assert Card.from_string("Ah").pretty == "A♥"
        assert Card.from_string("7c").pretty == "7♣"

    def test_from_string_invalid_rank(self):
        with pytest.raises(InvalidCard):
            Card.from_string("Xs")

    def test_from_string_invalid_suit(self):
        with pytest.raises(InvalidCard):
            Card.from_string("Ax")

    def test_invalid_card_is_value_error(self):
        with pytest.raises(ValueError):
            Card.from_string("10h")

    def test_equality(self):
        assert Card.from_string("As") == Card.from_string("As")
        assert Card.from_string("As") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("As") != Card.from_string("Ah")

    def test_hashable(self):
        assert len({Card.from_string("As"), Card(14, 3)}) == 1

    def test_immutable(self):
        card = Card.from_string("As")
        with pytest.raises(AttributeError):
            card.rank = 2

    def test_to_treys(self):
        card = Card.from_string("As")
        treys_card = card.to_treys()
        assert isinstance(treys_card, int)


class TestParseCards:
    def test_concatenated(self):
        assert [str(c) for c in parse_cards("AsKhTd")] == ["As", "Kh", "Td"]

    def test_separated(self):
        assert [str(c) for c in parse_cards("As, Kh Td")] == ["As", "Kh", "Td"]

    def test_empty(self):
        assert parse_cards("") == []

    def test_odd_length(self):
        with pytest.raises(InvalidCard):
            parse_cards("AsK")


class TestBuildDeck:
    def test_full_deck(self):
        deck = build_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_canonical_order(self):
        deck = build_deck()
        assert [str(c) for c in deck[:5]] == ["2c", "2d", "2h", "2s", "3c"]
        assert str(deck[-1]) == "As"

    def test_order_is_stable(self):
        assert build_deck() == build_deck() == full_deck()

    def test_excludes_cards(self):
        excluded = parse_cards("As Kh")
        deck = build_deck(excluded)
        assert len(deck) == 50
        assert not set(excluded) & set(deck)

    def test_rejects_malformed_exclusion(self):
        with pytest.raises(InvalidCard):
            build_deck(["As"])

    def test_rejects_out_of_range_card(self):
        with pytest.raises(InvalidCard):
            build_deck([Card(15, 0)])


class TestValidation:
    def test_ensure_unique(self):
        ensure_unique(parse_cards("As Kh Qd"))
        with pytest.raises(DuplicateCard) as exc:
            ensure_unique(parse_cards("As Kh As"))
        assert exc.value.card == Card.from_string("As")

    def test_valid_hand(self):
        validate_hand(parse_cards("As Kh"), parse_cards("2c 3d 4h"))
        validate_hand(parse_cards("As Kh"), [])

    def test_board_length(self):
        with pytest.raises(InvalidBoardLength):
            validate_hand(parse_cards("As Kh"), parse_cards("2c 3d"))

    def test_hole_length(self):
        with pytest.raises(InvalidHoleCards):
            validate_hand(parse_cards("As"), [])

    def test_duplicate_across_hole_and_board(self):
        with pytest.raises(DuplicateCard):
            validate_hand(parse_cards("Ah Kd"), parse_cards("Ah 7c 8c"))


class TestDeck:
    def test_full_deck(self):
        deck = Deck()
        assert len(deck) == 52

    def test_excluded(self):
        deck = Deck(parse_cards("As Kh"))
        assert len(deck) == 50

    def test_deal(self):
        deck = Deck()
        cards = deck.deal(5)
        assert len(cards) == 5
        assert len(deck) == 47

    def test_deal_too_many(self):
        deck = Deck()
        with pytest.raises(ValueError):
            deck.deal(53)

    def test_copy_is_independent(self):
        base = Deck(parse_cards("As Kh"))
        deck = base.copy()
        deck.shuffle(np.random.default_rng(3))
        deck.deal(10)

        assert len(deck) == 40
        assert len(base) == 50
        assert base.cards == Deck(parse_cards("As Kh")).cards

        deck.reset()
        assert len(deck) == 50
        assert Card.from_string("As") not in deck.cards

    def test_shuffle(self):
        deck1 = Deck()
        deck2 = Deck()
        deck2.shuffle(np.random.default_rng(7))

        # Astronomically unlikely to keep the first ten in place
        same_order = all(
            c1 == c2 for c1, c2 in zip(deck1.cards[:10], deck2.cards[:10])
        )
        assert not same_order
        assert set(deck1.cards) == set(deck2.cards)

    def test_shuffle_seeded(self):
        deck1 = Deck()
        deck2 = Deck()
        deck1.shuffle(np.random.default_rng(42))
        deck2.shuffle(np.random.default_rng(42))
        assert deck1.cards == deck2.cards

    def test_reset(self):
        deck = Deck(parse_cards("As"))
        deck.deal(20)
        assert len(deck) == 31

        deck.reset()
        assert len(deck) == 51
