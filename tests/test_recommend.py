"""Tests for action recommendation."""

import pytest

from advisor.errors import InvalidBetSizing, InvalidOpponentCount
from advisor.strategy.recommend import (
    ActionType, pot_odds_threshold, recommend_action,
)


class TestPotOdds:
    def test_threshold(self):
        assert pot_odds_threshold(100, 50) == pytest.approx(33.333, abs=1e-3)
        assert pot_odds_threshold(100, 100) == pytest.approx(50.0)

    def test_check_when_nothing_to_call(self):
        rec = recommend_action(60, "flop", 2, pot=100, to_call=0)
        assert rec.action == ActionType.CHECK
        assert "No bet to call" in rec.rationale

    def test_check_ignores_equity(self):
        rec = recommend_action(5, "river", 1, pot=100, to_call=0)
        assert rec.action == ActionType.CHECK

    def test_fold_below_threshold(self):
        rec = recommend_action(30, "flop", 1, pot=100, to_call=50)
        assert rec.action == ActionType.FOLD
        assert "33.3%" in rec.rationale
        assert rec.threshold == pytest.approx(100 / 3)

    def test_exact_threshold_calls(self):
        rec = recommend_action(50.0, "turn", 3, pot=100, to_call=100)
        assert rec.action == ActionType.CALL

    def test_call_above_threshold(self):
        rec = recommend_action(40, "flop", 1, pot=100, to_call=50)
        assert rec.action == ActionType.CALL
        assert "33.3%" in rec.rationale

    def test_raise_heads_up(self):
        # Heads-up margin is 20 + (10 - 3) = 27 over 33.3
        assert recommend_action(60.0, "flop", 1, pot=100, to_call=50).action == ActionType.CALL
        rec = recommend_action(60.4, "flop", 1, pot=200, to_call=50)
        assert rec.action == ActionType.RAISE
        assert "27" in rec.rationale

    def test_raise_margin_shrinks_multiway(self):
        # 4 opponents: bump is max(0, 10 - 12) = 0, margin 20
        rec = recommend_action(54, "flop", 4, pot=100, to_call=50)
        assert rec.action == ActionType.RAISE
        assert rec.threshold == pytest.approx(100 / 3 + 20)

    def test_negative_amounts(self):
        with pytest.raises(InvalidBetSizing):
            recommend_action(50, "flop", 1, pot=100, to_call=-5)

    def test_only_pot_falls_back_to_bands(self):
        rec = recommend_action(65, "flop", 1, pot=100)
        assert rec.action == ActionType.RAISE


class TestBands:
    def test_raise_heads_up(self):
        rec = recommend_action(60, "flop", 1)
        assert rec.action == ActionType.RAISE
        assert "60%" in rec.rationale
        assert "2-way" in rec.rationale

    def test_call_heads_up(self):
        rec = recommend_action(45, "flop", 1)
        assert rec.action == ActionType.CALL
        assert "40%" in rec.rationale

    def test_bands_widen_with_opponents(self):
        # Three opponents: raise at 70, call at 50
        assert recommend_action(65, "turn", 3).action == ActionType.CALL
        assert recommend_action(70, "turn", 3).action == ActionType.RAISE
        assert recommend_action(49.9, "turn", 3).action == ActionType.CHECK

    def test_fold_preflop(self):
        rec = recommend_action(30, "preflop", 1)
        assert rec.action == ActionType.FOLD
        assert rec.threshold == 40

    def test_check_postflop(self):
        rec = recommend_action(30, "river", 1)
        assert rec.action == ActionType.CHECK

    def test_invalid_opponents(self):
        with pytest.raises(InvalidOpponentCount):
            recommend_action(50, "flop", 0)

    def test_action_str(self):
        assert str(ActionType.RAISE) == "raise"
