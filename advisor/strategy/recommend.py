"""Action recommendation from equity and pot odds."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from advisor.errors import InvalidBetSizing, InvalidOpponentCount

# Equity must clear the pot-odds threshold by this much before raising
RAISE_MARGIN = 20.0
# Extra raise margin heads-up, shrinking by this much per opponent
VALUE_BUMP_BASE = 10.0
VALUE_BUMP_PER_OPPONENT = 3.0

# Fixed bands used when pot odds are unknown
BASE_RAISE_BAND = 60.0
BASE_CALL_BAND = 40.0
BAND_STEP_PER_OPPONENT = 5.0

EPSILON = 1e-9


class ActionType(Enum):
    """Recommended actions."""
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    RAISE = "raise"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Recommendation:
    """An action, its justification and the threshold it was based on."""
    action: ActionType
    rationale: str
    threshold: Optional[float] = None


def pot_odds_threshold(pot: float, to_call: float) -> float:
    """Break-even equity (percent) for calling to_call into pot."""
    return to_call / (pot + to_call) * 100


def recommend_action(
    equity_pct: float,
    street: str,
    opponents: int,
    pot: Optional[float] = None,
    to_call: Optional[float] = None,
) -> Recommendation:
    """
    Map equity to fold/check/call/raise.

    With both pot and to_call the decision uses pot odds; otherwise fixed
    equity bands that tighten as more opponents join.

    Args:
        equity_pct: Hero equity, 0-100
        street: 'preflop', 'flop', 'turn' or 'river'
        opponents: Number of opponents (>= 1)
        pot: Pot before hero acts
        to_call: Amount hero must call (0 when checked to)

    Returns:
        Recommendation with a rationale naming the threshold used
    """
    if opponents < 1:
        raise InvalidOpponentCount(f"Need at least 1 opponent, got {opponents}")
    street = str(street)

    if pot is not None and to_call is not None:
        if pot < 0 or to_call < 0:
            raise InvalidBetSizing(f"Pot and call amount must be >= 0 (pot={pot}, to_call={to_call})")
        if to_call == 0:
            return Recommendation(
                ActionType.CHECK,
                "No bet to call; checking realizes equity.",
            )

        threshold = pot_odds_threshold(pot, to_call)
        if equity_pct + EPSILON < threshold:
            return Recommendation(
                ActionType.FOLD,
                f"Equity {equity_pct:.1f}% < call threshold {threshold:.1f}%.",
                threshold,
            )

        value_bump = max(0.0, VALUE_BUMP_BASE - VALUE_BUMP_PER_OPPONENT * opponents)
        margin = RAISE_MARGIN + value_bump
        if equity_pct >= threshold + margin:
            return Recommendation(
                ActionType.RAISE,
                f"Strong edge over threshold {threshold:.1f}% (Δ≥{margin:g}%).",
                threshold + margin,
            )
        return Recommendation(
            ActionType.CALL,
            f"Equity clears threshold {threshold:.1f}%.",
            threshold,
        )

    step = BAND_STEP_PER_OPPONENT * (opponents - 1)
    raise_band = BASE_RAISE_BAND + step
    call_band = BASE_CALL_BAND + step
    players = opponents + 1

    if equity_pct >= raise_band:
        return Recommendation(
            ActionType.RAISE,
            f"Equity ≥ {raise_band:g}% for {players}-way.",
            raise_band,
        )
    if equity_pct >= call_band:
        return Recommendation(
            ActionType.CALL,
            f"Equity in the playable band (≥ {call_band:g}%).",
            call_band,
        )
    return Recommendation(
        ActionType.FOLD if street == "preflop" else ActionType.CHECK,
        f"Equity below conservative threshold {call_band:g}% for {players}-way.",
        call_band,
    )
