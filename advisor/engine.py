"""Single entry point: equity, action and hand analysis for one deal."""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from advisor.errors import InvalidBoardLength
from advisor.game.cards import Card
from advisor.game.draws import PossibleHands, list_possible_hands
from advisor.game.equity import (
    EquityEstimate, EquitySimulator, ProgressCallback, RandomSource,
    SimulationConfig, validate_deal,
)
from advisor.strategy.recommend import ActionType, recommend_action

logger = logging.getLogger(__name__)


class Street(Enum):
    """Betting streets, named by board size."""
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"

    @classmethod
    def from_board(cls, board: Sequence[Card]) -> "Street":
        """Infer street from the number of board cards."""
        mapping = {0: cls.PREFLOP, 3: cls.FLOP, 4: cls.TURN, 5: cls.RIVER}
        if len(board) in mapping:
            return mapping[len(board)]
        raise InvalidBoardLength(f"Board must have 0, 3, 4 or 5 cards, got {len(board)}")

    def __str__(self) -> str:
        return self.value


@dataclass
class AdviseOptions:
    """Optional inputs to advise()."""
    trials: Optional[int] = None       # Defaults to SimulationConfig.trials
    pot: Optional[float] = None        # Pot before hero acts
    to_call: Optional[float] = None    # Amount to call (0 if checked to)


@dataclass(frozen=True)
class AdviceResult:
    """Everything advise() found for one deal."""
    equity_pct: float               # Showdown equity, ties split, 1 decimal
    action: ActionType
    rationale: str
    street: Street
    possible_hands: PossibleHands
    estimate: EquityEstimate
    trials: int


def advise(
    hole: Sequence[Card],
    board: Sequence[Card],
    opponents: int,
    options: Optional[AdviseOptions] = None,
    *,
    rng: RandomSource = None,
    config: Optional[SimulationConfig] = None,
    callback: Optional[ProgressCallback] = None,
    cancel: Optional[threading.Event] = None,
) -> AdviceResult:
    """
    Estimate equity and recommend an action.

    Trial counts below config.min_trials are raised to the floor rather
    than rejected.

    Args:
        hole: Hero's two cards
        board: Board cards (0, 3, 4 or 5)
        opponents: Number of random opponents (>= 1)
        options: Trial count and pot context
        rng: Generator or seed for the simulation
        config: Simulation configuration
        callback: Optional progress callback(completed, wins, ties)
        cancel: Optional event to stop the simulation early

    Returns:
        AdviceResult
    """
    options = options or AdviseOptions()
    config = config or SimulationConfig()

    validate_deal(hole, board, opponents)
    street = Street.from_board(board)

    requested = config.trials if options.trials is None else options.trials
    trials = max(config.min_trials, requested)
    if trials != requested:
        logger.debug("raising trials from %d to floor %d", requested, trials)

    simulator = EquitySimulator(config)
    estimate = simulator.estimate(
        hole, board, opponents,
        trials=trials, rng=rng, callback=callback, cancel=cancel,
    )
    equity_pct = estimate.rounded_pct

    recommendation = recommend_action(
        estimate.equity_pct, street.value, opponents,
        pot=options.pot, to_call=options.to_call,
    )
    possible_hands = list_possible_hands(hole, board)

    logger.debug(
        "%s: equity %.1f%% -> %s (%d draws)",
        street, equity_pct, recommendation.action, len(possible_hands.draws),
    )

    return AdviceResult(
        equity_pct=equity_pct,
        action=recommendation.action,
        rationale=f"{recommendation.rationale} (trials={estimate.trials})",
        street=street,
        possible_hands=possible_hands,
        estimate=estimate,
        trials=estimate.trials,
    )
