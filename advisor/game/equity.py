"""
Monte Carlo equity against random opponents.

Every trial deals from its own shuffled deck, so trials are independent
and can be split across worker processes. Each worker gets a private
generator seeded from the caller's generator, and partial counts are
summed once the worker finishes.
"""

import logging
import threading
from dataclasses import dataclass
from multiprocessing import Pool
from typing import Callable, Optional, Sequence, Union

import numpy as np

from advisor.errors import InsufficientTrials, InvalidOpponentCount
from .cards import Card, Deck, validate_cards, validate_shape
from .evaluator import score_seven

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]
ProgressCallback = Callable[[int, int, int], None]


@dataclass
class SimulationConfig:
    """Configuration for equity simulation."""
    trials: int = 30000       # Default trial count
    min_trials: int = 1000    # Floor below which estimates are too noisy
    workers: int = 1          # Worker processes (1 = run in-process)
    batch_size: int = 1000    # Trials between progress callbacks


@dataclass(frozen=True)
class EquityEstimate:
    """
    Win/tie counts over completed trials.

    Estimates from independent batches combine with ``+``.
    """
    wins: int = 0
    ties: int = 0
    trials: int = 0

    def __add__(self, other: "EquityEstimate") -> "EquityEstimate":
        return EquityEstimate(
            wins=self.wins + other.wins,
            ties=self.ties + other.ties,
            trials=self.trials + other.trials,
        )

    @property
    def win_fraction(self) -> float:
        return self.wins / self.trials if self.trials else 0.0

    @property
    def tie_fraction(self) -> float:
        return self.ties / self.trials if self.trials else 0.0

    @property
    def equity(self) -> float:
        """Pot share with ties split evenly (0-1)."""
        return self.win_fraction + self.tie_fraction / 2

    @property
    def equity_pct(self) -> float:
        return self.win_fraction * 100 + self.tie_fraction * 50

    @property
    def rounded_pct(self) -> float:
        """equity_pct to one decimal, halves rounded up (0.25 -> 0.3)."""
        if not self.trials:
            return 0.0
        # Tenths of a percent, computed exactly from the counts
        tenths = (2000 * self.wins + 1000 * self.ties + self.trials) // (2 * self.trials)
        return tenths / 10


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Turn a seed, a generator or None into a numpy Generator."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def validate_deal(
    hole: Sequence[Card],
    board: Sequence[Card],
    opponents: int,
) -> None:
    """
    Check a deal can be simulated.

    Raises:
        InvalidOpponentCount: fewer than one opponent, or more than the
            remaining deck can seat after completing the board
    """
    validate_shape(hole, board)
    if opponents < 1:
        raise InvalidOpponentCount(f"Need at least 1 opponent, got {opponents}")
    validate_cards(hole, board)
    remaining = 52 - len(hole) - len(board)
    needed = (5 - len(board)) + 2 * opponents
    if needed > remaining:
        raise InvalidOpponentCount(
            f"Cannot deal {opponents} opponents: {needed} cards needed, "
            f"{remaining} left"
        )


def run_trials(
    hole: Sequence[Card],
    board: Sequence[Card],
    opponents: int,
    trials: int,
    rng: np.random.Generator,
) -> EquityEstimate:
    """
    Run a batch of trials with one generator.

    Args:
        hole: Hero's two cards
        board: Known board (0-5 cards)
        opponents: Number of random opponents
        trials: Trials in this batch
        rng: Generator used for every shuffle in the batch

    Returns:
        Counts for this batch
    """
    hole = list(hole)
    board = list(board)
    known = hole + board
    need = 5 - len(board)

    # On the river the hero's hand never changes
    fixed_hero = score_seven(known) if need == 0 else None
    base = Deck(known)

    wins = ties = 0
    for _ in range(trials):
        deck = base.copy()
        deck.shuffle(rng)
        full_board = board + deck.deal(need)
        villains = [deck.deal(2) for _ in range(opponents)]

        hero = fixed_hero if fixed_hero is not None else score_seven(hole + full_board)
        best_villain = max(score_seven(v + full_board) for v in villains)

        if hero > best_villain:
            wins += 1
        elif hero == best_villain:
            ties += 1

    return EquityEstimate(wins=wins, ties=ties, trials=trials)


def _run_worker(task: tuple) -> EquityEstimate:
    """Pool entry point: (hole, board, opponents, trials, seed)."""
    hole, board, opponents, trials, seed = task
    return run_trials(hole, board, opponents, trials, np.random.default_rng(seed))


def split_trials(trials: int, workers: int) -> list[int]:
    """Split a trial count into near-equal worker shares."""
    share, extra = divmod(trials, workers)
    shares = [share + (1 if i < extra else 0) for i in range(workers)]
    return [n for n in shares if n > 0]


class EquitySimulator:
    """
    Estimates hero equity against uniformly random opponent hands.

    Runs in-process in batches (with progress callback and cooperative
    cancellation between batches), or across a process pool when
    ``config.workers > 1``.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()

    def estimate(
        self,
        hole: Sequence[Card],
        board: Sequence[Card],
        opponents: int,
        trials: Optional[int] = None,
        rng: RandomSource = None,
        callback: Optional[ProgressCallback] = None,
        cancel: Optional[threading.Event] = None,
    ) -> EquityEstimate:
        """
        Estimate win and tie fractions.

        Args:
            hole: Hero's two cards
            board: Known board (0, 3, 4 or 5 cards)
            opponents: Number of random opponents (>= 1)
            trials: Trial count, defaults to config.trials
            rng: Generator or seed; a fixed seed gives repeatable results
            callback: Optional callback(completed, wins, ties) per batch
            cancel: Optional event; when set, stop after the current batch

        Returns:
            EquityEstimate over the completed trials
        """
        trials = self.config.trials if trials is None else trials
        if trials < self.config.min_trials:
            raise InsufficientTrials(
                f"Need at least {self.config.min_trials} trials, got {trials}"
            )
        validate_deal(hole, board, opponents)
        generator = make_rng(rng)

        if self.config.workers > 1:
            result = self._estimate_parallel(
                hole, board, opponents, trials, generator, callback, cancel
            )
        else:
            result = self._estimate_serial(
                hole, board, opponents, trials, generator, callback, cancel
            )

        logger.debug(
            "equity %s | %s vs %d: %d trials, win=%.4f tie=%.4f",
            " ".join(map(str, hole)),
            " ".join(map(str, board)) or "-",
            opponents,
            result.trials,
            result.win_fraction,
            result.tie_fraction,
        )
        return result

    def _estimate_serial(self, hole, board, opponents, trials, rng, callback, cancel):
        result = EquityEstimate()
        batch = max(1, self.config.batch_size)
        while result.trials < trials:
            if cancel is not None and cancel.is_set():
                logger.debug("equity cancelled after %d trials", result.trials)
                break
            n = min(batch, trials - result.trials)
            result = result + run_trials(hole, board, opponents, n, rng)
            if callback:
                callback(result.trials, result.wins, result.ties)
        return result

    def _estimate_parallel(self, hole, board, opponents, trials, rng, callback, cancel):
        shares = split_trials(trials, self.config.workers)
        seeds = rng.integers(0, 2**63 - 1, size=len(shares))
        tasks = [
            (list(hole), list(board), opponents, n, int(seed))
            for n, seed in zip(shares, seeds)
        ]

        result = EquityEstimate()
        with Pool(processes=len(tasks)) as pool:
            for partial in pool.imap_unordered(_run_worker, tasks):
                result = result + partial
                if callback:
                    callback(result.trials, result.wins, result.ties)
                if cancel is not None and cancel.is_set():
                    logger.debug("equity cancelled after %d trials", result.trials)
                    pool.terminate()
                    break
        return result


def estimate_equity(
    hole: Sequence[Card],
    board: Sequence[Card],
    opponents: int,
    trials: Optional[int] = None,
    rng: RandomSource = None,
    config: Optional[SimulationConfig] = None,
    callback: Optional[ProgressCallback] = None,
    cancel: Optional[threading.Event] = None,
) -> EquityEstimate:
    """
    Estimate hero equity against random opponents.

    Convenience wrapper around EquitySimulator.estimate.
    """
    return EquitySimulator(config).estimate(
        hole, board, opponents,
        trials=trials, rng=rng, callback=callback, cancel=cancel,
    )
