"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from advisor.game.cards import parse_cards
from advisor.game.equity import SimulationConfig


@pytest.fixture
def rng():
    """Seeded generator so simulations are repeatable."""
    return np.random.default_rng(1234)


@pytest.fixture
def fast_config():
    """Smallest legal simulation, in small batches."""
    return SimulationConfig(trials=1000, min_trials=1000, workers=1, batch_size=250)


@pytest.fixture
def board_flop():
    return parse_cards("Ks 7d 2c")


@pytest.fixture
def board_river():
    return parse_cards("Ks 7d 2c 9h 3s")
