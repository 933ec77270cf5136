"""
Hold'em Advisor: equity and action advice for a partially known deal

Estimates a hand's showdown equity against uniformly random opponents
by Monte Carlo simulation, recommends fold/check/call/raise from that
equity and the pot odds, and lists the current made hand and draws.
"""

__version__ = "0.1.0"

from .engine import AdviceResult, AdviseOptions, Street, advise

__all__ = [
    "AdviceResult",
    "AdviseOptions",
    "Street",
    "advise",
]
