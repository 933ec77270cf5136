"""Visualization module."""

from .display import display_advice, format_cards

__all__ = [
    "display_advice",
    "format_cards",
]
