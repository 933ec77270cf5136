"""Action recommendation module."""

from .recommend import ActionType, Recommendation, recommend_action

__all__ = [
    "ActionType",
    "Recommendation",
    "recommend_action",
]
