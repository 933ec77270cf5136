"""Exceptions raised by the advisor engine.

Bad input is reported as a ``ValueError`` subclass so callers that already
catch ``ValueError`` keep working. ``InvalidArity`` is different: it means
the engine called the scorer wrongly and is an ``AssertionError``.
"""


class AdvisorError(ValueError):
    """Base class for all user-input errors."""


class InvalidCard(AdvisorError):
    """A card value or card string is malformed."""


class InvalidHoleCards(AdvisorError):
    """Hole cards are not exactly two cards."""


class InvalidBoardLength(AdvisorError):
    """Board length is not 0, 3, 4 or 5."""


class InvalidOpponentCount(AdvisorError):
    """Opponent count is below one or cannot be dealt from the deck."""


class DuplicateCard(AdvisorError):
    """The same card appears more than once across hole and board."""

    def __init__(self, card):
        self.card = card
        super().__init__(f"Duplicate card: {card}")


class InsufficientTrials(AdvisorError):
    """Trial count is below the configured floor."""


class InvalidBetSizing(AdvisorError):
    """Pot or amount to call is negative."""


class InvalidArity(AssertionError):
    """The hand scorer was given a card count other than 5, 6 or 7."""
