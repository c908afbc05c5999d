"""Engine exceptions.

All of these signal a caller contract violation; none are retried.
"""


class BlackjackError(Exception):
    """Base class for rules engine errors."""


class DeckExhaustedError(BlackjackError, IndexError):
    """Raised when a card is drawn from an empty deck."""


class InvalidActionError(BlackjackError):
    """Raised when a player action is not allowed in the current turn."""


class InvariantViolationError(BlackjackError):
    """Raised when a game state does not hold exactly one full deck."""
