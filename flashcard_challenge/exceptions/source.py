"""Card source exceptions."""

from .base import ChallengeException


class CardSourceError(ChallengeException):
    """Raised when a card pool cannot be loaded."""

    pass
