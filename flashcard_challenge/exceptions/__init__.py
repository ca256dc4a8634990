"""Custom exceptions for Flashcard Challenge."""

from .base import ChallengeException
from .session import EmptyPoolError, InvalidTransitionError
from .settings import MalformedSettingsWarning
from .source import CardSourceError

__all__ = [
    "ChallengeException",
    "EmptyPoolError",
    "InvalidTransitionError",
    "CardSourceError",
    "MalformedSettingsWarning",
]
