"""Base exception classes for Flashcard Challenge."""


class ChallengeException(Exception):
    """Base exception for all Flashcard Challenge errors.

    All custom exceptions in the flashcard_challenge package should inherit
    from this base class for consistent error handling.
    """

    pass
