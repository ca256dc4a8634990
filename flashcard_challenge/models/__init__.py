"""Data models for Flashcard Challenge."""

from .achievement import Achievement
from .card import CardDifficulty, StudyCard
from .history import HistoryEntry, HistorySummary
from .response import Outcome, ResponseRecord
from .session import SessionState
from .settings import ChallengeDifficulty, ChallengeSettings
from .stats import SessionStats

__all__ = [
    "StudyCard",
    "CardDifficulty",
    "ChallengeSettings",
    "ChallengeDifficulty",
    "Outcome",
    "ResponseRecord",
    "SessionStats",
    "SessionState",
    "Achievement",
    "HistoryEntry",
    "HistorySummary",
]
