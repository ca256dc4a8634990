"""Interface protocols for Flashcard Challenge."""

from .card_source import CardSource
from .history_recorder import HistoryRecorder
from .presenter import ChallengePresenterProtocol
from .scheduler import ScheduledTask, Scheduler

__all__ = [
    "CardSource",
    "ChallengePresenterProtocol",
    "HistoryRecorder",
    "ScheduledTask",
    "Scheduler",
]
