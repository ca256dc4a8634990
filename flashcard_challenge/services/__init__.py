"""Business logic services for Flashcard Challenge."""

from .achievement_service import ACHIEVEMENTS, evaluate, get_achievement
from .card_selector import CardPoolSelector
from .card_source import HttpCardSource, JsonFileCardSource, parse_cards
from .history_service import InMemoryHistoryLog, SqliteHistoryLog, summarize
from .scorer import ResponseTracker, compute_score, round_half_up
from .session_timer import SessionTimer, ThreadingScheduler

__all__ = [
    "ACHIEVEMENTS",
    "evaluate",
    "get_achievement",
    "CardPoolSelector",
    "JsonFileCardSource",
    "HttpCardSource",
    "parse_cards",
    "InMemoryHistoryLog",
    "SqliteHistoryLog",
    "summarize",
    "ResponseTracker",
    "compute_score",
    "round_half_up",
    "SessionTimer",
    "ThreadingScheduler",
]
