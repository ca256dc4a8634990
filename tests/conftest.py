"""Pytest configuration and shared fixtures."""

import os

import pytest

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from flashcard_challenge.config import ChallengeConfig
from flashcard_challenge.models import CardDifficulty, ChallengeSettings, StudyCard
from flashcard_challenge.presenters import NullPresenter
from flashcard_challenge.services import InMemoryHistoryLog


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return ChallengeConfig(
        history_db_path=temp_dir / "history.db",
        tick_interval=0.01,  # Fast ticks for tests
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_card():
    """Factory fixture for creating StudyCard instances with sensible defaults."""

    counter = {"n": 0}

    def _make(
        card_id=None,
        question=None,
        answer="answer",
        category="General",
        difficulty=CardDifficulty.MEDIUM,
        hint=None,
    ):
        counter["n"] += 1
        n = counter["n"]
        return StudyCard(
            id=card_id or f"card-{n}",
            question=question or f"Question {n}?",
            answer=answer,
            category=category,
            difficulty=difficulty,
            hint=hint,
        )

    return _make


@pytest.fixture
def sample_pool(make_card):
    """Twelve cards over three categories and all difficulties."""
    cards = []
    for category in ("Anatomy", "Cardiology", "Pharmacology"):
        cards.append(make_card(category=category, difficulty=CardDifficulty.EASY, hint="h"))
        cards.append(make_card(category=category, difficulty=CardDifficulty.MEDIUM))
        cards.append(make_card(category=category, difficulty=CardDifficulty.MEDIUM))
        cards.append(make_card(category=category, difficulty=CardDifficulty.HARD))
    return cards


@pytest.fixture
def settings():
    """Default settings with a five-card set and a two-minute clock."""
    return ChallengeSettings(duration=120, cards_count=5)


@pytest.fixture
def history_log():
    """Provide an empty in-memory history log."""
    return InMemoryHistoryLog()


class ManualClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class ManualTask:
    """Scheduled task whose ticks are fired by the test."""

    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self.cancelled


class ManualScheduler:
    """A real Scheduler implementation driven step by step from tests."""

    def __init__(self):
        self.tasks: list[ManualTask] = []

    def schedule_repeating(self, interval, callback) -> ManualTask:
        task = ManualTask(interval, callback)
        self.tasks.append(task)
        return task

    @property
    def active_tasks(self) -> list[ManualTask]:
        return [t for t in self.tasks if not t.cancelled]

    def tick(self, times: int = 1) -> None:
        """Fire every active task ``times`` times, like a real timer would."""
        for _ in range(times):
            for task in self.active_tasks:
                task.callback()


@pytest.fixture
def manual_clock():
    """Provide a clock advanced by hand."""
    return ManualClock()


@pytest.fixture
def manual_scheduler():
    """Provide a scheduler whose ticks are fired by hand."""
    return ManualScheduler()


class RecordingPresenter:
    """A real presenter implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []
        self.cards = []
        self.answers = []
        self.ticks = []
        self.results = []
        self.histories = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_card(self, index, total, card, hint) -> None:
        self.cards.append((index, total, card, hint))

    def show_answer(self, card) -> None:
        self.answers.append(card)

    def show_tick(self, time_left: int) -> None:
        self.ticks.append(time_left)

    def show_results(self, stats, achievements) -> None:
        self.results.append((stats, list(achievements)))

    def show_history(self, entries) -> None:
        self.histories.append(list(entries))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()
