"""Integration tests: card file through a full challenge into persistent history."""

import json
import random

import pytest

from flashcard_challenge.models import ChallengeDifficulty, ChallengeSettings, SessionState
from flashcard_challenge.orchestration import ChallengeController, ChallengeRunner
from flashcard_challenge.services import (
    CardPoolSelector,
    JsonFileCardSource,
    SqliteHistoryLog,
    summarize,
)


@pytest.fixture
def cards_path(tmp_path):
    """Card file shaped like the backend's flashcards response."""
    cards = []
    for i in range(3):
        cards.append(
            {
                "_id": f"cardio-{i}",
                "question": f"Cardiology question {i}",
                "answer": f"Answer {i}",
                "category": "Cardiology",
                "difficulty": "medium",
                "hint": "Think about the heart",
            }
        )
    for i in range(12):
        cards.append(
            {
                "_id": f"anat-{i}",
                "question": f"Anatomy question {i}",
                "answer": f"Answer {i}",
                "category": "Anatomy",
                "difficulty": "hard" if i % 3 == 0 else "easy",
            }
        )
    path = tmp_path / "cards.json"
    path.write_text(json.dumps({"flashcards": cards}), encoding="utf-8")
    return path


@pytest.fixture
def sqlite_history(tmp_path):
    log = SqliteHistoryLog(tmp_path / "history.db")
    log.initialize()
    return log


class TestChallengePipeline:
    """End-to-end challenge runs with real file and database I/O."""

    def test_category_backfill_session(
        self, cards_path, sqlite_history, manual_scheduler, manual_clock
    ):
        """Three Cardiology cards are padded to ten, played and stored."""
        pool = JsonFileCardSource(cards_path).load_cards()
        controller = ChallengeController(
            manual_scheduler,
            history=sqlite_history,
            selector=CardPoolSelector(random.Random(99)),
            clock=manual_clock,
        )
        settings = ChallengeSettings(
            duration=120,
            cards_count=10,
            difficulty=ChallengeDifficulty.MEDIUM,
            categories={"Cardiology"},
        )

        session = controller.start(pool, settings)
        cards = session.cards
        assert len(cards) == 10
        assert {c.id for c in cards[:3]} == {"cardio-0", "cardio-1", "cardio-2"}
        assert session.current_hint == "Think about the heart"

        while session.state is SessionState.RUNNING:
            manual_clock.advance(4)
            session.reveal()
            session.respond(True)

        assert session.stats.score == 1432
        stored = sqlite_history.entries()
        assert len(stored) == 1
        assert stored[0].id == session.history_entry.id
        assert stored[0].categories == ("Cardiology",)
        assert set(stored[0].achievements) == {
            "perfect_score",
            "speed_demon",
            "streak_master",
            "quick_thinker",
        }

    def test_runner_sessions_accumulate(
        self, cards_path, sqlite_history, manual_scheduler, manual_clock
    ):
        """Consecutive console sessions each add one history row."""
        pool = JsonFileCardSource(cards_path).load_cards()
        controller = ChallengeController(
            manual_scheduler, history=sqlite_history, clock=manual_clock
        )
        settings = ChallengeSettings(cards_count=5)

        ChallengeRunner(controller, input_func=lambda _: "s").run(pool, settings)
        answers = iter(["", "y"] * 5)
        ChallengeRunner(controller, input_func=lambda _: next(answers)).run(pool, settings)

        entries = sqlite_history.entries()
        assert len(entries) == 2
        assert entries[0].correct_answers == 5
        assert entries[1].score == 0
        summary = summarize(entries)
        assert summary.sessions_played == 2
        assert summary.total_cards_seen == 10
