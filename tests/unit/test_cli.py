"""Tests for the command-line interface."""

import json
from argparse import Namespace
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from flashcard_challenge.cli.commands import categories, history, play
from flashcard_challenge.cli.commands.source import card_source_from_args
from flashcard_challenge.cli.main import main
from flashcard_challenge.config import ChallengeConfig
from flashcard_challenge.exceptions import CardSourceError
from flashcard_challenge.models import ChallengeDifficulty, HistoryEntry
from flashcard_challenge.services import HttpCardSource, JsonFileCardSource, SqliteHistoryLog


@pytest.fixture
def cards_file(tmp_path):
    """A JSON card file with eight cards in two categories."""
    cards = [
        {
            "id": str(i),
            "question": f"Q{i}",
            "answer": f"A{i}",
            "category": "Anatomy" if i % 2 else "Renal",
            "difficulty": "easy",
        }
        for i in range(8)
    ]
    path = tmp_path / "cards.json"
    path.write_text(json.dumps(cards), encoding="utf-8")
    return path


def _play_args(cards, **overrides):
    values = {
        "cards": str(cards),
        "url": None,
        "duration": None,
        "count": 5,
        "difficulty": None,
        "category": [],
        "no_hints": False,
        "seed": 3,
        "memory": True,
    }
    values.update(overrides)
    return Namespace(**values)


# ---------------------------------------------------------------------------
# TestMain
# ---------------------------------------------------------------------------


class TestMain:
    """Tests for argument parsing and dispatch."""

    def test_version(self, capsys):
        """--version prints the version and exits."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "flashcard-challenge" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        """No subcommand prints help and fails."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_cards_and_url_exclusive(self):
        """--cards and --url cannot be combined."""
        with pytest.raises(SystemExit):
            main(["categories", "--cards", "a.json", "--url", "http://x"])

    def test_dispatches_categories(self, cards_file, capsys):
        """The categories subcommand is dispatched."""
        assert main(["categories", "--cards", str(cards_file)]) == 0
        assert "Anatomy (4)" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# TestCardSourceFromArgs
# ---------------------------------------------------------------------------


class TestCardSourceFromArgs:
    """Tests for picking a card source."""

    def test_cards_argument(self, tmp_path):
        """--cards selects a JSON file source."""
        args = Namespace(cards=str(tmp_path / "c.json"), url=None)
        assert isinstance(card_source_from_args(args, ChallengeConfig()), JsonFileCardSource)

    def test_url_argument(self):
        """--url selects an HTTP source."""
        args = Namespace(cards=None, url="http://cards.local/api")
        assert isinstance(card_source_from_args(args, ChallengeConfig()), HttpCardSource)

    def test_falls_back_to_config(self, tmp_path):
        """Without arguments the configured cards file is used."""
        args = Namespace(cards=None, url=None)
        config = ChallengeConfig(cards_file=tmp_path / "c.json")
        assert isinstance(card_source_from_args(args, config), JsonFileCardSource)

    def test_no_source_raises(self):
        """No argument and nothing configured is an error."""
        with pytest.raises(CardSourceError):
            card_source_from_args(Namespace(cards=None, url=None), ChallengeConfig())


# ---------------------------------------------------------------------------
# TestPlayCommand
# ---------------------------------------------------------------------------


class TestPlayCommand:
    """Tests for the play subcommand."""

    def test_build_settings_overrides(self, cards_file):
        """Command-line values override configured defaults."""
        args = _play_args(
            cards_file,
            duration=60,
            count=7,
            difficulty="expert",
            category=["Renal"],
            no_hints=True,
        )
        settings = play.build_settings(args, ChallengeConfig())
        assert settings.duration == 60
        assert settings.cards_count == 7
        assert settings.difficulty is ChallengeDifficulty.EXPERT
        assert settings.categories == frozenset({"Renal"})
        assert settings.include_hints is False

    def test_build_settings_defaults(self, cards_file):
        """Missing values come from the configuration."""
        args = _play_args(cards_file, count=None)
        settings = play.build_settings(args, ChallengeConfig(default_cards_count=15))
        assert settings.cards_count == 15
        assert settings.duration == 120

    def test_play_full_session(self, cards_file, capsys):
        """A scripted session runs to completion and prints results."""
        answers = iter(["", "y"] * 5)
        code = play.play_command(_play_args(cards_file), input_func=lambda _: next(answers))
        out = capsys.readouterr().out
        assert code == 0
        assert "Challenge Complete" in out
        assert "Correct: 5" in out
        assert "Perfect Score" in out

    def test_play_missing_file(self, tmp_path, capsys):
        """A missing cards file fails with an error message."""
        code = play.play_command(_play_args(tmp_path / "missing.json"), input_func=lambda _: "q")
        assert code == 1
        assert "[ERROR]" in capsys.readouterr().out

    def test_play_empty_pool(self, tmp_path, capsys):
        """An empty card file cannot start a challenge."""
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")
        code = play.play_command(_play_args(path), input_func=lambda _: "q")
        assert code == 1
        assert "no cards available" in capsys.readouterr().out

    def test_build_history_persistent(self, tmp_path):
        """Without --memory the SQLite log is used."""
        config = ChallengeConfig(history_db_path=tmp_path / "h.db")
        log = play.build_history(config, in_memory=False)
        assert isinstance(log, SqliteHistoryLog)
        assert (tmp_path / "h.db").exists()


# ---------------------------------------------------------------------------
# TestHistoryCommand
# ---------------------------------------------------------------------------


class TestHistoryCommand:
    """Tests for the history subcommand."""

    def test_no_database(self, test_config, capsys):
        """A missing database shows an empty history."""
        with patch.object(history, "create_default_config", return_value=test_config):
            assert history.history_command(Namespace(limit=10)) == 0
        assert "No challenges completed yet" in capsys.readouterr().out

    def test_lists_entries(self, test_config, capsys):
        """Stored entries are listed with a summary line."""
        log = SqliteHistoryLog(test_config.history_db_path)
        log.initialize()
        log.append(
            HistoryEntry(
                id="e1",
                timestamp=datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc),
                score=836,
                correct_answers=5,
                total_cards=5,
                achievements=("perfect_score",),
            )
        )
        with patch.object(history, "create_default_config", return_value=test_config):
            assert history.history_command(Namespace(limit=10)) == 0
        out = capsys.readouterr().out
        assert "836 pts" in out
        assert "perfect_score" in out
        assert "1 challenges, best score 836" in out


# ---------------------------------------------------------------------------
# TestCategoriesCommand
# ---------------------------------------------------------------------------


class TestCategoriesCommand:
    """Tests for the categories subcommand."""

    def test_lists_counts(self, cards_file, capsys):
        """Each category is listed with its card count."""
        assert categories.categories_command(Namespace(cards=str(cards_file), url=None)) == 0
        out = capsys.readouterr().out
        assert "Anatomy (4)" in out
        assert "Renal (4)" in out

    def test_bad_source(self, tmp_path, capsys):
        """An unreadable source fails."""
        args = Namespace(cards=str(tmp_path / "nope.json"), url=None)
        assert categories.categories_command(args) == 1
