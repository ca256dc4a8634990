"""Fixed registry of challenge achievements and their evaluation."""

from flashcard_challenge.models import (
    Achievement,
    ChallengeDifficulty,
    ChallengeSettings,
    SessionStats,
)

STREAK_MASTER_THRESHOLD = 5
QUICK_THINKER_SECONDS = 5
CHAMPION_ACCURACY = 0.9


def _perfect_score(stats: SessionStats, settings: ChallengeSettings) -> bool:
    return stats.correct_answers == stats.total_cards and stats.incorrect_answers == 0


def _speed_demon(stats: SessionStats, settings: ChallengeSettings) -> bool:
    return stats.answered > 0 and stats.time_remaining > settings.duration * 0.5


def _streak_master(stats: SessionStats, settings: ChallengeSettings) -> bool:
    return stats.longest_streak >= STREAK_MASTER_THRESHOLD


def _quick_thinker(stats: SessionStats, settings: ChallengeSettings) -> bool:
    # An empty session has a vacuous average of 0
    return stats.answered > 0 and stats.average_response_time < QUICK_THINKER_SECONDS


def _challenge_champion(stats: SessionStats, settings: ChallengeSettings) -> bool:
    if stats.total_cards == 0:
        return False
    return stats.correct_answers / stats.total_cards > CHAMPION_ACCURACY and settings.difficulty in (
        ChallengeDifficulty.HARD,
        ChallengeDifficulty.EXPERT,
    )


ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement(
        id="perfect_score",
        name="Perfect Score",
        description="Answer all questions correctly",
        condition=_perfect_score,
        icon="🏆",
    ),
    Achievement(
        id="speed_demon",
        name="Speed Demon",
        description="Complete the challenge with more than 50% of time remaining",
        condition=_speed_demon,
        icon="⚡",
    ),
    Achievement(
        id="streak_master",
        name="Streak Master",
        description="Achieve a streak of 5 or more correct answers",
        condition=_streak_master,
        icon="🔥",
    ),
    Achievement(
        id="quick_thinker",
        name="Quick Thinker",
        description="Average response time under 5 seconds",
        condition=_quick_thinker,
        icon="💡",
    ),
    Achievement(
        id="challenge_champion",
        name="Challenge Champion",
        description="Score over 90% on a hard or expert challenge",
        condition=_challenge_champion,
        icon="🏅",
    ),
)

_BY_ID = {achievement.id: achievement for achievement in ACHIEVEMENTS}


def evaluate(stats: SessionStats, settings: ChallengeSettings) -> list[Achievement]:
    """Return the achievements whose predicate holds, in registry order.

    Pure: evaluating the same stats twice yields the same list.
    """
    return [achievement for achievement in ACHIEVEMENTS if achievement.is_unlocked(stats, settings)]


def get_achievement(achievement_id: str) -> Achievement | None:
    """Look up an achievement definition by id."""
    return _BY_ID.get(achievement_id)
