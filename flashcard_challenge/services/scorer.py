"""Response classification and final score computation."""

import math

from flashcard_challenge.models import Outcome, ResponseRecord, SessionStats

BASE_POINTS = 100
SPEED_MULTIPLIER = 2
STREAK_POINTS = 20
INCORRECT_PENALTY = 30


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def compute_score(
    correct: int,
    incorrect: int,
    longest_streak: int,
    average_response_time: float,
    duration: int,
    graded: bool = True,
) -> int:
    """Compute the composite score of a session.

    ``max(0, base + speed bonus + streak bonus - incorrect penalty)``.
    The speed bonus is 0 when no card was graded.

    Args:
        correct: Number of correct answers
        incorrect: Number of incorrect answers
        longest_streak: Longest run of consecutive correct answers
        average_response_time: Mean seconds per graded answer
        duration: Configured session duration in seconds
        graded: Whether any card was answered correct or incorrect

    Returns:
        Non-negative integer score
    """
    base_points = BASE_POINTS * correct
    speed_bonus = (
        round_half_up(SPEED_MULTIPLIER * (duration - average_response_time)) if graded else 0
    )
    streak_bonus = STREAK_POINTS * longest_streak
    penalty = INCORRECT_PENALTY * incorrect
    return max(0, base_points + speed_bonus + streak_bonus - penalty)


class ResponseTracker:
    """Record responses for a card-set and produce the final statistics.

    Owns the response array and the running streak for one session.
    """

    def __init__(self, total_cards: int):
        """Initialize with one unanswered slot per card.

        Args:
            total_cards: Length of the card-set
        """
        self.total_cards = total_cards
        self._records = [ResponseRecord() for _ in range(total_cards)]
        self._streak = 0
        self._longest_streak = 0
        self._answered = 0
        self._final: SessionStats | None = None

    @property
    def records(self) -> list[ResponseRecord]:
        """Copy of the response records."""
        return [ResponseRecord(r.outcome, r.response_time) for r in self._records]

    @property
    def streak(self) -> int:
        return self._streak

    @property
    def longest_streak(self) -> int:
        return self._longest_streak

    @property
    def answered_count(self) -> int:
        """Number of slots written so far (including skips)."""
        return self._answered

    @property
    def finalized(self) -> bool:
        return self._final is not None

    def record_response(self, card_index: int, outcome: Outcome, elapsed_seconds: float) -> bool:
        """Record the outcome for one card and update the streak.

        Args:
            card_index: Position of the card in the card-set
            outcome: CORRECT, INCORRECT or SKIPPED
            elapsed_seconds: Time spent on the card

        Returns:
            True if this was the last card of the set

        Raises:
            ValueError: If the slot was already written or the outcome is UNANSWERED
            IndexError: If card_index is outside the card-set
        """
        if self._final is not None:
            raise ValueError("Responses cannot be recorded after finalize()")
        if outcome is Outcome.UNANSWERED:
            raise ValueError("UNANSWERED is only assigned by finalize()")
        record = self._records[card_index]
        if record.outcome is not Outcome.UNANSWERED:
            raise ValueError(f"Card {card_index} already has outcome {record.outcome.value}")

        record.outcome = outcome
        record.response_time = max(0.0, float(elapsed_seconds))
        self._answered += 1

        if outcome is Outcome.CORRECT:
            self._streak += 1
            self._longest_streak = max(self._longest_streak, self._streak)
        else:
            self._streak = 0

        return card_index == self.total_cards - 1

    def finalize(self, time_expired: bool, duration: int, time_remaining: int) -> SessionStats:
        """Compute the final statistics. Called exactly once per session.

        Slots never written stay UNANSWERED and count as skipped, whether the
        session ended on time expiry, on the last card or by hand.

        Args:
            time_expired: Whether the countdown ran out
            duration: Configured session duration in seconds
            time_remaining: Seconds left on the clock at the end

        Returns:
            Final session statistics

        Raises:
            RuntimeError: If called a second time
        """
        if self._final is not None:
            raise RuntimeError("Session statistics were already finalized")

        correct = sum(1 for r in self._records if r.outcome is Outcome.CORRECT)
        incorrect = sum(1 for r in self._records if r.outcome is Outcome.INCORRECT)
        skipped = self.total_cards - correct - incorrect

        graded_times = [r.response_time for r in self._records if r.outcome.is_graded]
        average = sum(graded_times) / len(graded_times) if graded_times else 0.0

        self._final = SessionStats(
            score=compute_score(
                correct,
                incorrect,
                self._longest_streak,
                average,
                duration,
                graded=bool(graded_times),
            ),
            correct_answers=correct,
            incorrect_answers=incorrect,
            skipped_answers=skipped,
            average_response_time=average,
            streak=self._streak,
            longest_streak=self._longest_streak,
            time_remaining=0 if time_expired else max(0, time_remaining),
            total_cards=self.total_cards,
        )
        return self._final
