"""Console presenter for CLI output."""

from flashcard_challenge.models import (
    Achievement,
    HistoryEntry,
    SessionStats,
    StudyCard,
)
from flashcard_challenge.utils.format_utils import format_time, grade_for

# Countdown values announced on the console (others stay quiet)
ANNOUNCED_TICKS = {60, 30, 10, 5}


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_card(self, index: int, total: int, card: StudyCard, hint: str | None) -> None:
        """Display the question side of the current card."""
        print(f"\nCard {index + 1}/{total}  [{card.category or 'General'} - {card.difficulty.value}]")
        print("-" * 60)
        print(f"Q: {card.question}")
        if hint:
            print(f"Hint: {hint}")

    def show_answer(self, card: StudyCard) -> None:
        """Reveal the answer side of the current card."""
        print(f"A: {card.answer}")

    def show_tick(self, time_left: int) -> None:
        """Announce the remaining time at a few fixed marks."""
        if time_left in ANNOUNCED_TICKS:
            print(f"\n[TIME] {format_time(time_left)} left")

    def show_results(self, stats: SessionStats, achievements: list[Achievement]) -> None:
        """Display final statistics and unlocked achievements."""
        print("\nChallenge Complete:")
        print(f"  Score: {stats.score}")
        print(f"  Grade: {grade_for(stats.accuracy)} ({stats.accuracy:.0f}%)")
        print(f"  Correct: {stats.correct_answers}")
        print(f"  Incorrect: {stats.incorrect_answers}")
        print(f"  Skipped: {stats.skipped_answers}")
        print(f"  Avg response time: {stats.average_response_time:.1f}s")
        print(f"  Longest streak: {stats.longest_streak}")
        print(f"  Time remaining: {format_time(stats.time_remaining)}")

        if achievements:
            print("\nAchievements Unlocked:")
            for achievement in achievements:
                print(f"  {achievement.icon} {achievement.name} - {achievement.description}")

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display past challenge results."""
        if not entries:
            print("\nNo challenges completed yet")
            return

        print(f"\nChallenge History ({len(entries)} entries):")
        print("=" * 60)
        for entry in entries:
            when = entry.timestamp.strftime("%Y-%m-%d %H:%M")
            print(
                f"{when}  {entry.score:5d} pts  {entry.correct_answers}/{entry.total_cards}  "
                f"{entry.difficulty:6s}  {', '.join(entry.categories)}"
            )
            if entry.achievements:
                print(f"    achievements: {', '.join(entry.achievements)}")
