"""Formatting helpers for timers and results."""

GRADE_THRESHOLDS = [
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
]


def format_time(seconds: float) -> str:
    """Format a number of seconds as MM:SS.

    Negative values are shown as 00:00; fractions are truncated.
    """
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def grade_for(percentage: float) -> str:
    """Letter grade for a percentage of correct answers."""
    for threshold, grade in GRADE_THRESHOLDS:
        if percentage >= threshold:
            return grade
    return "F"
