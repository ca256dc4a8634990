"""Utility functions for Flashcard Challenge."""

from .format_utils import format_time, grade_for

__all__ = ["format_time", "grade_for"]
