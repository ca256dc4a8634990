"""
Flashcard Challenge - Timed Flashcard Challenge Engine

A timed challenge mode for study cards: picks a working set from a card
pool, runs a countdown, scores responses, unlocks achievements and keeps
a history of completed runs.
"""

__version__ = "1.0.0"
__author__ = "Flashcard Challenge Contributors"
