"""Enhanced custom widgets for the challenge UI."""

from .stat_card import StatCard

__all__ = ["StatCard"]
