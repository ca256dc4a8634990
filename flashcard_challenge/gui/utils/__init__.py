"""Utility functions for the GUI layer."""

from .config_manager import GUIConfigManager

__all__ = ["GUIConfigManager"]
