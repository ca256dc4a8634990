"""GUI configuration persistence manager."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from flashcard_challenge.config import ChallengeConfig, create_default_config

logger = logging.getLogger(__name__)


class GUIConfigManager:
    """Manager for GUI configuration persistence.

    Saves the configuration (including the last-used challenge settings) to a
    JSON file in the user's home directory and falls back to the default
    configuration when the file is missing or invalid.
    """

    CONFIG_FILE = Path.home() / ".flashcard_challenge" / "gui_config.json"

    # Keys that hold Path values
    PATH_KEYS = {"history_db_path", "cards_file"}

    @classmethod
    def save_config(cls, config: ChallengeConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        config_dict = cls._paths_to_strings(asdict(config))
        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls) -> ChallengeConfig:
        """Load configuration from JSON file.

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            If the file exists but is invalid, falls back to default configuration
            and logs a warning.
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config()

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)
            return ChallengeConfig(**cls._strings_to_paths(config_dict))

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config()

    @staticmethod
    def _paths_to_strings(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Path objects to strings in a dict."""
        return {key: str(value) if isinstance(value, Path) else value for key, value in data.items()}

    @classmethod
    def _strings_to_paths(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Convert string paths back to Path objects."""
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key in cls.PATH_KEYS and isinstance(value, str) and value:
                result[key] = Path(value)
            else:
                result[key] = value
        return result
