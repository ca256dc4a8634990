"""Card pool sources: local JSON files and a remote REST endpoint."""

import json
import logging
from pathlib import Path
from typing import Any

import requests

from flashcard_challenge.exceptions import CardSourceError
from flashcard_challenge.models import StudyCard

logger = logging.getLogger(__name__)


def parse_cards(payload: Any) -> list[StudyCard]:
    """Build cards from a decoded JSON payload.

    Accepts a bare list, or an object wrapping the list under ``flashcards``,
    ``cards`` or ``data``. Entries missing required fields are skipped.

    Raises:
        CardSourceError: If the payload has none of the accepted shapes
    """
    if isinstance(payload, dict):
        for key in ("flashcards", "cards", "data"):
            if isinstance(payload.get(key), list):
                payload = payload[key]
                break
    if not isinstance(payload, list):
        raise CardSourceError("Card payload must be a list of cards")

    cards: list[StudyCard] = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning(f"Skipping card #{i}: not an object")
            continue
        try:
            cards.append(StudyCard.from_dict(item))
        except KeyError as e:
            logger.warning(f"Skipping card #{i}: missing field {e}")
    return cards


class JsonFileCardSource:
    """Card source reading a JSON file from disk.

    Implements CardSource protocol.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def name(self) -> str:
        return self._path.name

    def load_cards(self) -> list[StudyCard]:
        """Read and parse the cards file.

        Raises:
            CardSourceError: If the file is missing or not valid JSON
        """
        try:
            with self._path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise CardSourceError(f"Cards file not found: {self._path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise CardSourceError(f"Could not read cards file {self._path}: {e}") from e

        cards = parse_cards(payload)
        logger.info(f"Loaded {len(cards)} cards from {self._path}")
        return cards


class HttpCardSource:
    """Card source fetching the collection from a REST endpoint.

    Implements CardSource protocol. Makes a single request; no retries.
    """

    def __init__(self, url: str, timeout: float = 10.0):
        """Initialize with endpoint URL and request timeout.

        Args:
            url: Endpoint returning the card collection as JSON
            timeout: Seconds to wait for the response
        """
        self._url = url
        self._timeout = timeout

    @property
    def name(self) -> str:
        return self._url

    def load_cards(self) -> list[StudyCard]:
        """Fetch and parse the card collection.

        Raises:
            CardSourceError: On network errors, non-200 responses or bad JSON
        """
        try:
            response = requests.get(
                self._url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            raise CardSourceError(f"Timed out fetching cards from {self._url}") from e
        except requests.RequestException as e:
            raise CardSourceError(f"Could not fetch cards from {self._url}: {e}") from e

        if response.status_code != 200:
            raise CardSourceError(f"Card service returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise CardSourceError(f"Card service returned invalid JSON: {e}") from e

        cards = parse_cards(payload)
        logger.info(f"Fetched {len(cards)} cards from {self._url}")
        return cards
