"""Durable key-value storage and high score persistence."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol
import json
import logging

from .utils import HIGH_SCORE_KEY, STORAGE_FILE, load_json, save_json

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String-keyed store holding string values."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Store backed by a JSON object on disk, written through on every set."""

    def __init__(self, path: Path = STORAGE_FILE) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        payload = load_json(self.path, {})
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed storage file %s", self.path)
            return {}
        return {str(key): value for key, value in payload.items() if isinstance(value, str)}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        payload = self._read()
        payload[key] = value
        save_json(self.path, payload)


class HighScoreStore:
    """Read and write the high score as a JSON-encoded integer."""

    def __init__(self, store: KeyValueStore, key: str = HIGH_SCORE_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> int:
        """Return the stored high score, or 0 when absent or unreadable."""
        raw = self.store.get(self.key)
        if not raw:
            return 0
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning("Stored high score %r could not be decoded, using 0", raw)
            return 0
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Stored high score %r is not a non-negative integer, using 0", raw)
            return 0
        return value

    def save(self, score: int) -> None:
        self.store.set(self.key, json.dumps(score))
