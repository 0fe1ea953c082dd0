"""Key/value store for local state blobs (timer, bloom streak)

Each logical state object is one JSON document under a fixed key and is
overwritten wholesale on every save. Storage failures never propagate:
unreadable or corrupt entries load as None and failed writes are logged,
so callers keep working in memory.
"""
import json
import logging
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class StateStore(ABC):
    """Persistence port for local state"""

    @abstractmethod
    def load(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the stored document, or None if absent or unreadable"""

    @abstractmethod
    def save(self, key: str, state: Dict[str, Any]) -> None:
        """Overwrite the stored document"""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete the stored document if present"""


class InMemoryStateStore(StateStore):
    """Process-local store, used in tests and as a fallback"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        # Raw JSON text per key, so corrupt entries can be simulated
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            state = json.loads(raw)
        except ValueError as e:
            logger.error(f"Failed to parse state '{key}': {e}")
            return None
        if not isinstance(state, dict):
            logger.error(f"Ignoring non-object state '{key}'")
            return None
        return state

    def save(self, key: str, state: Dict[str, Any]) -> None:
        self._data[key] = json.dumps(state)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def raw(self, key: str) -> Optional[str]:
        return self._data.get(key)


class FileStateStore(StateStore):
    """One JSON file per key under a base directory"""

    def __init__(self, base_dir: str | os.PathLike):
        self._base_dir = Path(base_dir)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid state key: {key!r}")
        return self._base_dir / f"{key}.json"

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        path = self._path(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"State storage unavailable, reading '{key}': {e}")
            return None

        try:
            state = json.loads(raw)
        except ValueError as e:
            logger.error(f"Failed to parse state '{key}': {e}")
            return None
        if not isinstance(state, dict):
            logger.error(f"Ignoring non-object state '{key}'")
            return None
        return state

    def save(self, key: str, state: Dict[str, Any]) -> None:
        path = self._path(key)
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_suffix(".json.tmp")
            tmp_path.write_text(json.dumps(state), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            logger.warning(f"State storage unavailable, keeping '{key}' in memory only: {e}")

    def remove(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"State storage unavailable, removing '{key}': {e}")
