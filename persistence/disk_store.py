from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Callable

from json_store import atomic_write_json, read_json

from .interfaces import KeyValueDocumentStore

_LOCKS_GUARD = threading.Lock()
_PATH_LOCKS: dict[Path, threading.Lock] = {}


def _lock_for(path: Path) -> threading.Lock:
    # One lock per resolved path, shared by every store instance pointing at it.
    key = path.resolve()
    with _LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(key, threading.Lock())


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores a single JSON object on disk at a fixed path.

    - Missing or blank file loads as an empty dict.
    - A file holding anything other than a JSON object raises ValueError.
    - Writes atomically.
    """

    def __init__(self, path: Path):
        self._path = path
        self._lock = _lock_for(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        with self._lock:
            return self._load_unlocked()

    def save(self, doc: dict[str, Any]) -> None:
        with self._lock:
            atomic_write_json(self._path, doc)

    def modify(self, change: Callable[[dict[str, Any]], None]) -> None:
        """Load, apply ``change`` in place and save, all under the path lock."""
        with self._lock:
            doc = self._load_unlocked()
            change(doc)
            atomic_write_json(self._path, doc)

    def _load_unlocked(self) -> dict[str, Any]:
        raw = read_json(self._path)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ValueError(f"{self._path} does not hold a JSON object")
        return raw
