from __future__ import annotations

import asyncio
import base64
from pathlib import Path
from typing import Any

from .disk_store import DiskJsonDocumentStore
from .interfaces import AsyncStateStore, StateStore
from . import paths


class InMemoryStateStore(AsyncStateStore):
    """
    Dict-backed world state. Lives as long as the process.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    async def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    async def put(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class DiskStateStore(StateStore):
    """
    World state kept in one JSON document:

      data/state/world_state.json -> { "<key>": "<base64 of stored bytes>" }

    Values are opaque bytes; the document only base64-encodes them.
    """

    def __init__(self, path: Path | None = None):
        self._doc = DiskJsonDocumentStore(path or paths.world_state_path(paths.data_dir()))

    @property
    def path(self) -> Path:
        return self._doc.path

    def get(self, key: str) -> bytes | None:
        encoded = self._doc.load().get(key)
        if not isinstance(encoded, str):
            return None
        return base64.b64decode(encoded)

    def put(self, key: str, value: bytes) -> None:
        encoded = base64.b64encode(bytes(value)).decode("ascii")

        def _put(doc: dict[str, Any]) -> None:
            doc[key] = encoded

        self._doc.modify(_put)

    def delete(self, key: str) -> None:
        def _delete(doc: dict[str, Any]) -> None:
            doc.pop(key, None)

        self._doc.modify(_delete)


class AsyncDiskStateStore(AsyncStateStore):
    """
    Async wrapper around the disk-backed state store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._store = DiskStateStore(path)

    @property
    def path(self) -> Path:
        return self._store.path

    async def get(self, key: str) -> bytes | None:
        return await asyncio.to_thread(self._store.get, key)

    async def put(self, key: str, value: bytes) -> None:
        await asyncio.to_thread(self._store.put, key, value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._store.delete, key)
