from __future__ import annotations

from typing import Any, Protocol


class KeyValueDocumentStore(Protocol):
    """
    A single JSON-like document persisted under one location.
    """

    def load(self) -> dict[str, Any]:
        """Load and return the full document (never None)."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Persist the full document atomically."""
        ...


class StateStore(Protocol):
    """
    Blocking world-state access: raw bytes under string keys.
    """

    def get(self, key: str) -> bytes | None: ...
    def put(self, key: str, value: bytes) -> None: ...
    def delete(self, key: str) -> None: ...


class AsyncStateStore(Protocol):
    """
    World-state collaborator consumed by the contract.

    ``get`` returns None (or empty bytes) for an unset key; ``delete`` of an unset key is not an error.
    """

    async def get(self, key: str) -> bytes | None: ...
    async def put(self, key: str, value: bytes) -> None: ...
    async def delete(self, key: str) -> None: ...
