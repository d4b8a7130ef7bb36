from __future__ import annotations

from .interfaces import AsyncStateStore, KeyValueDocumentStore, StateStore
from .share_asset import (
    ShareAsset,
    ShareAssetAlreadyExistsError,
    ShareAssetCorruptError,
    ShareAssetError,
    ShareAssetNotFoundError,
    ShareAssetStore,
)
from .state_store import AsyncDiskStateStore, DiskStateStore, InMemoryStateStore

__all__ = [
    "KeyValueDocumentStore",
    "StateStore",
    "AsyncStateStore",
    "InMemoryStateStore",
    "DiskStateStore",
    "AsyncDiskStateStore",
    "ShareAsset",
    "ShareAssetStore",
    "ShareAssetError",
    "ShareAssetAlreadyExistsError",
    "ShareAssetNotFoundError",
    "ShareAssetCorruptError",
]
