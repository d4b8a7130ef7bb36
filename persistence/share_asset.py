from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, ValidationError

from .interfaces import AsyncStateStore

logger = logging.getLogger(__name__)


class ShareAsset(BaseModel):
    """
    Mirrors the stored world-state value exactly:
      {"value":"<string>"}
    """

    model_config = ConfigDict(extra="ignore")

    value: str

    @classmethod
    def from_state_bytes(cls, raw: bytes) -> "ShareAsset":
        return cls.model_validate_json(raw.decode("utf-8"))

    def to_state_bytes(self) -> bytes:
        # Compact, UTF-8, non-ASCII left unescaped.
        return self.model_dump_json().encode("utf-8")


class ShareAssetError(Exception):
    error_code = "SHARE_ASSET_ERROR"

    def __init__(self, asset_id: str, message: str) -> None:
        super().__init__(message)
        self.asset_id = asset_id
        self.message = message


class ShareAssetAlreadyExistsError(ShareAssetError):
    error_code = "ALREADY_EXISTS"

    def __init__(self, asset_id: str) -> None:
        super().__init__(asset_id, f"The share asset {asset_id} already exists")


class ShareAssetNotFoundError(ShareAssetError):
    error_code = "NOT_FOUND"

    def __init__(self, asset_id: str) -> None:
        super().__init__(asset_id, f"The share asset {asset_id} does not exist")


class ShareAssetCorruptError(ShareAssetError):
    error_code = "CORRUPT"

    def __init__(self, asset_id: str) -> None:
        super().__init__(asset_id, f"The share asset {asset_id} is corrupt")


class ShareAssetStore:
    """
    Create/read/update/delete of share assets over an injected world-state store.

    Every operation is one existence check followed by at most one store call.
    Nothing here locks or retries; exceptions raised by the store propagate as-is.
    """

    def __init__(self, state: AsyncStateStore) -> None:
        self._state = state

    async def exists(self, asset_id: str) -> bool:
        buffer = await self._state.get(asset_id)
        return bool(buffer)

    async def create(self, asset_id: str, value: str) -> None:
        if await self.exists(asset_id):
            raise ShareAssetAlreadyExistsError(asset_id)
        await self._state.put(asset_id, ShareAsset(value=value).to_state_bytes())
        logger.info("SHARE ASSET CREATE: id=%s", asset_id)

    async def read(self, asset_id: str) -> ShareAsset:
        if not await self.exists(asset_id):
            raise ShareAssetNotFoundError(asset_id)
        buffer = await self._state.get(asset_id)
        try:
            return ShareAsset.from_state_bytes(buffer or b"")
        except (UnicodeDecodeError, ValidationError) as e:
            logger.warning("SHARE ASSET READ: undecodable value for id=%s: %r", asset_id, e)
            raise ShareAssetCorruptError(asset_id) from e

    async def update(self, asset_id: str, new_value: str) -> None:
        if not await self.exists(asset_id):
            raise ShareAssetNotFoundError(asset_id)
        await self._state.put(asset_id, ShareAsset(value=new_value).to_state_bytes())
        logger.info("SHARE ASSET UPDATE: id=%s", asset_id)

    async def delete(self, asset_id: str) -> None:
        if not await self.exists(asset_id):
            raise ShareAssetNotFoundError(asset_id)
        await self._state.delete(asset_id)
        logger.info("SHARE ASSET DELETE: id=%s", asset_id)
