from __future__ import annotations

from persistence.interfaces import AsyncStateStore
from persistence.share_asset import ShareAsset, ShareAssetStore

from .registry import ContractRegistry

CONTRACT_TITLE = "ShareAssetContract"
CONTRACT_DESCRIPTION = "My Smart Contract"


class ShareAssetContract:
    """
    Publishes ShareAssetStore operations under their ledger transaction names.
    """

    def __init__(self, state: AsyncStateStore, *, version: str = "0.0.1") -> None:
        self.store = ShareAssetStore(state)
        self.registry = ContractRegistry(CONTRACT_TITLE, CONTRACT_DESCRIPTION, version)
        self.registry.add_schema("ShareAsset", ShareAsset)

        reg = self.registry.register
        reg("shareAssetExists", self.share_asset_exists, submit=False, returns="boolean")
        reg("createShareAsset", self.create_share_asset)
        reg("readShareAsset", self.read_share_asset, submit=False, returns="ShareAsset")
        reg("updateShareAsset", self.update_share_asset)
        reg("deleteShareAsset", self.delete_share_asset)

    async def share_asset_exists(self, share_asset_id: str) -> bool:
        return await self.store.exists(share_asset_id)

    async def create_share_asset(self, share_asset_id: str, value: str) -> None:
        await self.store.create(share_asset_id, value)

    async def read_share_asset(self, share_asset_id: str) -> ShareAsset:
        return await self.store.read(share_asset_id)

    async def update_share_asset(self, share_asset_id: str, new_value: str) -> None:
        await self.store.update(share_asset_id, new_value)

    async def delete_share_asset(self, share_asset_id: str) -> None:
        await self.store.delete(share_asset_id)
