from __future__ import annotations

import logging
from typing import Any, Literal

from typing_extensions import TypedDict

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings
from mcp.types import ToolAnnotations

from contract.share_asset_contract import ShareAssetContract
from persistence.interfaces import AsyncStateStore
from persistence.state_store import AsyncDiskStateStore, InMemoryStateStore
from settings import get_settings

SETTINGS = get_settings()
DEBUG_LOG_REQUESTS = SETTINGS.debug_log_requests

logger = logging.getLogger(__name__)


class ToolTextContent(TypedDict):
    type: Literal["text"]
    text: str


class ShareAssetToolResponse(TypedDict, total=False):
    content: list[ToolTextContent]
    structuredContent: dict[str, Any]


def _build_state_store() -> AsyncStateStore:
    if SETTINGS.persist_to_disk:
        store = AsyncDiskStateStore()
        logger.info("WORLD STATE: disk-backed at %s", store.path)
        return store
    logger.info("WORLD STATE: in-memory")
    return InMemoryStateStore()


CONTRACT = ShareAssetContract(_build_state_store(), version=SETTINGS.contract_version)


def _reply(message: str | None = None, **structured: Any) -> ShareAssetToolResponse:
    return {
        "content": ([{"type": "text", "text": message}] if message else []),
        "structuredContent": structured,
    }


def _clean_id(asset_id: Any) -> str | None:
    if not isinstance(asset_id, str) or not asset_id.strip():
        return None
    return asset_id


async def _invoke(name: str, *args: str) -> Any:
    if DEBUG_LOG_REQUESTS:
        logger.debug("MCP TOOL: %s args=%r", name, args)
    return await CONTRACT.registry.invoke(name, *args)


def _read_only(name: str) -> ToolAnnotations:
    return ToolAnnotations(readOnlyHint=not CONTRACT.registry.get(name).submit)


mcp = FastMCP(
    "Share Asset Contract",
    stateless_http=True,
    json_response=True,
    # Served behind arbitrary Host headers; the MCP default rejects non-localhost hosts with 421.
    transport_security=TransportSecuritySettings(enable_dns_rebinding_protection=False),
)


@mcp.tool(annotations=_read_only("shareAssetExists"))
async def share_asset_exists(asset_id: str) -> ShareAssetToolResponse:
    """
    Reports whether a share asset is stored under the given id.
    """
    if _clean_id(asset_id) is None:
        return _reply("Missing share asset id.")
    exists = await _invoke("shareAssetExists", asset_id)
    verb = "exists" if exists else "does not exist"
    return _reply(f"The share asset {asset_id} {verb}.", id=asset_id, exists=bool(exists))


@mcp.tool(annotations=_read_only("createShareAsset"))
async def create_share_asset(asset_id: str, value: str) -> ShareAssetToolResponse:
    """
    Creates a share asset; fails if the id is already taken.
    """
    if _clean_id(asset_id) is None:
        return _reply("Missing share asset id.")
    await _invoke("createShareAsset", asset_id, value)
    return _reply(f"Created share asset {asset_id}.", id=asset_id, shareAsset={"value": value})


@mcp.tool(annotations=_read_only("readShareAsset"))
async def read_share_asset(asset_id: str) -> ShareAssetToolResponse:
    """
    Returns the stored share asset.
    """
    if _clean_id(asset_id) is None:
        return _reply("Missing share asset id.")
    asset = await _invoke("readShareAsset", asset_id)
    return _reply(asset.model_dump_json(), id=asset_id, shareAsset=asset.model_dump(mode="json"))


@mcp.tool(annotations=_read_only("updateShareAsset"))
async def update_share_asset(asset_id: str, new_value: str) -> ShareAssetToolResponse:
    """
    Replaces the whole value of an existing share asset.
    """
    if _clean_id(asset_id) is None:
        return _reply("Missing share asset id.")
    await _invoke("updateShareAsset", asset_id, new_value)
    return _reply(f"Updated share asset {asset_id}.", id=asset_id, shareAsset={"value": new_value})


@mcp.tool(annotations=_read_only("deleteShareAsset"))
async def delete_share_asset(asset_id: str) -> ShareAssetToolResponse:
    """
    Deletes an existing share asset.
    """
    if _clean_id(asset_id) is None:
        return _reply("Missing share asset id.")
    await _invoke("deleteShareAsset", asset_id)
    return _reply(f"Deleted share asset {asset_id}.", id=asset_id)
