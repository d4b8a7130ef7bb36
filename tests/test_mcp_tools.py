from __future__ import annotations

import asyncio

import pytest

from persistence.share_asset import ShareAssetAlreadyExistsError, ShareAssetNotFoundError


def test_mcp_tools_basic_flow(reload_endpoints):
    async def _run():
        import endpoints.mcp_endpoints as mcp

        r = await mcp.share_asset_exists("1001")
        assert r["structuredContent"] == {"id": "1001", "exists": False}

        r = await mcp.create_share_asset("1001", "A")
        assert "Created share asset 1001" in r["content"][0]["text"]

        r = await mcp.read_share_asset("1001")
        assert r["structuredContent"]["shareAsset"] == {"value": "A"}
        assert r["content"][0]["text"] == '{"value":"A"}'

        await mcp.update_share_asset("1001", "C")
        r = await mcp.read_share_asset("1001")
        assert r["structuredContent"]["shareAsset"] == {"value": "C"}

        r = await mcp.delete_share_asset("1001")
        assert "Deleted share asset 1001" in r["content"][0]["text"]

        r = await mcp.share_asset_exists("1001")
        assert r["structuredContent"]["exists"] is False

    asyncio.run(_run())


def test_mcp_tools_surface_contract_errors(reload_endpoints):
    async def _run():
        import endpoints.mcp_endpoints as mcp

        await mcp.create_share_asset("1001", "A")
        with pytest.raises(ShareAssetAlreadyExistsError, match="The share asset 1001 already exists"):
            await mcp.create_share_asset("1001", "B")
        with pytest.raises(ShareAssetNotFoundError, match="The share asset 1003 does not exist"):
            await mcp.update_share_asset("1003", "X")

    asyncio.run(_run())


def test_mcp_tools_reject_blank_ids(reload_endpoints):
    async def _run():
        import endpoints.mcp_endpoints as mcp

        r = await mcp.create_share_asset("  ", "A")
        assert r["content"][0]["text"] == "Missing share asset id."
        assert await mcp.CONTRACT.store.exists("  ") is False

    asyncio.run(_run())


def test_mcp_endpoints_persist_to_sandboxed_disk(reload_endpoints, sandbox_project):
    async def _run():
        import endpoints.mcp_endpoints as mcp

        await mcp.create_share_asset("1001", "A")

    asyncio.run(_run())
    assert (sandbox_project / "data" / "state" / "world_state.json").exists()
