from __future__ import annotations

import importlib
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class RecordingStateStore:
    """
    In-memory world state that records every put/delete, for asserting on exact store traffic.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self.data: dict[str, bytes] = dict(initial or {})
        self.puts: list[tuple[str, bytes]] = []
        self.deletes: list[str] = []

    async def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    async def put(self, key: str, value: bytes) -> None:
        self.puts.append((key, value))
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.deletes.append(key)
        self.data.pop(key, None)


@pytest.fixture
def seeded_state() -> RecordingStateStore:
    return RecordingStateStore(
        {
            "1001": b'{"value":"share asset 1001 value"}',
            "1002": b'{"value":"share asset 1002 value"}',
        }
    )


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect persistence paths to a temp project directory so tests never touch real ./data.
    """
    import persistence.paths as paths

    def _project_root() -> Path:
        return tmp_path

    def _data_dir() -> Path:
        p = tmp_path / "data"
        p.mkdir(parents=True, exist_ok=True)
        return p

    monkeypatch.setattr(paths, "project_root", _project_root)
    monkeypatch.setattr(paths, "data_dir", _data_dir)
    return tmp_path


@pytest.fixture
def reload_endpoints(monkeypatch: pytest.MonkeyPatch, sandbox_project: Path) -> None:
    """
    Endpoints build the contract singleton at import time; reload after sandboxing paths.
    """
    monkeypatch.setenv("PERSIST_TO_DISK", "1")
    import endpoints.mcp_endpoints as mcp_endpoints

    importlib.reload(mcp_endpoints)
