from __future__ import annotations

from pathlib import Path


def project_root() -> Path:
    # persistence/paths.py -> persistence -> project root
    return Path(__file__).resolve().parents[1]


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def data_dir() -> Path:
    return ensure_dir(project_root() / "data")


def state_dir(data_dir: Path) -> Path:
    return ensure_dir(data_dir / "state")


def world_state_path(data_dir: Path) -> Path:
    return state_dir(data_dir) / "world_state.json"
