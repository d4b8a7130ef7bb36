from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Persistence (default: in-memory world state)
    persist_to_disk: bool

    # Logging
    log_level: str
    debug_log_requests: bool

    # Contract metadata
    contract_version: str


def get_settings() -> Settings:
    persist_to_disk = _env_bool("PERSIST_TO_DISK", False)

    log_level = (os.getenv("LOG_LEVEL", "INFO")).strip().upper() or "INFO"
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    contract_version = (os.getenv("CONTRACT_VERSION", "0.0.1")).strip() or "0.0.1"

    return Settings(
        persist_to_disk=persist_to_disk,
        log_level=log_level,
        debug_log_requests=debug_log_requests,
        contract_version=contract_version,
    )
