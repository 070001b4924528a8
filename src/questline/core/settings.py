from __future__ import annotations

import os
from dataclasses import dataclass

STORE_BACKENDS = ("memory", "mongo")


def _env_str(name: str, default: str = "") -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the Questline service."""

    admin_address: str
    store_backend: str
    log_level: str
    api_host: str
    api_port: int


def load_settings() -> Settings:
    """Construct Settings from environment variables."""
    admin = _env_str("QUEST_ADMIN_ADDRESS")
    if not admin:
        raise ValueError("QUEST_ADMIN_ADDRESS must be set")

    backend = _env_str("QUEST_STORE", "memory").lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f"QUEST_STORE must be one of {', '.join(STORE_BACKENDS)}, got {backend!r}"
        )

    return Settings(
        admin_address=admin,
        store_backend=backend,
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        api_host=_env_str("API_HOST", "localhost"),
        api_port=_env_int("API_PORT", default=8000),
    )


__all__ = ["Settings", "load_settings"]
