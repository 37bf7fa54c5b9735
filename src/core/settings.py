from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from .constraint import DEFAULT_CONFIG_PATH, ENV_PREFIX


@dataclass(frozen=True, slots=True)
class Settings:
    """Application runtime settings sourced from environment variables."""

    config_path: Path = DEFAULT_CONFIG_PATH
    host: str | None = None
    port: int | None = None


def _parse_port(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _read_settings() -> Settings:
    config_env = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
    config_path = Path(config_env) if config_env else DEFAULT_CONFIG_PATH
    host = os.getenv(f"{ENV_PREFIX}HOST") or None
    port = _parse_port(os.getenv(f"{ENV_PREFIX}PORT"))
    return Settings(config_path=config_path, host=host, port=port)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return _read_settings()


__all__ = ["Settings", "get_settings"]
