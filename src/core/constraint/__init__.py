from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config.toml")
ENV_PREFIX = "MPS_"
APP_VERSION = "1.0.0"

__all__ = ["DEFAULT_CONFIG_PATH", "ENV_PREFIX", "APP_VERSION"]
