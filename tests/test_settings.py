from pathlib import Path

import pytest

from core.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MPS_CONFIG_PATH", "MPS_HOST", "MPS_PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.config_path == Path("config.toml")
    assert settings.host is None
    assert settings.port is None


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MPS_CONFIG_PATH", str(tmp_path / "custom.toml"))
    monkeypatch.setenv("MPS_HOST", "127.0.0.1")
    monkeypatch.setenv("MPS_PORT", "not-a-port")
    settings = get_settings()
    assert settings.config_path == tmp_path / "custom.toml"
    assert settings.host == "127.0.0.1"
    assert settings.port is None
