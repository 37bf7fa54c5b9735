from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from core.pdf_converter.config import AppConfig, RuntimeConfig
from core.pdf_converter.core import ConversionService
from core.pdf_converter.errors import RenderEngineError
from core.pdf_converter.models import RenderConfig

FAKE_PDF = b"%PDF-1.4\n% fake\n%%EOF\n"


class FakeEngine:
    """Writes a stub PDF and remembers what it was asked to render."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, RenderConfig]] = []

    def render(self, markdown_text: str, config: RenderConfig) -> Path:
        self.calls.append((markdown_text, config))
        config.destination.write_bytes(FAKE_PDF)
        return config.destination


class FailingEngine:
    def render(self, markdown_text: str, config: RenderConfig) -> Path:
        config.destination.write_bytes(b"%PDF-partial")
        raise RenderEngineError("Executable doesn't exist at /ms-playwright/chromium")


def build_config(tmp_path: Path) -> AppConfig:
    runtime = RuntimeConfig(
        work_dir=tmp_path / "work",
        log_file=tmp_path / "logs" / "conversions.jsonl",
        static_dir=tmp_path / "public",
    )
    return AppConfig(runtime=runtime)


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return build_config(tmp_path)


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def service(config: AppConfig, engine: FakeEngine) -> ConversionService:
    return ConversionService(config, engine=engine)


@pytest.fixture
def client(config: AppConfig, service: ConversionService) -> TestClient:
    return TestClient(create_app(config, service))


class DiskFullEngine:
    def render(self, markdown_text: str, config: RenderConfig) -> Path:
        config.destination.write_bytes(b"%PDF-partial")
        raise OSError("No space left on device")
