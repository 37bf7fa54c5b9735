from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from core.pdf_converter import cli
from core.pdf_converter.core import ConversionService

from .conftest import FAKE_PDF, FakeEngine

runner = CliRunner()


def write_config(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(
        f'[runtime]\nwork_dir = "{(tmp_path / "work").as_posix()}"\n'
        f'log_file = "{(tmp_path / "log.jsonl").as_posix()}"\n',
        encoding="utf-8",
    )
    return path


def test_cli_convert_writes_pdf(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    engine = FakeEngine()
    monkeypatch.setattr(cli, "ConversionService", lambda config: ConversionService(config, engine=engine))
    source = tmp_path / "guide.md"
    source.write_text("# Guide\n## Setup\n", encoding="utf-8")
    config_path = write_config(tmp_path)

    result = runner.invoke(cli.app, ["convert", str(source), "--toc", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "guide.pdf").read_bytes() == FAKE_PDF
    assert engine.calls[0][0].startswith("# Table of Contents")
    assert list((tmp_path / "work").iterdir()) == []


def test_cli_convert_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["convert", str(tmp_path / "nope.md")])
    assert result.exit_code == 2


def test_cli_show_config(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["show-config", "--config", str(write_config(tmp_path))])
    assert result.exit_code == 0
    assert json.loads(result.output)["api"]["port"] == 3737
