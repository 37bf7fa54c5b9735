from __future__ import annotations

import json
import tempfile
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping


CONFIG_FILE = Path("config.toml")
DEFAULT_WORK_DIR = Path(tempfile.gettempdir()) / "markdown-pdf"
DEFAULT_LAUNCH_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")


@dataclass(slots=True)
class RuntimeConfig:
    work_dir: Path = DEFAULT_WORK_DIR
    log_file: Path = Path("logs/conversions.jsonl")
    max_file_size_mb: int = 10
    render_timeout_s: int = 60
    static_dir: Path = Path("public")


@dataclass(slots=True)
class APIConfig:
    host: str = "0.0.0.0"
    port: int = 3737


@dataclass(slots=True)
class RenderSettings:
    page_format: str = "Letter"
    launch_args: tuple[str, ...] = DEFAULT_LAUNCH_ARGS
    margin: str = "40px"
    header_margin_top: str = "80px"
    footer_margin_bottom: str = "60px"


@dataclass(slots=True)
class BrandingConfig:
    company_name: str = "Eckman Tech LLC"
    company_url: str = "https://eckman-tech.com"


@dataclass(slots=True)
class AppConfig:
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    api: APIConfig = field(default_factory=APIConfig)
    render: RenderSettings = field(default_factory=RenderSettings)
    branding: BrandingConfig = field(default_factory=BrandingConfig)

    @property
    def max_upload_bytes(self) -> int:
        return self.runtime.max_file_size_mb * 1024 * 1024


def _read_toml(path: Path) -> Mapping[str, object]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _section(raw: Mapping[str, object], name: str) -> Mapping[str, object] | None:
    data = raw.get(name) if isinstance(raw, Mapping) else None
    return data if isinstance(data, Mapping) else None


def _build_runtime(data: Mapping[str, object] | None) -> RuntimeConfig:
    if not data:
        return RuntimeConfig()
    return RuntimeConfig(
        work_dir=Path(str(data.get("work_dir", DEFAULT_WORK_DIR))),
        log_file=Path(str(data.get("log_file", "logs/conversions.jsonl"))),
        max_file_size_mb=int(data.get("max_file_size_mb", 10)),
        render_timeout_s=int(data.get("render_timeout_s", 60)),
        static_dir=Path(str(data.get("static_dir", "public"))),
    )


def _build_api(data: Mapping[str, object] | None) -> APIConfig:
    if not data:
        return APIConfig()
    return APIConfig(host=str(data.get("host", "0.0.0.0")), port=int(data.get("port", 3737)))


def _build_render(data: Mapping[str, object] | None) -> RenderSettings:
    if not data:
        return RenderSettings()
    return RenderSettings(
        page_format=str(data.get("page_format", "Letter")),
        launch_args=_tuple_of_strings(data.get("launch_args"), DEFAULT_LAUNCH_ARGS),
        margin=str(data.get("margin", "40px")),
        header_margin_top=str(data.get("header_margin_top", "80px")),
        footer_margin_bottom=str(data.get("footer_margin_bottom", "60px")),
    )


def _build_branding(data: Mapping[str, object] | None) -> BrandingConfig:
    if not data:
        return BrandingConfig()
    return BrandingConfig(
        company_name=str(data.get("company_name", "Eckman Tech LLC")),
        company_url=str(data.get("company_url", "https://eckman-tech.com")),
    )


def _tuple_of_strings(value: object | None, default: Iterable[str]) -> tuple[str, ...]:
    if not value:
        return tuple(default)
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(item) for item in value)
    raise TypeError(f"Unsupported launch_args configuration: {value!r}")


def load_config(path: Path | None = None) -> AppConfig:
    path = path or CONFIG_FILE
    raw = _read_toml(path)
    return AppConfig(
        runtime=_build_runtime(_section(raw, "runtime")),
        api=_build_api(_section(raw, "api")),
        render=_build_render(_section(raw, "render")),
        branding=_build_branding(_section(raw, "branding")),
    )


def dump_config(config: AppConfig) -> str:
    payload = {
        "runtime": {
            "work_dir": str(config.runtime.work_dir),
            "log_file": str(config.runtime.log_file),
            "max_file_size_mb": config.runtime.max_file_size_mb,
            "render_timeout_s": config.runtime.render_timeout_s,
            "static_dir": str(config.runtime.static_dir),
        },
        "api": {
            "host": config.api.host,
            "port": config.api.port,
        },
        "render": {
            "page_format": config.render.page_format,
            "launch_args": list(config.render.launch_args),
            "margin": config.render.margin,
            "header_margin_top": config.render.header_margin_top,
            "footer_margin_bottom": config.render.footer_margin_bottom,
        },
        "branding": {
            "company_name": config.branding.company_name,
            "company_url": config.branding.company_url,
        },
    }
    return json.dumps(payload, indent=2)
