from __future__ import annotations

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core.constraint import APP_VERSION
from core.pdf_converter.config import AppConfig, load_config
from core.pdf_converter.core import ConversionService
from core.settings import Settings, get_settings

from .routers import convert, health


def create_app(config: AppConfig | None = None, service: ConversionService | None = None) -> FastAPI:
    config = config or _prepare_config(get_settings())
    app = FastAPI(title="Markdown PDF Service", version=APP_VERSION)
    app.state.config = config
    app.state.service = service or ConversionService(config)

    app.include_router(health.router)
    app.include_router(convert.router)

    # Mounted last so the API routes take precedence over the UI.
    static_dir = config.runtime.static_dir
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


def _prepare_config(settings: Settings) -> AppConfig:
    config = load_config(settings.config_path)
    if settings.host is not None:
        config.api.host = settings.host
    if settings.port is not None:
        config.api.port = settings.port
    return config


__all__ = ["create_app"]
