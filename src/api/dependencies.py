"""FastAPI dependency providers for application services."""

from __future__ import annotations

from fastapi import HTTPException, Request

from core.pdf_converter.config import AppConfig
from core.pdf_converter.core import ConversionService


def get_config(request: Request) -> AppConfig:
    config = getattr(request.app.state, "config", None)
    if config is None:
        raise HTTPException(status_code=503, detail="CONFIG_UNAVAILABLE")
    return config


def get_service(request: Request) -> ConversionService:
    service = getattr(request.app.state, "service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="SERVICE_UNAVAILABLE")
    return service


__all__ = ["get_config", "get_service"]
