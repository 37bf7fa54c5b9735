"""Markdown to PDF conversion toolkit."""

from .config import AppConfig, load_config
from .core import ConversionService
from .errors import AssetReadError, ConversionError, RenderEngineError
from .models import ConversionRequest, ConversionResult, HeadingEntry, UploadedAsset

__all__ = [
    "AppConfig",
    "load_config",
    "ConversionService",
    "ConversionError",
    "AssetReadError",
    "RenderEngineError",
    "ConversionRequest",
    "ConversionResult",
    "HeadingEntry",
    "UploadedAsset",
]
