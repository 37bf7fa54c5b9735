from __future__ import annotations


class ConversionError(RuntimeError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class AssetReadError(ConversionError):
    """Raised when an uploaded image cannot be read for embedding."""

    def __init__(self, message: str) -> None:
        super().__init__("ASSET_READ", message)


class RenderEngineError(ConversionError):
    """Raised when the headless browser fails to produce a PDF."""

    def __init__(self, message: str) -> None:
        super().__init__("RENDER_FAILED", message)


__all__ = ["ConversionError", "AssetReadError", "RenderEngineError"]
