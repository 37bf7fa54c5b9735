from __future__ import annotations

import base64
from pathlib import Path

from .errors import AssetReadError

# Extensions whose MIME subtype differs from the extension itself.
SUBTYPE_ALIASES: dict[str, str] = {
    "jpg": "jpeg",
    "svg": "svg+xml",
    "tif": "tiff",
}


def image_subtype(path: Path) -> str:
    extension = path.suffix.lower().lstrip(".")
    return SUBTYPE_ALIASES.get(extension, extension)


def image_data_uri(path: Path) -> str:
    """Return *path* as a base64 ``data:image/...`` reference."""

    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise AssetReadError(f"Unable to read image {path.name}: {exc.strerror or exc}") from exc
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:image/{image_subtype(path)};base64,{encoded}"


__all__ = ["image_data_uri", "image_subtype"]
