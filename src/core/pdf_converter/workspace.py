"""Per-request scratch directories.

Every file a conversion touches (uploads and the rendered PDF) is created
inside one uniquely named directory, and the directory is removed when the
``request_workspace`` block exits, whichever way it exits.
"""

from __future__ import annotations

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .models import UploadedAsset
from .utils import slugify


class RequestWorkspace:
    def __init__(self, root: Path) -> None:
        root.mkdir(parents=True, exist_ok=True)
        self.path = Path(tempfile.mkdtemp(prefix="request-", dir=root))
        self._files: list[Path] = []

    @property
    def files(self) -> list[Path]:
        return list(self._files)

    def store(self, field_name: str, filename: str | None, data: bytes) -> UploadedAsset:
        original = filename or field_name
        destination = self._register(f"{slugify(field_name)}-{slugify(Path(original).name)}")
        destination.write_bytes(data)
        return UploadedAsset(path=destination, filename=original, size=len(data))

    def output_path(self, name: str = "document.pdf") -> Path:
        return self._register(name)

    def cleanup(self) -> None:
        shutil.rmtree(self.path, ignore_errors=True)

    def _register(self, name: str) -> Path:
        destination = self.path / name
        self._files.append(destination)
        return destination


@contextmanager
def request_workspace(root: Path) -> Iterator[RequestWorkspace]:
    workspace = RequestWorkspace(root)
    try:
        yield workspace
    finally:
        workspace.cleanup()


__all__ = ["RequestWorkspace", "request_workspace"]
