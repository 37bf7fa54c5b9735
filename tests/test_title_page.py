from datetime import date
from pathlib import Path

import pytest

from core.pdf_converter.errors import AssetReadError
from core.pdf_converter.title_page import PAGE_BREAK_MARKER, build_title_page


def test_title_page_without_logo() -> None:
    page = build_title_page("Report", today=date(2026, 3, 5))
    assert "# Report" in page
    assert "Prepared by <strong>Eckman Tech LLC</strong>" in page
    assert "March 5, 2026" in page
    assert PAGE_BREAK_MARKER in page
    assert "<img" not in page


def test_title_page_embeds_logo(tmp_path: Path) -> None:
    logo = tmp_path / "brand.png"
    logo.write_bytes(b"\x89PNG\r\n")
    page = build_title_page("Report", logo)
    assert '<img src="data:image/png;base64,iVBORw0K' in page
    assert page.index("<img") < page.index("# Report")


def test_title_page_missing_logo_raises(tmp_path: Path) -> None:
    with pytest.raises(AssetReadError) as exc:
        build_title_page("Report", tmp_path / "missing.jpg")
    assert exc.value.code == "ASSET_READ"
