from datetime import date
from pathlib import Path

from core.pdf_converter.templates import EMPTY_SLOT, build_footer_template, build_header_template


def test_header_placeholders_when_empty() -> None:
    header = build_header_template()
    assert header.count(EMPTY_SLOT) == 2
    assert "<img" not in header


def test_header_with_logo_and_customer(tmp_path: Path) -> None:
    logo = tmp_path / "logo.svg"
    logo.write_text("<svg/>", encoding="utf-8")
    header = build_header_template(logo, "Acme & Sons")
    assert 'src="data:image/svg+xml;base64,' in header
    assert '<div class="pdf-header-customer">Acme &amp; Sons</div>' in header


def test_footer_has_page_placeholders() -> None:
    footer = build_footer_template(today=date(2026, 10, 19))
    assert "<span>October 19, 2026</span>" in footer
    assert '<span class="pageNumber"></span> of <span class="totalPages"></span>' in footer
    assert '<a href="https://eckman-tech.com">Eckman Tech LLC</a>' in footer
