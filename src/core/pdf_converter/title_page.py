from __future__ import annotations

from datetime import date
from pathlib import Path

from .assets import image_data_uri
from .utils import format_long_date

PAGE_BREAK_MARKER = '<div style="page-break-after: always;"></div>'


def build_title_page(
    title: str,
    logo_path: Path | None = None,
    *,
    company_name: str = "Eckman Tech LLC",
    today: date | None = None,
) -> str:
    """Render a centered title block followed by a forced page break.

    The block is Markdown with embedded HTML; ``markdown="1"`` lets the
    renderer parse the heading inside the wrapping ``<div>``.
    """

    parts = ['<div style="text-align: center; margin-top: 250px;" markdown="1">']
    if logo_path is not None:
        parts.append(
            f'<img src="{image_data_uri(logo_path)}" '
            'style="max-width: 300px; max-height: 150px; margin-bottom: 50px;" />'
        )
    parts.append(f"# {title}")
    parts.append(
        f'<p style="font-size: 1.2em; margin-top: 30px;">Prepared by <strong>{company_name}</strong></p>'
    )
    parts.append(f'<p style="font-size: 1em; color: #666;">{format_long_date(today)}</p>')
    parts.append("</div>")
    parts.append(PAGE_BREAK_MARKER)
    return "\n\n".join(parts) + "\n\n"


__all__ = ["PAGE_BREAK_MARKER", "build_title_page"]
