"""Print header and footer fragments.

Chromium renders these in an isolated context for every page, so styles are
inlined and images must be embedded as data URIs. The ``pageNumber`` and
``totalPages`` classes are filled in by the browser at print time.
"""

from __future__ import annotations

from datetime import date
from html import escape
from pathlib import Path

from .assets import image_data_uri
from .utils import format_long_date

EMPTY_SLOT = "<div></div>"

HEADER_STYLE = (
    "<style>"
    ".pdf-header { width: 100%; padding: 10px 20px; display: flex; align-items: center; "
    "justify-content: space-between; font-size: 10px; }"
    ".pdf-header-logo { max-height: 50px; max-width: 200px; }"
    ".pdf-header-customer { font-style: italic; font-weight: normal; }"
    "</style>"
)

FOOTER_STYLE = (
    "<style>"
    ".pdf-footer { width: 100%; padding: 10px 20px; display: flex; justify-content: space-between; "
    "align-items: center; font-size: 10px; color: #666; }"
    ".pdf-footer a { color: #3498db; text-decoration: none; }"
    "</style>"
)


def build_header_template(logo_path: Path | None = None, customer_name: str = "") -> str:
    if logo_path is not None:
        left = f'<img src="{image_data_uri(logo_path)}" class="pdf-header-logo" />'
    else:
        left = EMPTY_SLOT
    if customer_name:
        right = f'<div class="pdf-header-customer">{escape(customer_name)}</div>'
    else:
        right = EMPTY_SLOT
    return f'{HEADER_STYLE}<div class="pdf-header">{left}{right}</div>'


def build_footer_template(
    *,
    company_name: str = "Eckman Tech LLC",
    company_url: str = "https://eckman-tech.com",
    today: date | None = None,
) -> str:
    return (
        f"{FOOTER_STYLE}"
        '<div class="pdf-footer">'
        f"<span>{format_long_date(today)}</span>"
        '<span>Page <span class="pageNumber"></span> of <span class="totalPages"></span></span>'
        f'<span><a href="{escape(company_url)}">{escape(company_name)}</a></span>'
        "</div>"
    )


__all__ = ["EMPTY_SLOT", "build_header_template", "build_footer_template"]
