"""Markdown to HTML to PDF rendering.

Markdown is turned into HTML with Python-Markdown (plus the tasklist and tilde
extensions from pymdown-extensions for the GitHub-flavoured bits) and printed
with a headless Chromium driven by Playwright.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Protocol

import markdown
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .errors import RenderEngineError
from .headings import anchor_id
from .models import MarkdownOptions, PageOptions, RenderConfig

GFM_EXTENSIONS = ["tables", "fenced_code", "pymdownx.tasklist", "pymdownx.tilde"]
FENCE_RE = re.compile(r"^\s*(```|~~~)")
ITEM_RE = re.compile(r"^( *)(?:[-*+]|\d+[.)])\s")

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>{css}</style>
</head>
<body class="markdown-body">
{body}
</body>
</html>
"""


class RenderEngine(Protocol):
    def render(self, markdown_text: str, config: RenderConfig) -> Path:  # pragma: no cover - interface
        ...


def widen_list_indent(text: str) -> str:
    """Re-indent lists written with 2-space steps to Python-Markdown's 4.

    Python-Markdown nests lists on 4-space indents only; GitHub-style sources
    (and the generated table of contents) use 2. Item lines get their indent
    doubled. Other lines inside a list (continuation paragraphs, indented or
    fenced code) are shifted by the content column of the item above them so
    they stay attached to it.
    """

    lines = text.split("\n")
    in_fence = False
    in_list = False
    item_width = 0
    nested_widths: list[int] = []
    new_widths: dict[int, int] = {}
    for index, line in enumerate(lines):
        if not line.strip():
            continue
        width = len(line) - len(line.lstrip(" "))
        is_fence = FENCE_RE.match(line) is not None
        if width == 0 and not in_fence:
            # Column zero text ends the list unless it opens another item.
            in_list = not is_fence and ITEM_RE.match(line) is not None
            in_fence = is_fence
            item_width = 0
            continue
        if is_fence:
            in_fence = not in_fence
        item = None if in_fence or is_fence else ITEM_RE.match(line)
        if item:
            in_list = True
            item_width = width
            nested_widths.append(width)
            new_widths[index] = 2 * width
        elif in_list:
            new_widths[index] = width + min(width, item_width + 2)
    if not any(width % 4 for width in nested_widths):
        return text
    for index, width in new_widths.items():
        lines[index] = " " * width + lines[index].lstrip(" ")
    return "\n".join(lines)


def _slugify_heading(value: str, separator: str) -> str:
    # Must agree with the anchors written into the table of contents.
    return anchor_id(value)


def markdown_extensions(options: MarkdownOptions) -> tuple[list[str], dict[str, dict[str, Any]]]:
    extensions = ["md_in_html", "sane_lists"]
    configs: dict[str, dict[str, Any]] = {}
    if options.gfm:
        extensions.extend(GFM_EXTENSIONS)
        configs["pymdownx.tasklist"] = {"custom_checkbox": False}
    if options.breaks:
        extensions.append("nl2br")
    if options.header_ids:
        extensions.append("toc")
        configs["toc"] = {"slugify": _slugify_heading}
    return extensions, configs


def render_html(markdown_text: str, css: str, options: MarkdownOptions | None = None) -> str:
    options = options or MarkdownOptions()
    extensions, configs = markdown_extensions(options)
    if options.gfm:
        markdown_text = widen_list_indent(markdown_text)
    body = markdown.markdown(
        markdown_text,
        extensions=extensions,
        extension_configs=configs,
        output_format="html",
    )
    return HTML_TEMPLATE.format(css=css, body=body)


def pdf_arguments(page: PageOptions) -> dict[str, Any]:
    arguments: dict[str, Any] = {
        "format": page.format,
        "margin": dict(page.margin),
        "print_background": page.print_background,
        "display_header_footer": page.display_header_footer,
    }
    if page.display_header_footer:
        arguments["header_template"] = page.header_template or "<div></div>"
        arguments["footer_template"] = page.footer_template or "<div></div>"
    return arguments


class PlaywrightEngine:
    """Prints HTML to PDF with a fresh headless Chromium per document."""

    def render(self, markdown_text: str, config: RenderConfig) -> Path:
        document = render_html(markdown_text, config.css, config.markdown_options)
        try:
            with sync_playwright() as playwright:
                browser = playwright.chromium.launch(headless=True, args=list(config.launch_args))
                try:
                    page = browser.new_page()
                    if config.timeout_s:
                        page.set_default_timeout(config.timeout_s * 1000)
                    page.set_content(document, wait_until="networkidle")
                    page.pdf(path=str(config.destination), **pdf_arguments(config.page_options))
                finally:
                    browser.close()
        except PlaywrightError as exc:
            raise RenderEngineError(str(exc)) from exc
        if not config.destination.exists():
            raise RenderEngineError(f"Renderer produced no output at {config.destination.name}")
        return config.destination


__all__ = [
    "RenderEngine",
    "PlaywrightEngine",
    "markdown_extensions",
    "render_html",
    "pdf_arguments",
]
