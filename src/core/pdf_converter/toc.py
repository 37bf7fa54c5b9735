from __future__ import annotations

from .headings import extract_headings

TOC_HEADING = "# Table of Contents"


def build_toc(markdown: str) -> str:
    """Render a linked, indented table of contents for *markdown*.

    Returns an empty string when the source has no level 1-3 headings so the
    caller can prepend the result unconditionally.
    """

    headings = extract_headings(markdown)
    if not headings:
        return ""
    lines = [TOC_HEADING, ""]
    for heading in headings:
        indent = "  " * (heading.level - 1)
        lines.append(f"{indent}- [{heading.text}](#{heading.anchor_id})")
    return "\n".join(lines) + "\n\n---\n\n"


__all__ = ["TOC_HEADING", "build_toc"]
