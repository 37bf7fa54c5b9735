"""Markdown heading extraction used for the table of contents."""

from __future__ import annotations

import re

from .models import HeadingEntry

HEADING_RE = re.compile(r"^(#{1,3})[ \t]+(.+)$", re.MULTILINE)
NON_WORD_RE = re.compile(r"\W+", re.ASCII)


def anchor_id(text: str) -> str:
    """Return the fragment id the renderer assigns to a heading with *text*."""

    return NON_WORD_RE.sub("-", text.lower())


def extract_headings(markdown: str) -> list[HeadingEntry]:
    headings: list[HeadingEntry] = []
    for match in HEADING_RE.finditer(markdown):
        text = match.group(2).strip()
        headings.append(HeadingEntry(level=len(match.group(1)), text=text, anchor_id=anchor_id(text)))
    return headings


__all__ = ["HEADING_RE", "anchor_id", "extract_headings"]
