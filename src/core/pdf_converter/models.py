"""Domain models for markdown to PDF conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True, frozen=True)
class HeadingEntry:
    level: int
    text: str
    anchor_id: str


@dataclass(slots=True)
class UploadedAsset:
    """A client upload stored inside a request workspace."""

    path: Path
    filename: str
    size: int


@dataclass(slots=True)
class ConversionRequest:
    """Inputs for a single conversion run."""

    markdown: UploadedAsset
    logo: UploadedAsset | None = None
    customer_logo: UploadedAsset | None = None
    customer_name: str = ""
    doc_title: str = ""
    page_break_sections: bool = False
    generate_toc: bool = False
    show_header_footer: bool = False
    generate_title_page: bool = False

    def enabled_options(self) -> list[str]:
        flags = {
            "page_break_sections": self.page_break_sections,
            "generate_toc": self.generate_toc,
            "show_header_footer": self.show_header_footer,
            "generate_title_page": self.generate_title_page,
        }
        return [name for name, enabled in flags.items() if enabled]


@dataclass(slots=True)
class MarkdownOptions:
    gfm: bool = True
    breaks: bool = True
    header_ids: bool = True


@dataclass(slots=True)
class PageOptions:
    format: str = "Letter"
    margin: dict[str, str] = field(default_factory=dict)
    print_background: bool = True
    display_header_footer: bool = False
    header_template: str | None = None
    footer_template: str | None = None


@dataclass(slots=True)
class RenderConfig:
    """Everything the render engine needs for one document."""

    destination: Path
    css: str
    launch_args: tuple[str, ...] = ()
    markdown_options: MarkdownOptions = field(default_factory=MarkdownOptions)
    page_options: PageOptions = field(default_factory=PageOptions)
    timeout_s: int | None = None


@dataclass(slots=True)
class ConversionResult:
    run_id: str
    output_path: Path
    content: bytes
    summary: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)


__all__ = [
    "HeadingEntry",
    "UploadedAsset",
    "ConversionRequest",
    "MarkdownOptions",
    "PageOptions",
    "RenderConfig",
    "ConversionResult",
]
