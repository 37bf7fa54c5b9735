from __future__ import annotations

import time
from pathlib import Path

from .config import AppConfig
from .engine import PlaywrightEngine, RenderEngine
from .errors import AssetReadError, ConversionError, RenderEngineError
from .logging import RunLogEntry, RunLogger, StageTimings
from .models import ConversionRequest, ConversionResult, MarkdownOptions, PageOptions, RenderConfig
from .templates import EMPTY_SLOT, build_footer_template, build_header_template
from .theme import build_css
from .title_page import build_title_page
from .toc import build_toc
from .utils import generate_run_id
from .workspace import RequestWorkspace


class ConversionService:
    """Turns a :class:`ConversionRequest` into PDF bytes.

    The uploaded Markdown is read once; title page and table of contents are
    prepended in memory and the final text goes straight to the engine, so
    the upload on disk is never rewritten.
    """

    def __init__(
        self,
        config: AppConfig,
        engine: RenderEngine | None = None,
        logger: RunLogger | None = None,
    ) -> None:
        self._config = config
        self._engine = engine or PlaywrightEngine()
        self._logger = logger or RunLogger(config.runtime.log_file)

    @property
    def config(self) -> AppConfig:
        return self._config

    def convert(self, request: ConversionRequest, workspace: RequestWorkspace) -> ConversionResult:
        run_id = generate_run_id()
        timings = StageTimings()
        start = time.perf_counter()
        try:
            markdown_text = self.compose_markdown(request)
            timings.compose_ms = (time.perf_counter() - start) * 1000

            render_config = self.build_render_config(request, workspace.output_path())
            render_start = time.perf_counter()
            output_path = self._engine.render(markdown_text, render_config)
            content = self._read_output(output_path)
            timings.render_ms = (time.perf_counter() - render_start) * 1000
        except ConversionError as exc:
            self._log(run_id, request, "failure", timings, 0, exc)
            raise

        elapsed = time.perf_counter() - start
        self._log(run_id, request, "success", timings, len(content))
        return ConversionResult(
            run_id=run_id,
            output_path=output_path,
            content=content,
            summary=f"Converted {request.markdown.filename} -> {len(content)} bytes in {elapsed:.2f}s",
        )

    def compose_markdown(self, request: ConversionRequest) -> str:
        markdown_text = self._load_source(request.markdown.path)
        if request.generate_title_page and request.doc_title:
            logo = request.customer_logo.path if request.customer_logo else None
            title_page = build_title_page(
                request.doc_title,
                logo,
                company_name=self._config.branding.company_name,
            )
            markdown_text = title_page + markdown_text
        if request.generate_toc:
            # Scans the title page too, and lands ahead of it.
            markdown_text = build_toc(markdown_text) + markdown_text
        return markdown_text

    def build_render_config(self, request: ConversionRequest, destination: Path) -> RenderConfig:
        render = self._config.render
        show_header = request.show_header_footer or request.logo is not None
        page_options = PageOptions(
            format=render.page_format,
            margin={
                "top": render.header_margin_top if show_header else render.margin,
                "right": render.margin,
                "bottom": render.footer_margin_bottom if request.show_header_footer else render.margin,
                "left": render.margin,
            },
            print_background=True,
        )
        if show_header:
            page_options.display_header_footer = True
            page_options.header_template = build_header_template(
                request.logo.path if request.logo else None,
                request.customer_name,
            )
            if request.show_header_footer:
                page_options.footer_template = build_footer_template(
                    company_name=self._config.branding.company_name,
                    company_url=self._config.branding.company_url,
                )
            else:
                page_options.footer_template = EMPTY_SLOT
        return RenderConfig(
            destination=destination,
            css=build_css(request.page_break_sections),
            launch_args=render.launch_args,
            markdown_options=MarkdownOptions(gfm=True, breaks=True, header_ids=True),
            page_options=page_options,
            timeout_s=self._config.runtime.render_timeout_s,
        )

    def _load_source(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConversionError("DECODE", f"Markdown file is not valid UTF-8: {exc.reason}") from exc
        except OSError as exc:
            raise ConversionError("NOT_FOUND", f"Unable to read markdown source: {path.name}") from exc

    def _read_output(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise RenderEngineError(f"Rendered output is unreadable: {path.name}") from exc

    def _log(
        self,
        run_id: str,
        request: ConversionRequest,
        status: str,
        timings: StageTimings,
        size_bytes: int,
        exc: ConversionError | None = None,
    ) -> None:
        self._logger.append(
            RunLogEntry(
                run_id=run_id,
                source=request.markdown.filename,
                status=status,
                options=request.enabled_options(),
                error_code=exc.code if exc else None,
                error_message=str(exc) if exc else None,
                timings=timings,
                size_bytes=size_bytes,
            )
        )


__all__ = [
    "ConversionService",
    "ConversionError",
    "AssetReadError",
    "RenderEngineError",
]
