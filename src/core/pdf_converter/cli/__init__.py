from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from ..config import AppConfig, dump_config, load_config
from ..core import ConversionError, ConversionService
from ..models import ConversionRequest, UploadedAsset
from ..workspace import request_workspace

console = Console()

app = typer.Typer(help="Markdown to PDF conversion toolkit")


def _load_config(path: Path | None) -> AppConfig:
    return load_config(path)


def _local_asset(path: Path | None) -> UploadedAsset | None:
    if path is None:
        return None
    if not path.is_file():
        console.print(f"[red]File not found[/red]: {path}")
        raise typer.Exit(2)
    return UploadedAsset(path=path, filename=path.name, size=path.stat().st_size)


@app.command()
def convert(
    file: Path,
    output: Path | None = typer.Option(None, "--output", "-o", help="Destination PDF path"),
    title: str = typer.Option("", "--title", help="Document title for the title page"),
    customer_name: str = typer.Option("", "--customer-name", help="Name shown in the page header"),
    logo: Path | None = typer.Option(None, "--logo", help="Logo shown in the page header"),
    customer_logo: Path | None = typer.Option(None, "--customer-logo", help="Logo shown on the title page"),
    toc: bool = typer.Option(False, "--toc", help="Prepend a table of contents"),
    page_breaks: bool = typer.Option(False, "--page-breaks", help="Start each H1/H2 on a new page"),
    header_footer: bool = typer.Option(False, "--header-footer", help="Show the page header and footer"),
    title_page: bool = typer.Option(False, "--title-page", help="Prepend a title page (needs --title)"),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    cfg = _load_config(config)
    request = ConversionRequest(
        markdown=_local_asset(file),
        logo=_local_asset(logo),
        customer_logo=_local_asset(customer_logo),
        customer_name=customer_name,
        doc_title=title,
        page_break_sections=page_breaks,
        generate_toc=toc,
        show_header_footer=header_footer,
        generate_title_page=title_page,
    )
    destination = output or file.with_suffix(".pdf")
    service = ConversionService(cfg)
    with request_workspace(cfg.runtime.work_dir) as workspace:
        try:
            result = service.convert(request, workspace)
        except ConversionError as exc:
            console.print(f"[red]Conversion failed[/red]: {exc.code} - {exc}")
            raise typer.Exit(1) from exc
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(result.content)
    console.print(f"[green]Success[/green]: {result.summary}")
    console.print(f"Output: {destination}")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", min=1, max=65535, help="Port to listen on"),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    import uvicorn

    from api.app import create_app

    cfg = _load_config(config)
    cfg.api.host = host or cfg.api.host
    cfg.api.port = port or cfg.api.port
    console.print(f"MD to PDF converter running on http://{cfg.api.host}:{cfg.api.port}")
    uvicorn.run(create_app(cfg), host=cfg.api.host, port=cfg.api.port)


@app.command()
def show_config(
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    console.print(dump_config(_load_config(config)), soft_wrap=True, markup=False, highlight=False)


if __name__ == "__main__":
    app()
