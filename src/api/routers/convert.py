from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse, Response

from api.dependencies import get_config, get_service
from api.utils import run_sync
from core.pdf_converter.config import AppConfig
from core.pdf_converter.core import ConversionError, ConversionService
from core.pdf_converter.models import ConversionRequest, UploadedAsset
from core.pdf_converter.utils import parse_flag
from core.pdf_converter.workspace import RequestWorkspace, request_workspace
from models.schemas import ErrorResponse

router = APIRouter(tags=["conversion"])

PDF_HEADERS = {"Content-Disposition": 'inline; filename="document.pdf"'}


class UploadTooLargeError(ValueError):
    def __init__(self, field_name: str, limit_mb: int) -> None:
        super().__init__(f"{field_name} exceeds the {limit_mb} MB upload limit")
        self.field_name = field_name


def _error(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    payload = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


@router.post(
    "/convert",
    summary="Convert a Markdown upload to PDF",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def convert_document(
    markdown: UploadFile | None = File(None),
    logo: UploadFile | None = File(None),
    customer_logo: UploadFile | None = File(None, alias="customerLogo"),
    customer_name: str = Form("", alias="customerName"),
    doc_title: str = Form("", alias="docTitle"),
    page_break_sections: str = Form("", alias="pageBreakSections"),
    generate_toc: str = Form("", alias="generateTOC"),
    show_header_footer: str = Form("", alias="showHeaderFooter"),
    generate_title_page: str = Form("", alias="generateTitlePage"),
    service: ConversionService = Depends(get_service),
    config: AppConfig = Depends(get_config),
) -> Response:
    if markdown is None or not markdown.filename:
        return _error(400, "No markdown file uploaded")

    try:
        with request_workspace(config.runtime.work_dir) as workspace:
            request = ConversionRequest(
                markdown=await _store_upload(workspace, "markdown", markdown, config),
                logo=await _store_optional(workspace, "logo", logo, config),
                customer_logo=await _store_optional(workspace, "customerLogo", customer_logo, config),
                customer_name=customer_name,
                doc_title=doc_title,
                page_break_sections=parse_flag(page_break_sections),
                generate_toc=parse_flag(generate_toc),
                show_header_footer=parse_flag(show_header_footer),
                generate_title_page=parse_flag(generate_title_page),
            )
            result = await run_sync(service.convert, request, workspace)
    except UploadTooLargeError as exc:
        return _error(413, "File too large", str(exc))
    except ConversionError as exc:
        return _error(500, "Conversion failed", str(exc))
    except Exception as exc:  # noqa: BLE001
        return _error(500, "Conversion failed", str(exc))

    return Response(content=result.content, media_type="application/pdf", headers=PDF_HEADERS)


async def _store_upload(
    workspace: RequestWorkspace, field_name: str, upload: UploadFile, config: AppConfig
) -> UploadedAsset:
    max_bytes = config.max_upload_bytes
    content = await upload.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise UploadTooLargeError(field_name, config.runtime.max_file_size_mb)
    return workspace.store(field_name, upload.filename, content)


async def _store_optional(
    workspace: RequestWorkspace, field_name: str, upload: UploadFile | None, config: AppConfig
) -> UploadedAsset | None:
    if upload is None or not upload.filename:
        return None
    return await _store_upload(workspace, field_name, upload, config)


__all__ = ["router"]
