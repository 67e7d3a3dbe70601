"""Error Handlers"""
from __future__ import annotations

import structlog
from fastapi import Request
from fastapi.responses import HTMLResponse

from name_registry.application.ports.repositories import StoreError
from name_registry.application.use_cases.names import NameNotFoundError
from name_registry.presentation.templating import templates

logger = structlog.get_logger()


def _error_page(
    request: Request, status_code: int, title: str, message: str
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "errors/error.html",
        {"title": title, "message": message, "status_code": status_code},
        status_code=status_code,
    )


async def name_not_found_handler(request: Request, exc: NameNotFoundError) -> HTMLResponse:
    """名前が見つからないエラーハンドラ"""
    logger.warning("name_not_found", error=str(exc))
    return _error_page(request, 404, "Not Found", "The requested name does not exist.")


async def store_error_handler(request: Request, exc: StoreError) -> HTMLResponse:
    """ストアエラーハンドラ（ルートで処理されなかったもの）"""
    logger.error("store_error", error=str(exc))
    return _error_page(request, 503, "Service Unavailable", str(exc))


async def generic_error_handler(request: Request, exc: Exception) -> HTMLResponse:
    """汎用エラーハンドラ"""
    logger.error("unhandled_error", error=str(exc), exc_info=True)
    return _error_page(request, 500, "Error", "An unexpected error occurred")


# エラーハンドラのマッピング
error_handlers = {
    NameNotFoundError: name_not_found_handler,
    StoreError: store_error_handler,
    Exception: generic_error_handler,
}
