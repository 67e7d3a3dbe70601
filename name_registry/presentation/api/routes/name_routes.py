"""Name Routes (HTML forms)"""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from name_registry.application.ports.repositories import INameRepository, StoreError
from name_registry.application.use_cases.names import (
    CreateNameInput,
    CreateNameUseCase,
    DeleteNameInput,
    DeleteNameUseCase,
    GetNameInput,
    GetNameUseCase,
    ListNamesUseCase,
    NameCreationError,
    NameDeletionError,
    NameNotFoundError,
    NameValidationError,
)
from name_registry.domain.names.value_objects.full_name import DISPLAY_NAME, MAX_LENGTH
from name_registry.presentation.api.dependencies import get_name_repository
from name_registry.presentation.flash import flash, pop_flashed_messages
from name_registry.presentation.templating import templates

router = APIRouter()

NameRepository = Annotated[INameRepository, Depends(get_name_repository)]


def _redirect_to_list(request: Request) -> RedirectResponse:
    return RedirectResponse(url=request.url_for("list_names"), status_code=303)


def _render_create_form(
    request: Request,
    full_name: str = "",
    errors: dict[str, list[str]] | None = None,
    error_message: str | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "names/create.html",
        {
            "full_name": full_name,
            "label": DISPLAY_NAME,
            "max_length": MAX_LENGTH,
            "errors": errors or {},
            "error_message": error_message,
        },
        status_code=status_code,
    )


# === List ===


@router.get("/", response_class=HTMLResponse, name="index")
@router.get("/names", response_class=HTMLResponse, name="list_names")
async def list_names(request: Request, name_repository: NameRepository) -> HTMLResponse:
    """名前一覧（登録日時の降順）"""
    output = await ListNamesUseCase(name_repository=name_repository).execute()

    return templates.TemplateResponse(
        request,
        "names/index.html",
        {
            "names": output.names,
            "error_message": output.error_message,
            "messages": pop_flashed_messages(request),
        },
    )


# === Create ===


@router.get("/names/create", response_class=HTMLResponse, name="create_name_form")
async def create_name_form(request: Request) -> HTMLResponse:
    """登録フォーム"""
    return _render_create_form(request)


@router.post("/names/create", response_class=HTMLResponse, name="create_name")
async def create_name(
    request: Request,
    name_repository: NameRepository,
    full_name: Annotated[str | None, Form()] = None,
) -> Response:
    """名前を登録"""
    use_case = CreateNameUseCase(name_repository=name_repository)

    try:
        await use_case.execute(CreateNameInput(full_name=full_name))
    except NameValidationError as e:
        return _render_create_form(
            request, full_name=full_name or "", errors=e.errors, status_code=400
        )
    except NameCreationError as e:
        return _render_create_form(
            request, full_name=full_name or "", error_message=str(e), status_code=500
        )

    flash(request, "Name added successfully!")
    return _redirect_to_list(request)


# === Delete ===


@router.get("/names/delete", response_class=HTMLResponse)
async def confirm_delete_without_id() -> Response:
    """ID なしの削除確認（常に Not Found）"""
    raise NameNotFoundError("Name id is required")


@router.get("/names/delete/{name_id}", response_class=HTMLResponse, name="confirm_delete")
async def confirm_delete(
    request: Request, name_id: str, name_repository: NameRepository
) -> Response:
    """削除確認"""
    use_case = GetNameUseCase(name_repository=name_repository)

    try:
        output = await use_case.execute(GetNameInput(name_id=name_id))
    except StoreError as e:
        flash(request, f"Error loading name: {e}", category="error")
        return _redirect_to_list(request)

    return templates.TemplateResponse(
        request,
        "names/delete.html",
        {"name": output, "label": DISPLAY_NAME},
    )


@router.post("/names/delete/{name_id}", name="delete_name")
async def delete_name(
    request: Request, name_id: str, name_repository: NameRepository
) -> RedirectResponse:
    """削除を実行（存在しない ID でも成功扱い）"""
    use_case = DeleteNameUseCase(name_repository=name_repository)

    try:
        await use_case.execute(DeleteNameInput(name_id=name_id))
    except NameDeletionError as e:
        flash(request, str(e), category="error")
    else:
        flash(request, "Name deleted successfully!")

    return _redirect_to_list(request)
