"""Flash Messages

次のリクエストで一度だけ表示する通知。
Starlette の SessionMiddleware（署名付き Cookie）に保存する。
"""
from __future__ import annotations

from dataclasses import dataclass

from starlette.requests import Request

SESSION_KEY = "_flashes"


@dataclass(frozen=True)
class FlashMessage:
    category: str
    message: str


def flash(request: Request, message: str, category: str = "success") -> None:
    """通知をセッションに積む"""
    flashes = request.session.get(SESSION_KEY, [])
    flashes.append({"category": category, "message": message})
    request.session[SESSION_KEY] = flashes


def pop_flashed_messages(request: Request) -> list[FlashMessage]:
    """通知を取り出してセッションから消す"""
    flashes = request.session.pop(SESSION_KEY, [])
    return [FlashMessage(category=f["category"], message=f["message"]) for f in flashes]
