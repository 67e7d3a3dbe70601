"""List Names Use Case"""
from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from name_registry.application.ports.repositories import INameRepository, StoreError
from name_registry.domain.names import NameRecord

logger = structlog.get_logger()


@dataclass
class ListNamesOutput:
    """一覧出力DTO"""

    names: list[NameRecord] = field(default_factory=list)
    error_message: str | None = None

    @property
    def failed(self) -> bool:
        return self.error_message is not None


class ListNamesUseCase:
    """
    名前一覧取得 ユースケース

    ストアの読み込みに失敗しても例外にはせず、
    空の一覧とエラーメッセージを返す（フェイルオープン）。
    """

    def __init__(self, name_repository: INameRepository):
        self._name_repo = name_repository

    async def execute(self) -> ListNamesOutput:
        """ユースケースを実行"""
        logger.info("list_names_started")

        try:
            names = await self._name_repo.list_all()
        except StoreError as e:
            logger.error("list_names_failed", error=str(e))
            return ListNamesOutput(
                names=[],
                error_message=f"Error loading names: {e}",
            )

        logger.info("list_names_completed", count=len(names))

        return ListNamesOutput(names=names)
