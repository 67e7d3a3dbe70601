"""Get Name Use Case"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import structlog

from name_registry.application.ports.repositories import INameRepository

logger = structlog.get_logger()


class NameNotFoundError(Exception):
    """名前が見つからないエラー"""

    pass


@dataclass
class GetNameInput:
    """取得入力DTO"""

    name_id: str | None


@dataclass
class GetNameOutput:
    """取得出力DTO"""

    name_id: str
    full_name: str
    date_added: datetime


class GetNameUseCase:
    """名前取得 ユースケース（削除確認画面用）"""

    def __init__(self, name_repository: INameRepository):
        self._name_repo = name_repository

    async def execute(self, input_data: GetNameInput) -> GetNameOutput:
        """
        ユースケースを実行

        ID が空、またはレコードが存在しない場合は NameNotFoundError。
        ストアのエラーは StoreError のまま呼び出し元に伝播する。
        """
        if not input_data.name_id:
            logger.warning("name_id_missing")
            raise NameNotFoundError("Name id is required")

        log = logger.bind(name_id=input_data.name_id)
        log.info("get_name_started")

        record = await self._name_repo.get_by_id(input_data.name_id)
        if record is None:
            log.warning("name_not_found")
            raise NameNotFoundError(f"Name {input_data.name_id} not found")

        log.info("get_name_completed")

        return GetNameOutput(
            name_id=record.id,
            full_name=record.full_name,
            date_added=record.date_added,
        )
