"""Create Name Use Case"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import structlog

from name_registry.application.ports.repositories import INameRepository, StoreError
from name_registry.domain.names import FullName, InvalidFullNameError, NameRecord

logger = structlog.get_logger()


class NameValidationError(Exception):
    """入力バリデーションエラー（フィールド単位）"""

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__(
            "; ".join(msg for messages in errors.values() for msg in messages)
        )


class NameCreationError(Exception):
    """名前の登録エラー"""

    pass


@dataclass
class CreateNameInput:
    """登録入力DTO"""

    full_name: str | None


@dataclass
class CreateNameOutput:
    """登録出力DTO"""

    name_id: str
    full_name: str
    date_added: datetime


class CreateNameUseCase:
    """
    名前登録 ユースケース

    1. 氏名をバリデーション
    2. ID と登録日時（UTC）を採番
    3. リポジトリに保存
    """

    def __init__(self, name_repository: INameRepository):
        self._name_repo = name_repository

    async def execute(self, input_data: CreateNameInput) -> CreateNameOutput:
        """ユースケースを実行"""
        logger.info("create_name_started")

        try:
            full_name = FullName(input_data.full_name)
        except InvalidFullNameError as e:
            logger.info("create_name_invalid", error=str(e))
            raise NameValidationError({"full_name": [str(e)]}) from e

        record = NameRecord.create(full_name)
        log = logger.bind(name_id=record.id)

        try:
            await self._name_repo.put(record)
        except StoreError as e:
            log.error("create_name_failed", error=str(e))
            raise NameCreationError(f"Error adding name: {e}") from e

        log.info("create_name_completed")

        return CreateNameOutput(
            name_id=record.id,
            full_name=record.full_name,
            date_added=record.date_added,
        )
