"""Delete Name Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from name_registry.application.ports.repositories import INameRepository, StoreError

logger = structlog.get_logger()


class NameDeletionError(Exception):
    """名前の削除エラー"""

    pass


@dataclass
class DeleteNameInput:
    """削除入力DTO"""

    name_id: str


class DeleteNameUseCase:
    """
    名前削除 ユースケース

    存在確認は行わずに削除を実行する（冪等）。
    """

    def __init__(self, name_repository: INameRepository):
        self._name_repo = name_repository

    async def execute(self, input_data: DeleteNameInput) -> None:
        """ユースケースを実行"""
        log = logger.bind(name_id=input_data.name_id)
        log.info("delete_name_started")

        try:
            await self._name_repo.delete(input_data.name_id)
        except StoreError as e:
            log.error("delete_name_failed", error=str(e))
            raise NameDeletionError(f"Error deleting name: {e}") from e

        log.info("delete_name_completed")
