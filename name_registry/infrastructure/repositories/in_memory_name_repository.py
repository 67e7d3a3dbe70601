"""In-Memory Name Repository Implementation"""
from __future__ import annotations

import structlog

from name_registry.application.ports.repositories import INameRepository
from name_registry.domain.names import NameRecord

logger = structlog.get_logger()


class InMemoryNameRepository(INameRepository):
    """
    インメモリ Name Repository（開発・テスト用）

    アプリケーションインスタンスごとに保持され、プロセス再起動で消える。
    """

    def __init__(self, records: list[NameRecord] | None = None):
        self._records: dict[str, NameRecord] = {r.id: r for r in records or []}

    async def list_all(self) -> list[NameRecord]:
        names = sorted(self._records.values(), key=lambda n: n.date_added, reverse=True)
        logger.info("names_listed", count=len(names), backend="memory")
        return names

    async def get_by_id(self, name_id: str) -> NameRecord | None:
        if not name_id:
            return None
        return self._records.get(name_id)

    async def put(self, record: NameRecord) -> None:
        self._records[record.id] = record
        logger.info("name_put", name_id=record.id, backend="memory")

    async def delete(self, name_id: str) -> None:
        self._records.pop(name_id, None)
        logger.info("name_deleted", name_id=name_id, backend="memory")
