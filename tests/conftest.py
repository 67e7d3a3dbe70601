"""Shared Test Fixtures"""
from datetime import datetime, timezone

import pytest

from name_registry.application.ports.repositories import INameRepository, StoreError
from name_registry.domain.names import NameRecord


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class FailingNameRepository(INameRepository):
    """すべての操作で StoreError を送出するリポジトリ"""

    def __init__(self, message: str = "store unavailable"):
        self.message = message

    async def list_all(self) -> list[NameRecord]:
        raise StoreError(self.message)

    async def get_by_id(self, name_id: str) -> NameRecord | None:
        raise StoreError(self.message)

    async def put(self, record: NameRecord) -> None:
        raise StoreError(self.message)

    async def delete(self, name_id: str) -> None:
        raise StoreError(self.message)


@pytest.fixture
def failing_repository() -> FailingNameRepository:
    return FailingNameRepository()


@pytest.fixture
def older_record() -> NameRecord:
    return NameRecord(
        id="11111111-1111-4111-8111-111111111111",
        full_name="Ada Lovelace",
        date_added=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def newer_record() -> NameRecord:
    return NameRecord(
        id="22222222-2222-4222-8222-222222222222",
        full_name="Grace Hopper",
        date_added=datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc),
    )
