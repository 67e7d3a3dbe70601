"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from name_registry.domain.names import NameRecord


class StoreError(Exception):
    """永続化ストアの通信・変換エラー"""

    pass


class INameRepository(ABC):
    """
    Name Repository Interface

    依存性逆転の原則に従い、ユースケースから参照される抽象インターフェース。
    具体的な実装（DynamoDB / インメモリ）はインフラ層で提供する。

    実装は失敗時に StoreError を送出すること。
    """

    @abstractmethod
    async def list_all(self) -> list[NameRecord]:
        """全件を date_added の降順で取得"""
        pass

    @abstractmethod
    async def get_by_id(self, name_id: str) -> NameRecord | None:
        """IDで取得（存在しない場合は None）"""
        pass

    @abstractmethod
    async def put(self, record: NameRecord) -> None:
        """IDをキーとして保存（upsert）"""
        pass

    @abstractmethod
    async def delete(self, name_id: str) -> None:
        """IDで削除（存在しなくてもエラーにしない）"""
        pass
