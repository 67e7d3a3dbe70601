"""NameRecord Entity"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from ..value_objects.full_name import FullName


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class NameRecord:
    """
    名前レコード（エンティティ）

    id と date_added は作成時に一度だけ設定され、以後変更されない。
    更新操作は存在しない。
    """

    id: str
    full_name: str
    date_added: datetime

    # === Factory Methods ===

    @classmethod
    def create(cls, full_name: FullName) -> NameRecord:
        """新しい NameRecord を作成（ID と UTC 現在時刻を採番）"""
        return cls(
            id=str(uuid4()),
            full_name=full_name.value,
            date_added=_utc_now(),
        )
