"""NameRecord / FullName Unit Tests"""
import dataclasses
from datetime import timezone
from uuid import UUID

import pytest

from name_registry.domain.names import FullName, InvalidFullNameError, NameRecord


class TestFullName:
    """FullName 値オブジェクトのテスト"""

    @pytest.mark.parametrize("value", ["A", "Ada Lovelace", "x" * 100])
    def test_valid_lengths(self, value: str):
        """正常: 1〜100文字は受け付ける"""
        assert FullName(value).value == value

    def test_value_is_not_trimmed(self):
        """正常: 前後の空白はそのまま保持する"""
        assert FullName("  Ada  ").value == "  Ada  "

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required(self, value):
        """異常: 未入力・空白のみは必須エラー"""
        with pytest.raises(InvalidFullNameError) as exc_info:
            FullName(value)

        assert str(exc_info.value) == "Name is required"

    def test_too_long(self):
        """異常: 101文字は長さエラー"""
        with pytest.raises(InvalidFullNameError) as exc_info:
            FullName("x" * 101)

        assert "between 1 and 100 characters" in str(exc_info.value)

    def test_error_is_value_error(self):
        """正常: ValueError として捕捉できる"""
        with pytest.raises(ValueError):
            FullName("")


class TestNameRecordCreation:
    """NameRecord 作成のテスト"""

    def test_create_assigns_id_and_timestamp(self):
        """正常: ID と UTC の登録日時が採番される"""
        # Act
        record = NameRecord.create(FullName("Ada Lovelace"))

        # Assert
        assert UUID(record.id).version == 4
        assert record.full_name == "Ada Lovelace"
        assert record.date_added.tzinfo == timezone.utc

    def test_create_generates_unique_ids(self):
        """正常: 作成ごとに異なる ID"""
        first = NameRecord.create(FullName("Ada"))
        second = NameRecord.create(FullName("Ada"))

        assert first.id != second.id

    def test_record_is_immutable(self):
        """異常: ID と登録日時は変更できない"""
        record = NameRecord.create(FullName("Ada"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.id = "other"

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.date_added = None
