"""DynamoDB Name Repository Implementation"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from name_registry.application.ports.repositories import INameRepository, StoreError
from name_registry.domain.names import NameRecord

logger = structlog.get_logger()

# DynamoDB アイテムの属性名
ATTR_ID = "Id"
ATTR_FULL_NAME = "FullName"
ATTR_DATE_ADDED = "DateAdded"

REQUIRED_ATTRIBUTES = (ATTR_ID, ATTR_FULL_NAME, ATTR_DATE_ADDED)


class DynamoDBNameRepository(INameRepository):
    """
    DynamoDB ベースの Name Repository

    1テーブル・パーティションキー Id の単純なキーバリュー構成。
    属性値は低レベル API の {"S": ...} 形式で読み書きする。

    必須属性が欠けている、または DateAdded が ISO-8601 として
    解釈できないアイテムは不正レコードとして扱い、
    一覧ではスキップして件数をログに残す。
    """

    def __init__(
        self,
        table_name: str = "Names",
        region: str = "eu-west-1",
        endpoint_url: str | None = None,
        client: Any = None,
    ):
        self.table_name = table_name
        self._client = client or boto3.client(
            "dynamodb",
            region_name=region,
            endpoint_url=endpoint_url,
        )

    async def list_all(self) -> list[NameRecord]:
        """
        全件取得（Scan）

        LastEvaluatedKey によるページングをたどってテーブル全体を読む。
        """
        log = logger.bind(table_name=self.table_name)
        log.info("scanning_names")

        try:
            paginator = self._client.get_paginator("scan")
            items: list[dict[str, Any]] = []
            for page in paginator.paginate(TableName=self.table_name):
                items.extend(page.get("Items", []))
        except (ClientError, BotoCoreError) as e:
            log.error("scan_names_failed", error=str(e))
            raise StoreError(f"Error retrieving names from DynamoDB: {e}") from e

        names: list[NameRecord] = []
        skipped: list[str | None] = []
        for item in items:
            record = self._deserialize_item(item)
            if record is None:
                skipped.append(_string_attribute(item, ATTR_ID))
                continue
            names.append(record)

        if skipped:
            log.warning("malformed_records_skipped", count=len(skipped), keys=skipped)

        log.info("names_scanned", count=len(names))

        return sorted(names, key=lambda n: n.date_added, reverse=True)

    async def get_by_id(self, name_id: str) -> NameRecord | None:
        """IDで取得（GetItem）"""
        if not name_id:
            return None

        log = logger.bind(name_id=name_id)
        log.info("getting_name")

        try:
            response = self._client.get_item(
                TableName=self.table_name,
                Key={ATTR_ID: {"S": name_id}},
            )
        except (ClientError, BotoCoreError) as e:
            log.error("get_name_failed", error=str(e))
            raise StoreError(
                f"Error retrieving name by ID from DynamoDB: {e}"
            ) from e

        item = response.get("Item")
        if not item:
            log.info("name_not_found")
            return None

        record = self._deserialize_item(item)
        if record is None:
            log.warning("malformed_record", keys=sorted(item))
            return None

        return record

    async def put(self, record: NameRecord) -> None:
        """保存（PutItem, IDをキーとした upsert）"""
        log = logger.bind(name_id=record.id)
        log.info("putting_name")

        try:
            self._client.put_item(
                TableName=self.table_name,
                Item=self._serialize_record(record),
            )
        except (ClientError, BotoCoreError) as e:
            log.error("put_name_failed", error=str(e))
            raise StoreError(f"Error adding name to DynamoDB: {e}") from e

        log.info("name_put")

    async def delete(self, name_id: str) -> None:
        """削除（DeleteItem, 存在しなくても成功）"""
        log = logger.bind(name_id=name_id)
        log.info("deleting_name")

        try:
            self._client.delete_item(
                TableName=self.table_name,
                Key={ATTR_ID: {"S": name_id}},
            )
        except (ClientError, BotoCoreError) as e:
            log.error("delete_name_failed", error=str(e))
            raise StoreError(f"Error deleting name from DynamoDB: {e}") from e

        log.info("name_deleted")

    @staticmethod
    def _serialize_record(record: NameRecord) -> dict[str, Any]:
        """NameRecord を DynamoDB アイテムにシリアライズ"""
        return {
            ATTR_ID: {"S": record.id},
            ATTR_FULL_NAME: {"S": record.full_name},
            ATTR_DATE_ADDED: {"S": record.date_added.isoformat()},
        }

    @staticmethod
    def _deserialize_item(item: dict[str, Any]) -> NameRecord | None:
        """DynamoDB アイテムを NameRecord にデシリアライズ（不正な場合は None）"""
        values = {attr: _string_attribute(item, attr) for attr in REQUIRED_ATTRIBUTES}
        if any(value is None for value in values.values()):
            return None

        date_added = parse_timestamp(values[ATTR_DATE_ADDED])
        if date_added is None:
            return None

        return NameRecord(
            id=values[ATTR_ID],
            full_name=values[ATTR_FULL_NAME],
            date_added=date_added,
        )


def _string_attribute(item: dict[str, Any], name: str) -> str | None:
    value = item.get(name)
    if not isinstance(value, dict):
        return None
    return value.get("S")


def parse_timestamp(value: str) -> datetime | None:
    """
    ISO-8601 文字列を UTC の datetime に変換

    タイムゾーンなしの値は UTC とみなす。解釈できない場合は None。
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
