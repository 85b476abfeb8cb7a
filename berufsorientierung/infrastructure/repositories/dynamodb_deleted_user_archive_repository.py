"""DynamoDB 削除済みユーザーアーカイブリポジトリ実装."""
import json
import os

import boto3

from berufsorientierung.domain.entities import DeletedUserArchive
from berufsorientierung.domain.identifiers import ArchiveId
from berufsorientierung.domain.ports import DeletedUserArchiveRepository
from berufsorientierung.domain.value_objects import ParticipatedEvent

from .dynamodb_datetime import from_dynamodb_datetime, to_dynamodb_datetime
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBDeletedUserArchiveRepository(DeletedUserArchiveRepository):
    """DynamoDB 削除済みユーザーアーカイブ."""

    def __init__(self, transaction: DynamoDBTransaction) -> None:
        """初期化."""
        self._table_name = os.environ.get(
            "DELETED_USER_ARCHIVE_TABLE_NAME", "berufsorientierung-deleted-user-archive"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._transaction = transaction

    def add(self, archive: DeletedUserArchive) -> None:
        """アーカイブを追加する."""
        self._transaction.put(
            self._table_name,
            self._to_dynamodb_item(archive),
            condition="attribute_not_exists(archive_id)",
        )

    def find_all(self) -> list[DeletedUserArchive]:
        """全てのアーカイブを削除日時の昇順で取得する."""
        scan_kwargs: dict = {}
        items: list[dict] = []
        while True:
            response = self._table.scan(**scan_kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            scan_kwargs["ExclusiveStartKey"] = last_key
        archives = [self._from_dynamodb_item(item) for item in items]
        return sorted(archives, key=lambda a: a.deleted_at)

    @staticmethod
    def _to_dynamodb_item(archive: DeletedUserArchive) -> dict:
        """DeletedUserArchive を DynamoDB アイテムに変換する."""
        item: dict = {
            "archive_id": archive.archive_id.value,
            "first_name": archive.first_name,
            "last_name": archive.last_name,
            "registered_at": to_dynamodb_datetime(archive.registered_at),
            "deleted_at": to_dynamodb_datetime(archive.deleted_at),
        }
        # 参加実績なしは属性自体を持たない
        if archive.events_participated is not None:
            item["events_participated"] = json.dumps(
                [event.to_dict() for event in archive.events_participated],
                ensure_ascii=False,
            )
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> DeletedUserArchive:
        """DynamoDB アイテムから DeletedUserArchive を復元する."""
        events_participated = None
        if item.get("events_participated"):
            events_participated = tuple(
                ParticipatedEvent.from_dict(data) for data in json.loads(item["events_participated"])
            )
        return DeletedUserArchive(
            archive_id=ArchiveId(item["archive_id"]),
            first_name=item["first_name"],
            last_name=item["last_name"],
            registered_at=from_dynamodb_datetime(item["registered_at"]),
            deleted_at=from_dynamodb_datetime(item["deleted_at"]),
            events_participated=events_participated,
        )
