"""DynamoDB 削除予約リポジトリ実装."""
import os
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Attr

from berufsorientierung.domain.entities import PendingDeletion
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import PendingDeletionRepository
from berufsorientierung.domain.services import AlreadyScheduledError

from .dynamodb_datetime import from_dynamodb_datetime, to_dynamodb_datetime
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBPendingDeletionRepository(PendingDeletionRepository):
    """DynamoDB 削除予約リポジトリ（パーティションキー user_id）."""

    def __init__(self, transaction: DynamoDBTransaction) -> None:
        """初期化."""
        self._table_name = os.environ.get(
            "PENDING_DELETION_TABLE_NAME", "berufsorientierung-pending-deletion"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._transaction = transaction

    def add(self, pending: PendingDeletion) -> None:
        """削除予約を追加する."""
        self._transaction.put(
            self._table_name,
            self._to_dynamodb_item(pending),
            condition="attribute_not_exists(user_id)",
            conflict_error=AlreadyScheduledError(
                f"User deletion is already scheduled: {pending.user_id}"
            ),
        )

    def save(self, pending: PendingDeletion) -> None:
        """削除予約を保存する."""
        self._transaction.put(self._table_name, self._to_dynamodb_item(pending))

    def find_by_user(self, user_id: UserId) -> PendingDeletion | None:
        """ユーザーIDで検索する."""
        response = self._table.get_item(Key={"user_id": user_id.value}, ConsistentRead=True)
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_due(self, now: datetime) -> list[PendingDeletion]:
        """削除予定日を迎えた予約を予定日の昇順で取得する."""
        return self._scan(Attr("deletion_date").lte(to_dynamodb_datetime(now)))

    def find_all(self) -> list[PendingDeletion]:
        """全ての予約を予定日の昇順で取得する."""
        return self._scan(None)

    def delete(self, user_id: UserId) -> None:
        """削除予約を削除する."""
        self._transaction.delete(self._table_name, key={"user_id": user_id.value})

    def _scan(self, filter_expression) -> list[PendingDeletion]:
        scan_kwargs: dict = {"ConsistentRead": True}
        if filter_expression is not None:
            scan_kwargs["FilterExpression"] = filter_expression
        items: list[dict] = []
        while True:
            response = self._table.scan(**scan_kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            scan_kwargs["ExclusiveStartKey"] = last_key
        pendings = [self._from_dynamodb_item(item) for item in items]
        return sorted(pendings, key=lambda p: p.deletion_date)

    @staticmethod
    def _to_dynamodb_item(pending: PendingDeletion) -> dict:
        """PendingDeletion を DynamoDB アイテムに変換する."""
        item: dict = {
            "user_id": pending.user_id.value,
            "deletion_date": to_dynamodb_datetime(pending.deletion_date),
            "created_at": to_dynamodb_datetime(pending.created_at),
        }
        if pending.erasure_started_at is not None:
            item["erasure_started_at"] = to_dynamodb_datetime(pending.erasure_started_at)
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> PendingDeletion:
        """DynamoDB アイテムから PendingDeletion を復元する."""
        erasure_started_at = None
        if item.get("erasure_started_at"):
            erasure_started_at = from_dynamodb_datetime(item["erasure_started_at"])
        return PendingDeletion(
            user_id=UserId(item["user_id"]),
            deletion_date=from_dynamodb_datetime(item["deletion_date"]),
            created_at=from_dynamodb_datetime(item["created_at"]),
            erasure_started_at=erasure_started_at,
        )
