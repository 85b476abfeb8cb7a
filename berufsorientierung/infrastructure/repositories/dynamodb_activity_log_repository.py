"""DynamoDB アクティビティログリポジトリ実装."""
import json
import os

import boto3
from boto3.dynamodb.conditions import Key

from berufsorientierung.domain.entities import ActivityLogEntry
from berufsorientierung.domain.enums import ActivityActionType
from berufsorientierung.domain.identifiers import ActivityLogId, UserId
from berufsorientierung.domain.ports import ActivityLogRepository

from .dynamodb_datetime import from_dynamodb_datetime, to_dynamodb_datetime
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBActivityLogRepository(ActivityLogRepository):
    """DynamoDB アクティビティログ.

    user_id-index は user_id を持つ行だけを含むスパースインデックス。
    """

    def __init__(self, transaction: DynamoDBTransaction) -> None:
        """初期化."""
        self._table_name = os.environ.get(
            "ACTIVITY_LOG_TABLE_NAME", "berufsorientierung-activity-log"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._transaction = transaction

    def append(self, entry: ActivityLogEntry) -> None:
        """ログ行を追記する."""
        self._transaction.put(
            self._table_name,
            self._to_dynamodb_item(entry),
            condition="attribute_not_exists(log_id)",
        )

    def find_by_user(self, user_id: UserId) -> list[ActivityLogEntry]:
        """ユーザーに紐づくログ行を取得する."""
        query_kwargs = {
            "IndexName": "user_id-index",
            "KeyConditionExpression": Key("user_id").eq(user_id.value),
        }
        items: list[dict] = []
        while True:
            response = self._table.query(**query_kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            query_kwargs["ExclusiveStartKey"] = last_key
        return [self._from_dynamodb_item(item) for item in items]

    def detach_user(self, entry: ActivityLogEntry) -> None:
        """ログ行からユーザー参照を外す."""
        self._transaction.update(
            self._table_name,
            key={"log_id": entry.log_id.value},
            update_expression="REMOVE user_id",
            condition="attribute_exists(log_id)",
        )

    @staticmethod
    def _to_dynamodb_item(entry: ActivityLogEntry) -> dict:
        """ActivityLogEntry を DynamoDB アイテムに変換する."""
        item: dict = {
            "log_id": entry.log_id.value,
            "action_type": entry.action_type.value,
            "timestamp": to_dynamodb_datetime(entry.timestamp),
        }
        if entry.user_id is not None:
            item["user_id"] = entry.user_id.value
        if entry.details is not None:
            item["details"] = json.dumps(entry.details, ensure_ascii=False)
        if entry.ip_address is not None:
            item["ip_address"] = entry.ip_address
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> ActivityLogEntry:
        """DynamoDB アイテムから ActivityLogEntry を復元する."""
        return ActivityLogEntry(
            log_id=ActivityLogId(item["log_id"]),
            action_type=ActivityActionType(item["action_type"]),
            timestamp=from_dynamodb_datetime(item["timestamp"]),
            user_id=UserId(item["user_id"]) if item.get("user_id") else None,
            details=json.loads(item["details"]) if item.get("details") else None,
            ip_address=item.get("ip_address"),
        )
