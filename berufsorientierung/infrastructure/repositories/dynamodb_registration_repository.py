"""DynamoDB 参加登録リポジトリ実装."""
import json
import os

import boto3
from boto3.dynamodb.conditions import Attr, Key

from berufsorientierung.domain.entities import Registration
from berufsorientierung.domain.identifiers import EventId, RegistrationId, UserId
from berufsorientierung.domain.ports import RegistrationRepository
from berufsorientierung.domain.services import AlreadyRegisteredError
from berufsorientierung.domain.value_objects import Cancellation

from .dynamodb_datetime import from_dynamodb_datetime, to_dynamodb_datetime
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBRegistrationRepository(RegistrationRepository):
    """DynamoDB 参加登録リポジトリ.

    パーティションキー user_id、ソートキー event_id のため、
    1ユーザー1イベントにつき1行しか存在できない。
    """

    def __init__(self, transaction: DynamoDBTransaction) -> None:
        """初期化."""
        self._table_name = os.environ.get(
            "REGISTRATION_TABLE_NAME", "berufsorientierung-registration"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._transaction = transaction

    def add(self, registration: Registration) -> None:
        """新しい登録行を追加する."""
        self._transaction.put(
            self._table_name,
            self._to_dynamodb_item(registration),
            condition="attribute_not_exists(user_id)",
            conflict_error=AlreadyRegisteredError("User is already registered for this event"),
        )

    def update(self, registration: Registration) -> None:
        """既存の登録行の状態を更新する.

        再有効化はキャンセル済みの行、キャンセルはアクティブな行に対してのみ成功する。
        """
        if registration.is_active:
            condition = "attribute_exists(cancelled_at)"
            conflict_error = AlreadyRegisteredError("User is already registered for this event")
        else:
            condition = "attribute_exists(user_id) AND attribute_not_exists(cancelled_at)"
            conflict_error = None
        self._transaction.put(
            self._table_name,
            self._to_dynamodb_item(registration),
            condition=condition,
            conflict_error=conflict_error,
        )

    def find(self, user_id: UserId, event_id: EventId) -> Registration | None:
        """ユーザーとイベントの組で検索する."""
        response = self._table.get_item(
            Key={"user_id": user_id.value, "event_id": event_id.value},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_by_id(self, registration_id: RegistrationId) -> Registration | None:
        """登録IDで検索する.

        GSI は結果整合のため、見つかった行はキーで読み直して最新の状態を返す。
        """
        response = self._table.query(
            IndexName="registration_id-index",
            KeyConditionExpression=Key("registration_id").eq(registration_id.value),
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self.find(UserId(items[0]["user_id"]), EventId(items[0]["event_id"]))

    def find_by_user(self, user_id: UserId) -> list[Registration]:
        """ユーザーの全登録を取得する."""
        query_kwargs = {
            "KeyConditionExpression": Key("user_id").eq(user_id.value),
            "ConsistentRead": True,
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

    def find_active_by_event(self, event_id: EventId) -> list[Registration]:
        """イベントのアクティブな登録を登録日時の昇順で取得する."""
        query_kwargs = {
            "IndexName": "event_id-index",
            "KeyConditionExpression": Key("event_id").eq(event_id.value),
            "FilterExpression": Attr("cancelled_at").not_exists(),
        }
        items: list[dict] = []
        while True:
            response = self._table.query(**query_kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            query_kwargs["ExclusiveStartKey"] = last_key
        registrations = [self._from_dynamodb_item(item) for item in items]
        return sorted(registrations, key=lambda r: r.registered_at)

    def count_active(self, event_id: EventId) -> int:
        """イベントのアクティブな登録数を数える."""
        query_kwargs = {
            "IndexName": "event_id-index",
            "KeyConditionExpression": Key("event_id").eq(event_id.value),
            "FilterExpression": Attr("cancelled_at").not_exists(),
            "Select": "COUNT",
        }
        count = 0
        while True:
            response = self._table.query(**query_kwargs)
            count += response.get("Count", 0)
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return count
            query_kwargs["ExclusiveStartKey"] = last_key

    def exists_active(self, user_id: UserId, event_id: EventId) -> bool:
        """アクティブな登録があるか."""
        registration = self.find(user_id, event_id)
        return registration is not None and registration.is_active

    def delete(self, registration: Registration) -> None:
        """登録行を削除する."""
        self._transaction.delete(
            self._table_name,
            key={"user_id": registration.user_id.value, "event_id": registration.event_id.value},
        )

    @staticmethod
    def _to_dynamodb_item(registration: Registration) -> dict:
        """Registration を DynamoDB アイテムに変換する."""
        item: dict = {
            "registration_id": registration.registration_id.value,
            "user_id": registration.user_id.value,
            "event_id": registration.event_id.value,
            "registered_at": to_dynamodb_datetime(registration.registered_at),
        }
        if registration.additional_data is not None:
            item["additional_data"] = json.dumps(registration.additional_data, ensure_ascii=False)
        if registration.cancellation is not None:
            item["cancelled_at"] = to_dynamodb_datetime(registration.cancellation.cancelled_at)
            if registration.cancellation.reason is not None:
                item["cancellation_reason"] = registration.cancellation.reason
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> Registration:
        """DynamoDB アイテムから Registration を復元する."""
        additional_data = None
        if item.get("additional_data"):
            additional_data = json.loads(item["additional_data"])

        cancellation = None
        if item.get("cancelled_at"):
            cancellation = Cancellation(
                cancelled_at=from_dynamodb_datetime(item["cancelled_at"]),
                reason=item.get("cancellation_reason"),
            )

        return Registration(
            registration_id=RegistrationId(item["registration_id"]),
            user_id=UserId(item["user_id"]),
            event_id=EventId(item["event_id"]),
            registered_at=from_dynamodb_datetime(item["registered_at"]),
            additional_data=additional_data,
            cancellation=cancellation,
        )
