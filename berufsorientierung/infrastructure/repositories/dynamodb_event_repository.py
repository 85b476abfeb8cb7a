"""DynamoDB イベントリポジトリ実装."""
import os
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Attr

from berufsorientierung.domain.entities import Event
from berufsorientierung.domain.enums import EventStatus
from berufsorientierung.domain.identifiers import EventId
from berufsorientierung.domain.ports import EventRepository
from berufsorientierung.domain.services import EventFullError

from .dynamodb_datetime import from_dynamodb_datetime, to_dynamodb_datetime
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBEventRepository(EventRepository):
    """DynamoDB イベントリポジトリ.

    アクティブ登録数を active_count 属性で持ち、条件付き更新で定員を守る。
    """

    def __init__(self, transaction: DynamoDBTransaction) -> None:
        """初期化."""
        self._table_name = os.environ.get("EVENT_TABLE_NAME", "berufsorientierung-event")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._transaction = transaction

    def save(self, event: Event) -> None:
        """イベントを保存する（active_count は保持する）."""
        item = self._to_dynamodb_item(event)
        item.pop("event_id")
        # date, status などは予約語のため属性名プレースホルダを使う
        assignments = [f"#{name} = :{name}" for name in item]
        assignments.append("active_count = if_not_exists(active_count, :zero)")
        removals = [f"#{name}" for name in ("end_date", "max_participants") if name not in item]
        expression = "SET " + ", ".join(assignments)
        if removals:
            expression += " REMOVE " + ", ".join(removals)
        values = {f":{name}": value for name, value in item.items()}
        values[":zero"] = 0
        names = {f"#{name}": name for name in (*item, "end_date", "max_participants")}
        self._transaction.update(
            self._table_name,
            key={"event_id": event.event_id.value},
            update_expression=expression,
            values=values,
            names=names,
        )

    def find_by_id(self, event_id: EventId) -> Event | None:
        """イベントIDで検索する."""
        response = self._table.get_item(Key={"event_id": event_id.value}, ConsistentRead=True)
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def count_expired_registration_deadlines(self, now: datetime) -> int:
        """受付中で登録締め切りを過ぎたイベント数を数える."""
        scan_kwargs = {
            "FilterExpression": Attr("status").eq(EventStatus.ACTIVE.value)
            & Attr("registration_deadline").lt(to_dynamodb_datetime(now)),
            "Select": "COUNT",
        }
        count = 0
        while True:
            response = self._table.scan(**scan_kwargs)
            count += response.get("Count", 0)
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return count
            scan_kwargs["ExclusiveStartKey"] = last_key

    def reserve_seat(self, event: Event) -> None:
        """席を1つ確保する（満席ならコミット時に EventFullError）."""
        values: dict = {":zero": 0, ":one": 1}
        if event.max_participants is None:
            condition = "attribute_exists(event_id)"
        else:
            condition = "attribute_not_exists(active_count) OR active_count < :max"
            values[":max"] = event.max_participants
        self._transaction.update(
            self._table_name,
            key={"event_id": event.event_id.value},
            update_expression="SET active_count = if_not_exists(active_count, :zero) + :one",
            values=values,
            condition=condition,
            conflict_error=EventFullError("Event is full, no available spots"),
        )

    def release_seat(self, event_id: EventId) -> None:
        """確保済みの席を1つ解放する.

        存在しないイベントに active_count だけの行を作らないよう、行の存在を条件にする。
        """
        self._transaction.update(
            self._table_name,
            key={"event_id": event_id.value},
            update_expression="SET active_count = if_not_exists(active_count, :one) - :one",
            values={":one": 1},
            condition="attribute_exists(event_id)",
        )

    @staticmethod
    def _to_dynamodb_item(event: Event) -> dict:
        """Event を DynamoDB アイテムに変換する."""
        item: dict = {
            "event_id": event.event_id.value,
            "title": event.title,
            "date": to_dynamodb_datetime(event.date),
            "registration_deadline": to_dynamodb_datetime(event.registration_deadline),
            "status": event.status.value,
            "created_at": to_dynamodb_datetime(event.created_at),
        }
        if event.end_date is not None:
            item["end_date"] = to_dynamodb_datetime(event.end_date)
        if event.max_participants is not None:
            item["max_participants"] = event.max_participants
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> Event:
        """DynamoDB アイテムから Event を復元する."""
        end_date = None
        if item.get("end_date"):
            end_date = from_dynamodb_datetime(item["end_date"])
        max_participants = None
        if item.get("max_participants") is not None:
            max_participants = int(item["max_participants"])
        return Event(
            event_id=EventId(item["event_id"]),
            title=item["title"],
            date=from_dynamodb_datetime(item["date"]),
            registration_deadline=from_dynamodb_datetime(item["registration_deadline"]),
            status=EventStatus(item["status"]),
            end_date=end_date,
            max_participants=max_participants,
            created_at=from_dynamodb_datetime(item["created_at"]),
        )
