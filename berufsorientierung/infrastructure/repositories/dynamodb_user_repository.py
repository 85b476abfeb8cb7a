"""DynamoDB ユーザーリポジトリ実装."""
import os
from datetime import datetime, timezone

import boto3

from berufsorientierung.domain.entities import User
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import UserRepository
from berufsorientierung.domain.value_objects import Email

from .dynamodb_datetime import from_dynamodb_datetime, to_dynamodb_datetime
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBUserRepository(UserRepository):
    """DynamoDB ユーザーリポジトリ."""

    def __init__(self, transaction: DynamoDBTransaction) -> None:
        """初期化."""
        self._table_name = os.environ.get("USER_TABLE_NAME", "berufsorientierung-user")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._transaction = transaction

    def save(self, user: User) -> None:
        """ユーザーを保存する."""
        self._transaction.put(self._table_name, self._to_dynamodb_item(user))

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索する."""
        response = self._table.get_item(Key={"user_id": user_id.value}, ConsistentRead=True)
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def block(self, user_id: UserId) -> None:
        """ユーザーをブロックする."""
        self._transaction.update(
            self._table_name,
            key={"user_id": user_id.value},
            update_expression="SET is_blocked = :blocked, updated_at = :now",
            values={":blocked": True, ":now": to_dynamodb_datetime(datetime.now(timezone.utc))},
            condition="attribute_exists(user_id)",
        )

    def delete(self, user_id: UserId) -> None:
        """ユーザーを削除する."""
        self._transaction.delete(self._table_name, key={"user_id": user_id.value})

    @staticmethod
    def _to_dynamodb_item(user: User) -> dict:
        """User を DynamoDB アイテムに変換する."""
        return {
            "user_id": user.user_id.value,
            "email": user.email.value,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "is_blocked": user.is_blocked,
            "created_at": to_dynamodb_datetime(user.created_at),
            "updated_at": to_dynamodb_datetime(user.updated_at),
        }

    @staticmethod
    def _from_dynamodb_item(item: dict) -> User:
        """DynamoDB アイテムから User を復元する."""
        return User(
            user_id=UserId(item["user_id"]),
            email=Email(item["email"]),
            first_name=item["first_name"],
            last_name=item["last_name"],
            is_blocked=bool(item.get("is_blocked", False)),
            created_at=from_dynamodb_datetime(item["created_at"]),
            updated_at=from_dynamodb_datetime(item["updated_at"]),
        )
