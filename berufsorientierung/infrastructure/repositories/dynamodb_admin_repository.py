"""DynamoDB 管理者リポジトリ実装."""
import os

import boto3

from berufsorientierung.domain.entities import Admin
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import AdminRepository

from .dynamodb_datetime import to_dynamodb_datetime
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBAdminRepository(AdminRepository):
    """DynamoDB 管理者リポジトリ."""

    def __init__(self, transaction: DynamoDBTransaction) -> None:
        """初期化."""
        self._table_name = os.environ.get("ADMIN_TABLE_NAME", "berufsorientierung-admin")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._transaction = transaction

    def add(self, admin: Admin) -> None:
        """管理者権限を付与する."""
        item: dict = {
            "user_id": admin.user_id.value,
            "created_at": to_dynamodb_datetime(admin.created_at),
        }
        if admin.created_by is not None:
            item["created_by"] = admin.created_by.value
        self._transaction.put(self._table_name, item)

    def exists(self, user_id: UserId) -> bool:
        """管理者権限があるか."""
        response = self._table.get_item(Key={"user_id": user_id.value}, ConsistentRead=True)
        return "Item" in response

    def remove(self, user_id: UserId) -> None:
        """管理者権限を外す."""
        self._transaction.delete(self._table_name, key={"user_id": user_id.value})
