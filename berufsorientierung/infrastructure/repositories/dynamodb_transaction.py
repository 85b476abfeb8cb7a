"""DynamoDB トランザクション書き込み."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from berufsorientierung.domain.ports import TransactionFailedError, TransactionTooLargeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StagedWrite:
    """コミット待ちの書き込み1件."""

    operation: dict
    # 条件チェック失敗時に送出するドメイン例外
    conflict_error: Exception | None = None


class DynamoDBTransaction:
    """書き込みを溜めて TransactWriteItems で一括コミットする."""

    MAX_ITEMS = 100

    def __init__(self, client: Any) -> None:
        """初期化."""
        self._client = client
        self._serializer = TypeSerializer()
        self._staged: list[StagedWrite] = []

    def __len__(self) -> int:
        return len(self._staged)

    def serialize(self, values: dict) -> dict:
        """Python の値を DynamoDB 属性値形式に変換する."""
        return {key: self._serializer.serialize(value) for key, value in values.items()}

    def put(
        self,
        table_name: str,
        item: dict,
        condition: str | None = None,
        conflict_error: Exception | None = None,
    ) -> None:
        """Put を追加する."""
        operation: dict = {"TableName": table_name, "Item": self.serialize(item)}
        if condition is not None:
            operation["ConditionExpression"] = condition
        self._staged.append(StagedWrite({"Put": operation}, conflict_error))

    def update(
        self,
        table_name: str,
        key: dict,
        update_expression: str,
        values: dict | None = None,
        names: dict | None = None,
        condition: str | None = None,
        conflict_error: Exception | None = None,
    ) -> None:
        """Update を追加する."""
        operation: dict = {
            "TableName": table_name,
            "Key": self.serialize(key),
            "UpdateExpression": update_expression,
        }
        if values:
            operation["ExpressionAttributeValues"] = self.serialize(values)
        if names:
            operation["ExpressionAttributeNames"] = names
        if condition is not None:
            operation["ConditionExpression"] = condition
        self._staged.append(StagedWrite({"Update": operation}, conflict_error))

    def delete(
        self,
        table_name: str,
        key: dict,
        condition: str | None = None,
        conflict_error: Exception | None = None,
    ) -> None:
        """Delete を追加する."""
        operation: dict = {"TableName": table_name, "Key": self.serialize(key)}
        if condition is not None:
            operation["ConditionExpression"] = condition
        self._staged.append(StagedWrite({"Delete": operation}, conflict_error))

    def clear(self) -> None:
        """溜めた書き込みを破棄する."""
        self._staged = []

    def commit(self) -> None:
        """溜めた書き込みを1トランザクションで実行する.

        Raises:
            TransactionTooLargeError: 書き込み数が上限を超える場合（何も書き込まない）
            TransactionFailedError: トランザクションが中断された場合
        """
        staged, self._staged = self._staged, []
        if not staged:
            return
        if len(staged) > self.MAX_ITEMS:
            raise TransactionTooLargeError(
                f"Transaction has {len(staged)} writes (limit: {self.MAX_ITEMS})"
            )

        try:
            self._client.transact_write_items(TransactItems=[w.operation for w in staged])
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            if error_code == "TransactionCanceledException":
                reasons = e.response.get("CancellationReasons", [])
                for write, reason in zip(staged, reasons):
                    if reason.get("Code") == "ConditionalCheckFailed" and write.conflict_error:
                        raise write.conflict_error from e
            logger.error(f"DynamoDB transaction failed ({error_code}): {e}")
            raise TransactionFailedError(f"DynamoDB transaction failed: {error_code}") from e
