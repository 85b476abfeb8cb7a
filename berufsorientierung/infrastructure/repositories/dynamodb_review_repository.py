"""DynamoDB レビューリポジトリ実装."""
import os

import boto3
from boto3.dynamodb.conditions import Key

from berufsorientierung.domain.entities import Review
from berufsorientierung.domain.identifiers import EventId, ReviewId, UserId
from berufsorientierung.domain.ports import ReviewRepository

from .dynamodb_datetime import from_dynamodb_datetime, to_dynamodb_datetime
from .dynamodb_transaction import DynamoDBTransaction


class DynamoDBReviewRepository(ReviewRepository):
    """DynamoDB レビューリポジトリ."""

    def __init__(self, transaction: DynamoDBTransaction) -> None:
        """初期化."""
        self._table_name = os.environ.get("REVIEW_TABLE_NAME", "berufsorientierung-review")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._transaction = transaction

    def add(self, review: Review) -> None:
        """レビューを追加する."""
        self._transaction.put(self._table_name, self._to_dynamodb_item(review))

    def find_by_user(self, user_id: UserId) -> list[Review]:
        """ユーザーのレビューを取得する."""
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

    def delete(self, review_id: ReviewId) -> None:
        """レビューを削除する."""
        self._transaction.delete(self._table_name, key={"review_id": review_id.value})

    @staticmethod
    def _to_dynamodb_item(review: Review) -> dict:
        """Review を DynamoDB アイテムに変換する."""
        return {
            "review_id": review.review_id.value,
            "event_id": review.event_id.value,
            "user_id": review.user_id.value,
            "rating": review.rating,
            "comment": review.comment,
            "created_at": to_dynamodb_datetime(review.created_at),
        }

    @staticmethod
    def _from_dynamodb_item(item: dict) -> Review:
        """DynamoDB アイテムから Review を復元する."""
        return Review(
            review_id=ReviewId(item["review_id"]),
            event_id=EventId(item["event_id"]),
            user_id=UserId(item["user_id"]),
            rating=int(item["rating"]),
            comment=item["comment"],
            created_at=from_dynamodb_datetime(item["created_at"]),
        )
