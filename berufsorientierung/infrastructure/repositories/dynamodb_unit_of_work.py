"""DynamoDB ユニットオブワーク実装."""
from __future__ import annotations

from typing import Any

import boto3

from berufsorientierung.domain.ports import UnitOfWork

from .dynamodb_activity_log_repository import DynamoDBActivityLogRepository
from .dynamodb_admin_repository import DynamoDBAdminRepository
from .dynamodb_deleted_user_archive_repository import DynamoDBDeletedUserArchiveRepository
from .dynamodb_event_repository import DynamoDBEventRepository
from .dynamodb_pending_deletion_repository import DynamoDBPendingDeletionRepository
from .dynamodb_registration_repository import DynamoDBRegistrationRepository
from .dynamodb_review_repository import DynamoDBReviewRepository
from .dynamodb_transaction import DynamoDBTransaction
from .dynamodb_user_repository import DynamoDBUserRepository


class DynamoDBUnitOfWork(UnitOfWork):
    """DynamoDB ユニットオブワーク.

    読み取りは即時に行い、書き込みはコミット時に TransactWriteItems で一括実行する。
    """

    max_batch_size = DynamoDBTransaction.MAX_ITEMS

    def __init__(self, client: Any | None = None) -> None:
        """初期化."""
        self._transaction = DynamoDBTransaction(client or boto3.client("dynamodb"))
        self.users = DynamoDBUserRepository(self._transaction)
        self.events = DynamoDBEventRepository(self._transaction)
        self.registrations = DynamoDBRegistrationRepository(self._transaction)
        self.pending_deletions = DynamoDBPendingDeletionRepository(self._transaction)
        self.archive = DynamoDBDeletedUserArchiveRepository(self._transaction)
        self.activity_log = DynamoDBActivityLogRepository(self._transaction)
        self.admins = DynamoDBAdminRepository(self._transaction)
        self.reviews = DynamoDBReviewRepository(self._transaction)

    def begin(self) -> None:
        """トランザクションを開始する."""
        self._transaction.clear()

    def commit(self) -> None:
        """コミットする."""
        self._transaction.commit()

    def rollback(self) -> None:
        """ロールバックする."""
        self._transaction.clear()
