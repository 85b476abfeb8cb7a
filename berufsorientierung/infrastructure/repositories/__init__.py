"""リポジトリ実装モジュール."""
from .dynamodb_activity_log_repository import DynamoDBActivityLogRepository
from .dynamodb_admin_repository import DynamoDBAdminRepository
from .dynamodb_deleted_user_archive_repository import DynamoDBDeletedUserArchiveRepository
from .dynamodb_event_repository import DynamoDBEventRepository
from .dynamodb_pending_deletion_repository import DynamoDBPendingDeletionRepository
from .dynamodb_registration_repository import DynamoDBRegistrationRepository
from .dynamodb_review_repository import DynamoDBReviewRepository
from .dynamodb_transaction import DynamoDBTransaction
from .dynamodb_unit_of_work import DynamoDBUnitOfWork
from .dynamodb_user_repository import DynamoDBUserRepository
from .in_memory_activity_log_repository import InMemoryActivityLogRepository
from .in_memory_admin_repository import InMemoryAdminRepository
from .in_memory_deleted_user_archive_repository import InMemoryDeletedUserArchiveRepository
from .in_memory_event_repository import InMemoryEventRepository
from .in_memory_pending_deletion_repository import InMemoryPendingDeletionRepository
from .in_memory_registration_repository import InMemoryRegistrationRepository
from .in_memory_review_repository import InMemoryReviewRepository
from .in_memory_store import InMemoryStore
from .in_memory_unit_of_work import InMemoryUnitOfWork
from .in_memory_user_repository import InMemoryUserRepository

__all__ = [
    # DynamoDB
    "DynamoDBActivityLogRepository",
    "DynamoDBAdminRepository",
    "DynamoDBDeletedUserArchiveRepository",
    "DynamoDBEventRepository",
    "DynamoDBPendingDeletionRepository",
    "DynamoDBRegistrationRepository",
    "DynamoDBReviewRepository",
    "DynamoDBTransaction",
    "DynamoDBUnitOfWork",
    "DynamoDBUserRepository",
    # インメモリ
    "InMemoryActivityLogRepository",
    "InMemoryAdminRepository",
    "InMemoryDeletedUserArchiveRepository",
    "InMemoryEventRepository",
    "InMemoryPendingDeletionRepository",
    "InMemoryRegistrationRepository",
    "InMemoryReviewRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
