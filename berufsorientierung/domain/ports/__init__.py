"""ポートモジュール."""
from .activity_log_repository import ActivityLogRepository
from .admin_repository import AdminRepository
from .deleted_user_archive_repository import DeletedUserArchiveRepository
from .event_repository import EventRepository
from .pending_deletion_repository import PendingDeletionRepository
from .registration_repository import RegistrationRepository
from .review_repository import ReviewRepository
from .unit_of_work import TransactionFailedError, TransactionTooLargeError, UnitOfWork
from .user_repository import UserRepository

__all__ = [
    "ActivityLogRepository",
    "AdminRepository",
    "DeletedUserArchiveRepository",
    "EventRepository",
    "PendingDeletionRepository",
    "RegistrationRepository",
    "ReviewRepository",
    "TransactionFailedError",
    "TransactionTooLargeError",
    "UnitOfWork",
    "UserRepository",
]
