"""エンティティモジュール."""
from .activity_log_entry import ActivityLogEntry
from .admin import Admin
from .deleted_user_archive import DeletedUserArchive
from .event import Event
from .pending_deletion import PendingDeletion
from .registration import Registration
from .review import Review
from .user import User

__all__ = [
    "ActivityLogEntry",
    "Admin",
    "DeletedUserArchive",
    "Event",
    "PendingDeletion",
    "Registration",
    "Review",
    "User",
]
