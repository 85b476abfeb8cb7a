"""識別子モジュール."""
from .activity_log_id import ActivityLogId
from .archive_id import ArchiveId
from .event_id import EventId
from .registration_id import RegistrationId
from .review_id import ReviewId
from .user_id import UserId

__all__ = [
    "ActivityLogId",
    "ArchiveId",
    "EventId",
    "RegistrationId",
    "ReviewId",
    "UserId",
]
