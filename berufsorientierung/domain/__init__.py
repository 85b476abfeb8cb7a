"""ドメイン層モジュール."""
from .entities import (
    ActivityLogEntry,
    Admin,
    DeletedUserArchive,
    Event,
    PendingDeletion,
    Registration,
    Review,
    User,
)
from .enums import ActivityActionType, EventStatus
from .identifiers import ActivityLogId, ArchiveId, EventId, RegistrationId, ReviewId, UserId
from .ports import UnitOfWork
from .services import AccountDeletionService, RegistrationPolicy
from .value_objects import Cancellation, DeletionEligibility, Email, ParticipatedEvent

__all__ = [
    # Identifiers
    "ActivityLogId",
    "ArchiveId",
    "EventId",
    "RegistrationId",
    "ReviewId",
    "UserId",
    # Enums
    "ActivityActionType",
    "EventStatus",
    # Value Objects
    "Cancellation",
    "DeletionEligibility",
    "Email",
    "ParticipatedEvent",
    # Entities
    "ActivityLogEntry",
    "Admin",
    "DeletedUserArchive",
    "Event",
    "PendingDeletion",
    "Registration",
    "Review",
    "User",
    # Ports
    "UnitOfWork",
    # Services
    "AccountDeletionService",
    "RegistrationPolicy",
]
