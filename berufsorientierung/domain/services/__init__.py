"""ドメインサービスモジュール."""
from .account_deletion_service import (
    AccountDeletionService,
    AlreadyEligibleError,
    AlreadyScheduledError,
)
from .registration_policy import (
    AccountBlockedError,
    AlreadyRegisteredError,
    DeadlinePassedError,
    EventFullError,
    EventNotOpenError,
    RegistrationPolicy,
    RegistrationRejectedError,
    TooLateToCancelError,
)

__all__ = [
    "AccountBlockedError",
    "AccountDeletionService",
    "AlreadyEligibleError",
    "AlreadyRegisteredError",
    "AlreadyScheduledError",
    "DeadlinePassedError",
    "EventFullError",
    "EventNotOpenError",
    "RegistrationPolicy",
    "RegistrationRejectedError",
    "TooLateToCancelError",
]
