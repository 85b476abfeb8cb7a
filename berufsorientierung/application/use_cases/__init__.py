"""ユースケースモジュール."""
from .admin_cancel_registration import (
    AdminCancelRegistrationUseCase,
    AdminPermissionError,
    InvalidCancellationReasonError,
    RegistrationAlreadyCancelledError,
)
from .cancel_registration import CancelRegistrationUseCase, RegistrationNotFoundError
from .check_deletion_eligibility import CheckDeletionEligibilityUseCase
from .count_expired_registration_deadlines import CountExpiredRegistrationDeadlinesUseCase
from .erase_account import EraseAccountResult, EraseAccountUseCase
from .get_registration_status import GetRegistrationStatusUseCase
from .list_event_participants import EventParticipantView, ListEventParticipantsUseCase
from .list_scheduled_deletions import ListScheduledDeletionsUseCase, ScheduledDeletionView
from .list_user_registrations import ListUserRegistrationsUseCase, UserRegistrationView
from .process_scheduled_deletions import (
    ProcessScheduledDeletionsResult,
    ProcessScheduledDeletionsUseCase,
)
from .register_for_event import (
    EventNotFoundError,
    RegisterForEventResult,
    RegisterForEventUseCase,
    UserNotFoundError,
)
from .request_account_deletion import AccountDeletionResult, RequestAccountDeletionUseCase
from .schedule_account_deletion import (
    ScheduleAccountDeletionResult,
    ScheduleAccountDeletionUseCase,
)

__all__ = [
    # 参加登録
    "AdminCancelRegistrationUseCase",
    "CancelRegistrationUseCase",
    "EventParticipantView",
    "GetRegistrationStatusUseCase",
    "ListEventParticipantsUseCase",
    "ListUserRegistrationsUseCase",
    "RegisterForEventResult",
    "RegisterForEventUseCase",
    "UserRegistrationView",
    # アカウント削除
    "AccountDeletionResult",
    "CheckDeletionEligibilityUseCase",
    "EraseAccountResult",
    "EraseAccountUseCase",
    "ListScheduledDeletionsUseCase",
    "ProcessScheduledDeletionsResult",
    "ProcessScheduledDeletionsUseCase",
    "RequestAccountDeletionUseCase",
    "ScheduleAccountDeletionResult",
    "ScheduleAccountDeletionUseCase",
    "ScheduledDeletionView",
    # 統計
    "CountExpiredRegistrationDeadlinesUseCase",
    # エラー
    "AdminPermissionError",
    "EventNotFoundError",
    "InvalidCancellationReasonError",
    "RegistrationAlreadyCancelledError",
    "RegistrationNotFoundError",
    "UserNotFoundError",
]
