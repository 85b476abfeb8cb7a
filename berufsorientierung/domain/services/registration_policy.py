"""参加登録ポリシー."""
from datetime import datetime, timedelta

from ..entities import Event, Registration, User


class RegistrationRejectedError(Exception):
    """参加登録・キャンセルが受け付けられないエラーの基底."""

    pass


class AccountBlockedError(RegistrationRejectedError):
    """アカウントがブロックされているエラー."""

    pass


class EventNotOpenError(RegistrationRejectedError):
    """イベントが受付中でないエラー."""

    pass


class DeadlinePassedError(RegistrationRejectedError):
    """登録締め切りを過ぎているエラー."""

    pass


class EventFullError(RegistrationRejectedError):
    """定員に達しているエラー."""

    pass


class AlreadyRegisteredError(RegistrationRejectedError):
    """既にアクティブな登録があるエラー."""

    pass


class TooLateToCancelError(RegistrationRejectedError):
    """キャンセル期限を過ぎているエラー."""

    pass


class RegistrationPolicy:
    """参加登録・キャンセルの可否を判定する."""

    CANCELLATION_CUTOFF_DAYS = 3

    @staticmethod
    def check_can_register(
        user: User,
        event: Event,
        active_count: int,
        existing: Registration | None,
        now: datetime,
    ) -> None:
        """登録できるか検証する.

        Raises:
            AccountBlockedError: アカウントがブロックされている場合
            EventNotOpenError: イベントが受付中でない場合
            DeadlinePassedError: 登録締め切りを過ぎている場合
            EventFullError: 定員に達している場合
            AlreadyRegisteredError: 既にアクティブな登録がある場合
        """
        if user.is_blocked:
            raise AccountBlockedError(f"User account is blocked: {user.user_id}")
        if not event.is_open():
            raise EventNotOpenError(f"Event is not active (status: {event.status.value})")
        if not event.is_before_deadline(now):
            raise DeadlinePassedError("Registration deadline has passed")
        if not event.has_capacity(active_count):
            raise EventFullError("Event is full, no available spots")
        if existing is not None and existing.is_active:
            raise AlreadyRegisteredError("User is already registered for this event")

    @staticmethod
    def check_can_cancel(event: Event, now: datetime) -> None:
        """キャンセルできるか検証する.

        開始まで3日を超えて残っている場合のみキャンセルできる。

        Raises:
            TooLateToCancelError: 開始まで3日以下の場合
        """
        cutoff = timedelta(days=RegistrationPolicy.CANCELLATION_CUTOFF_DAYS)
        if event.time_until_start(now) <= cutoff:
            raise TooLateToCancelError(
                f"Cannot cancel registration less than "
                f"{RegistrationPolicy.CANCELLATION_CUTOFF_DAYS} days before the event"
            )
