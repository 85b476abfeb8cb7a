"""アカウント削除可否判定ユースケース."""
from datetime import datetime, timezone

from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import UnitOfWork
from berufsorientierung.domain.services import AccountDeletionService
from berufsorientierung.domain.value_objects import DeletionEligibility

from .register_for_event import UserNotFoundError


def active_registration_event_dates(uow: UnitOfWork, user_id: UserId) -> list[datetime]:
    """アクティブな登録のイベント日時を新しい順に取得する."""
    dates = []
    for registration in uow.registrations.find_by_user(user_id):
        if not registration.is_active:
            continue
        event = uow.events.find_by_id(registration.event_id)
        if event is not None:
            dates.append(event.date)
    return sorted(dates, reverse=True)


class CheckDeletionEligibilityUseCase:
    """アカウント削除可否判定ユースケース."""

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(self, user_id: UserId, now: datetime | None = None) -> DeletionEligibility:
        """今すぐ削除できるか、できない場合はいつから削除できるかを判定する.

        Raises:
            UserNotFoundError: ユーザーが見つからない場合
        """
        now = now or datetime.now(timezone.utc)

        with self._unit_of_work as uow:
            if uow.users.find_by_id(user_id) is None:
                raise UserNotFoundError(f"User not found: {user_id}")
            event_dates = active_registration_event_dates(uow, user_id)

        return AccountDeletionService.evaluate(event_dates, now)
