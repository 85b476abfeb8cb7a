"""イベント参加登録ユースケース."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from berufsorientierung.domain.entities import ActivityLogEntry, Registration
from berufsorientierung.domain.enums import ActivityActionType
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.ports import UnitOfWork
from berufsorientierung.domain.services import RegistrationPolicy

logger = logging.getLogger(__name__)


class UserNotFoundError(Exception):
    """ユーザーが見つからないエラー."""

    pass


class EventNotFoundError(Exception):
    """イベントが見つからないエラー."""

    pass


@dataclass(frozen=True)
class RegisterForEventResult:
    """参加登録結果."""

    registration: Registration
    reactivated: bool


class RegisterForEventUseCase:
    """イベント参加登録ユースケース.

    キャンセル済みの登録がある場合は新しい行を作らずに再有効化する。
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(
        self,
        user_id: UserId,
        event_id: EventId,
        additional_data: dict | None = None,
        now: datetime | None = None,
    ) -> RegisterForEventResult:
        """イベントに参加登録する.

        Args:
            user_id: ユーザーID
            event_id: イベントID
            additional_data: 登録フォームの追加回答
            now: 現在時刻（省略時はUTC現在時刻）

        Returns:
            登録結果

        Raises:
            UserNotFoundError: ユーザーが見つからない場合
            EventNotFoundError: イベントが見つからない場合
            RegistrationRejectedError: 登録条件を満たさない場合
        """
        now = now or datetime.now(timezone.utc)

        with self._unit_of_work as uow:
            user = uow.users.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(f"User not found: {user_id}")

            event = uow.events.find_by_id(event_id)
            if event is None:
                raise EventNotFoundError(f"Event not found: {event_id}")

            existing = uow.registrations.find(user_id, event_id)
            active_count = uow.registrations.count_active(event_id)
            RegistrationPolicy.check_can_register(user, event, active_count, existing, now)

            # 定員の再確認は席の確保と同じトランザクションで行う
            uow.events.reserve_seat(event)

            if existing is None:
                registration = Registration.create(user_id, event_id, now, additional_data)
                uow.registrations.add(registration)
                reactivated = False
            else:
                existing.reactivate(now, additional_data)
                uow.registrations.update(existing)
                registration = existing
                reactivated = True

            uow.activity_log.append(
                ActivityLogEntry.record(
                    ActivityActionType.REGISTRATION_CREATE,
                    now,
                    user_id=user_id,
                    details={"event_id": event_id.value, "reactivated": reactivated},
                )
            )

        logger.info(f"User {user_id} registered for event {event_id} (reactivated={reactivated})")
        return RegisterForEventResult(registration=registration, reactivated=reactivated)
