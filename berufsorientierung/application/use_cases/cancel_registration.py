"""参加登録キャンセルユースケース."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from berufsorientierung.domain.entities import ActivityLogEntry, Registration
from berufsorientierung.domain.enums import ActivityActionType
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.ports import UnitOfWork
from berufsorientierung.domain.services import RegistrationPolicy

from .register_for_event import EventNotFoundError

logger = logging.getLogger(__name__)


class RegistrationNotFoundError(Exception):
    """アクティブな参加登録が見つからないエラー."""

    pass


class CancelRegistrationUseCase:
    """参加登録キャンセルユースケース.

    行は削除せず、キャンセル日時と理由を記録する。
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(
        self,
        user_id: UserId,
        event_id: EventId,
        reason: str | None = None,
        now: datetime | None = None,
    ) -> Registration:
        """参加登録をキャンセルする.

        Args:
            user_id: ユーザーID
            event_id: イベントID
            reason: キャンセル理由
            now: 現在時刻（省略時はUTC現在時刻）

        Returns:
            キャンセルされた登録

        Raises:
            RegistrationNotFoundError: アクティブな登録がない場合
            EventNotFoundError: イベントが見つからない場合
            TooLateToCancelError: 開始まで3日以下の場合
        """
        now = now or datetime.now(timezone.utc)

        with self._unit_of_work as uow:
            registration = uow.registrations.find(user_id, event_id)
            if registration is None or not registration.is_active:
                raise RegistrationNotFoundError(
                    f"Active registration not found: user={user_id}, event={event_id}"
                )

            event = uow.events.find_by_id(event_id)
            if event is None:
                raise EventNotFoundError(f"Event not found: {event_id}")

            RegistrationPolicy.check_can_cancel(event, now)

            registration.cancel(reason, now)
            uow.registrations.update(registration)
            uow.events.release_seat(event_id)
            uow.activity_log.append(
                ActivityLogEntry.record(
                    ActivityActionType.REGISTRATION_CANCEL,
                    now,
                    user_id=user_id,
                    details={"event_id": event_id.value, "reason": reason},
                )
            )

        logger.info(f"User {user_id} cancelled registration for event {event_id}")
        return registration
