"""アカウント削除予約ユースケース."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from berufsorientierung.domain.entities import ActivityLogEntry, PendingDeletion
from berufsorientierung.domain.enums import ActivityActionType
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import UnitOfWork
from berufsorientierung.domain.services import (
    AccountDeletionService,
    AlreadyEligibleError,
    AlreadyScheduledError,
)

from .check_deletion_eligibility import active_registration_event_dates
from .register_for_event import UserNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleAccountDeletionResult:
    """削除予約結果."""

    user_id: UserId
    deletion_date: datetime


class ScheduleAccountDeletionUseCase:
    """アカウント削除予約ユースケース.

    削除予約の作成とアカウントのブロックを1トランザクションで行う。
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(self, user_id: UserId, now: datetime | None = None) -> ScheduleAccountDeletionResult:
        """削除可能になる日時に削除を予約し、アカウントをブロックする.

        Args:
            user_id: ユーザーID
            now: 現在時刻（省略時はUTC現在時刻）

        Returns:
            削除予約結果

        Raises:
            UserNotFoundError: ユーザーが見つからない場合
            AlreadyScheduledError: 既に削除予約がある場合
            AlreadyEligibleError: 既に即時削除できる場合
        """
        now = now or datetime.now(timezone.utc)

        with self._unit_of_work as uow:
            if uow.users.find_by_id(user_id) is None:
                raise UserNotFoundError(f"User not found: {user_id}")
            if uow.pending_deletions.find_by_user(user_id) is not None:
                raise AlreadyScheduledError(f"User deletion is already scheduled: {user_id}")

            eligibility = AccountDeletionService.evaluate(
                active_registration_event_dates(uow, user_id), now
            )
            if eligibility.eligible:
                raise AlreadyEligibleError(f"User can be deleted immediately: {user_id}")

            deletion_date = eligibility.eligible_after
            uow.pending_deletions.add(
                PendingDeletion(user_id=user_id, deletion_date=deletion_date, created_at=now)
            )
            uow.users.block(user_id)
            uow.activity_log.append(
                ActivityLogEntry.record(
                    ActivityActionType.USER_DELETION_SCHEDULED,
                    now,
                    user_id=user_id,
                    details={"deletion_date": deletion_date.isoformat()},
                )
            )

        logger.info(f"Scheduled deletion of user {user_id} at {deletion_date.isoformat()}")
        return ScheduleAccountDeletionResult(user_id=user_id, deletion_date=deletion_date)
