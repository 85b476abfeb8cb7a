"""アカウント削除リクエストユースケース."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import UnitOfWork

from .check_deletion_eligibility import CheckDeletionEligibilityUseCase
from .erase_account import EraseAccountUseCase
from .schedule_account_deletion import ScheduleAccountDeletionUseCase


@dataclass(frozen=True)
class AccountDeletionResult:
    """アカウント削除リクエスト結果."""

    user_id: UserId
    # True の場合は即時削除済み
    immediate: bool
    deletion_date: datetime


class RequestAccountDeletionUseCase:
    """アカウント削除リクエストユースケース.

    削除可能なら即時削除し、そうでなければ削除を予約する。
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._check_eligibility = CheckDeletionEligibilityUseCase(unit_of_work)
        self._schedule = ScheduleAccountDeletionUseCase(unit_of_work)
        self._erase = EraseAccountUseCase(unit_of_work)

    def execute(self, user_id: UserId, now: datetime | None = None) -> AccountDeletionResult:
        """アカウント削除をリクエストする.

        Raises:
            UserNotFoundError: ユーザーが見つからない場合
            AlreadyScheduledError: 既に削除予約がある場合
        """
        now = now or datetime.now(timezone.utc)

        eligibility = self._check_eligibility.execute(user_id, now=now)
        if eligibility.eligible:
            erased = self._erase.execute(user_id, now=now)
            return AccountDeletionResult(
                user_id=user_id, immediate=True, deletion_date=erased.deleted_at
            )

        scheduled = self._schedule.execute(user_id, now=now)
        return AccountDeletionResult(
            user_id=user_id, immediate=False, deletion_date=scheduled.deletion_date
        )
