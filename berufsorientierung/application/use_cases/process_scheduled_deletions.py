"""予約済みアカウント削除の一括実行ユースケース."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import UnitOfWork

from .erase_account import EraseAccountUseCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessScheduledDeletionsResult:
    """一括削除結果."""

    deleted_count: int
    failed_user_ids: tuple[UserId, ...] = ()


class ProcessScheduledDeletionsUseCase:
    """削除予定日を迎えたアカウントを削除する.

    1件の失敗で残りの処理を止めない。失敗したアカウントは予約が残るため
    次回の実行で再試行される。
    """

    def __init__(self, unit_of_work: UnitOfWork, erase_account: EraseAccountUseCase) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work
        self._erase_account = erase_account

    def execute(self, now: datetime | None = None) -> ProcessScheduledDeletionsResult:
        """予定日が now 以前の削除予約を古い順に処理する.

        Returns:
            削除に成功した件数と失敗したユーザーID
        """
        now = now or datetime.now(timezone.utc)

        with self._unit_of_work as uow:
            due = uow.pending_deletions.find_due(now)

        logger.info(f"Found {len(due)} account(s) due for deletion")

        deleted_count = 0
        failed: list[UserId] = []
        for pending in due:
            try:
                self._erase_account.execute(pending.user_id, now=now)
            except Exception as e:
                logger.exception(f"Failed to delete user {pending.user_id}: {e}")
                failed.append(pending.user_id)
                continue
            deleted_count += 1

        logger.info(f"Scheduled deletion finished: deleted={deleted_count}, failed={len(failed)}")
        return ProcessScheduledDeletionsResult(
            deleted_count=deleted_count,
            failed_user_ids=tuple(failed),
        )
