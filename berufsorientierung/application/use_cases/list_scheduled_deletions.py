"""削除予約一覧取得ユースケース."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import UnitOfWork

from .check_deletion_eligibility import active_registration_event_dates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledDeletionView:
    """管理画面向けの削除予約."""

    user_id: UserId
    email: str
    first_name: str
    last_name: str
    deletion_date: datetime
    created_at: datetime
    last_event_date: datetime | None
    erasure_in_progress: bool


class ListScheduledDeletionsUseCase:
    """削除予約一覧取得ユースケース."""

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(self) -> list[ScheduledDeletionView]:
        """削除予約を予定日の昇順で取得する."""
        views = []
        with self._unit_of_work as uow:
            for pending in uow.pending_deletions.find_all():
                user = uow.users.find_by_id(pending.user_id)
                if user is None:
                    logger.warning(f"Pending deletion without user: {pending.user_id}")
                    continue
                event_dates = active_registration_event_dates(uow, pending.user_id)
                views.append(
                    ScheduledDeletionView(
                        user_id=user.user_id,
                        email=user.email.value,
                        first_name=user.first_name,
                        last_name=user.last_name,
                        deletion_date=pending.deletion_date,
                        created_at=pending.created_at,
                        last_event_date=event_dates[0] if event_dates else None,
                        erasure_in_progress=pending.is_erasure_in_progress(),
                    )
                )
        return views
