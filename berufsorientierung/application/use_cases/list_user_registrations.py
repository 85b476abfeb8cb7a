"""ユーザーの参加登録一覧取得ユースケース."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from berufsorientierung.domain.entities import Registration
from berufsorientierung.domain.enums import EventStatus
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import UnitOfWork


@dataclass(frozen=True)
class UserRegistrationView:
    """マイページ向けの参加登録."""

    registration: Registration
    event_title: str
    event_date: datetime
    event_status: EventStatus


class ListUserRegistrationsUseCase:
    """ユーザーの参加登録一覧取得ユースケース."""

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(self, user_id: UserId, now: datetime | None = None) -> list[UserRegistrationView]:
        """キャンセル済みを含む全登録を取得する.

        開催前のイベントを先に、それぞれ開催日時の昇順で並べる。
        イベントが削除済みの登録は含まない。
        """
        now = now or datetime.now(timezone.utc)

        views = []
        with self._unit_of_work as uow:
            for registration in uow.registrations.find_by_user(user_id):
                event = uow.events.find_by_id(registration.event_id)
                if event is None:
                    continue
                views.append(
                    UserRegistrationView(
                        registration=registration,
                        event_title=event.title,
                        event_date=event.date,
                        event_status=event.status,
                    )
                )

        return sorted(views, key=lambda v: (v.event_date < now, v.event_date))
