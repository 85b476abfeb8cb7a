"""イベント参加者一覧取得ユースケース."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from berufsorientierung.domain.entities import Registration
from berufsorientierung.domain.identifiers import EventId
from berufsorientierung.domain.ports import UnitOfWork
from berufsorientierung.domain.value_objects import Email

from .register_for_event import EventNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventParticipantView:
    """管理画面向けの参加者."""

    registration: Registration
    first_name: str
    last_name: str
    email: Email


class ListEventParticipantsUseCase:
    """イベント参加者一覧取得ユースケース."""

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(self, event_id: EventId) -> list[EventParticipantView]:
        """アクティブな登録の参加者を登録日時の昇順で取得する.

        Raises:
            EventNotFoundError: イベントが見つからない場合
        """
        views = []
        with self._unit_of_work as uow:
            if uow.events.find_by_id(event_id) is None:
                raise EventNotFoundError(f"Event not found: {event_id}")

            for registration in uow.registrations.find_active_by_event(event_id):
                user = uow.users.find_by_id(registration.user_id)
                if user is None:
                    logger.warning(f"Registration without user: {registration.registration_id}")
                    continue
                views.append(
                    EventParticipantView(
                        registration=registration,
                        first_name=user.first_name,
                        last_name=user.last_name,
                        email=user.email,
                    )
                )
        return views
