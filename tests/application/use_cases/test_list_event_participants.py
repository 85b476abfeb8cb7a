"""ListEventParticipantsUseCaseのテスト."""
from datetime import datetime, timedelta, timezone

import pytest

from berufsorientierung.application.use_cases import (
    EventNotFoundError,
    ListEventParticipantsUseCase,
)
from berufsorientierung.domain.entities import Event, Registration, User
from berufsorientierung.domain.enums import EventStatus
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.value_objects import Email
from berufsorientierung.infrastructure.repositories import InMemoryUnitOfWork

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
EVENT_ID = EventId("event-001")


def _setup() -> InMemoryUnitOfWork:
    uow = InMemoryUnitOfWork()
    uow.events.save(
        Event(
            event_id=EVENT_ID,
            title="Berufsinfotag",
            date=NOW + timedelta(days=10),
            registration_deadline=NOW + timedelta(days=5),
            status=EventStatus.ACTIVE,
        )
    )
    people = [("user-001", "Anna", 3), ("user-002", "Ben", 1), ("user-003", "Clara", 2)]
    for user_id, first_name, days_ago in people:
        uow.users.save(
            User(
                user_id=UserId(user_id),
                email=Email(f"{first_name}@Example.com"),
                first_name=first_name,
                last_name="Schmidt",
            )
        )
        uow.registrations.add(
            Registration.create(UserId(user_id), EVENT_ID, NOW - timedelta(days=days_ago))
        )
    return uow


class TestListEventParticipantsUseCase:
    """イベント参加者一覧のテスト."""

    def test_アクティブな参加者を登録日時の昇順で返す(self):
        uow = _setup()
        cancelled = uow.registrations.find(UserId("user-003"), EVENT_ID)
        cancelled.cancel(None, NOW)
        uow.registrations.update(cancelled)

        views = ListEventParticipantsUseCase(uow).execute(EVENT_ID)

        assert [v.first_name for v in views] == ["Anna", "Ben"]
        assert views[0].last_name == "Schmidt"
        assert views[0].email == Email("anna@example.com")

    def test_ユーザーが存在しない登録は含まない(self):
        uow = _setup()
        del uow.store.users["user-002"]

        views = ListEventParticipantsUseCase(uow).execute(EVENT_ID)

        assert [v.first_name for v in views] == ["Anna", "Clara"]

    def test_イベントが見つからなければエラー(self):
        with pytest.raises(EventNotFoundError):
            ListEventParticipantsUseCase(InMemoryUnitOfWork()).execute(EventId("event-999"))
