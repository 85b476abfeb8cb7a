"""ListScheduledDeletionsUseCaseのテスト."""
from datetime import datetime, timedelta, timezone

from berufsorientierung.application.use_cases import ListScheduledDeletionsUseCase
from berufsorientierung.domain.entities import Event, PendingDeletion, Registration, User
from berufsorientierung.domain.enums import EventStatus
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.value_objects import Email
from berufsorientierung.infrastructure.repositories import InMemoryUnitOfWork

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def _add_user(uow: InMemoryUnitOfWork, user_id: str, first_name: str) -> UserId:
    uid = UserId(user_id)
    uow.users.save(
        User(
            user_id=uid,
            email=Email(f"{user_id}@example.com"),
            first_name=first_name,
            last_name="Schmidt",
            is_blocked=True,
        )
    )
    return uid


class TestListScheduledDeletionsUseCase:
    """削除予約一覧のテスト."""

    def test_予定日の昇順でユーザー情報と最終イベント日時を返す(self):
        uow = InMemoryUnitOfWork()
        anna = _add_user(uow, "user-anna", "Anna")
        ben = _add_user(uow, "user-ben", "Ben")

        for event_id, days in (("event-1", -20), ("event-2", 7)):
            event_date = NOW + timedelta(days=days)
            uow.events.save(
                Event(
                    event_id=EventId(event_id),
                    title=event_id,
                    date=event_date,
                    registration_deadline=event_date - timedelta(days=1),
                    status=EventStatus.ACTIVE,
                )
            )
            uow.registrations.add(Registration.create(anna, EventId(event_id), NOW - timedelta(days=30)))

        uow.pending_deletions.add(
            PendingDeletion(user_id=anna, deletion_date=NOW + timedelta(days=35), created_at=NOW)
        )
        uow.pending_deletions.add(
            PendingDeletion(user_id=ben, deletion_date=NOW + timedelta(days=3), created_at=NOW)
        )

        views = ListScheduledDeletionsUseCase(uow).execute()

        assert [v.first_name for v in views] == ["Ben", "Anna"]
        assert views[0].email == "user-ben@example.com"
        assert views[0].last_event_date is None
        assert views[1].last_event_date == NOW + timedelta(days=7)
        assert views[1].erasure_in_progress is False

    def test_予約がなければ空(self):
        assert ListScheduledDeletionsUseCase(InMemoryUnitOfWork()).execute() == []
