"""CheckDeletionEligibilityUseCaseのテスト."""
from datetime import datetime, timedelta, timezone

import pytest

from berufsorientierung.application.use_cases import (
    CheckDeletionEligibilityUseCase,
    UserNotFoundError,
)
from berufsorientierung.domain.entities import Event, Registration, User
from berufsorientierung.domain.enums import EventStatus
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.value_objects import Email
from berufsorientierung.infrastructure.repositories import InMemoryUnitOfWork

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
USER_ID = UserId("user-001")


def _setup(*event_offsets_days: int, cancelled: bool = False) -> InMemoryUnitOfWork:
    """イベントの開催日（NOW からの日数）ごとに登録済みのユーザーを用意する."""
    uow = InMemoryUnitOfWork()
    uow.users.save(
        User(user_id=USER_ID, email=Email("anna@example.com"), first_name="Anna", last_name="Schmidt")
    )
    for i, offset in enumerate(event_offsets_days):
        event_date = NOW + timedelta(days=offset)
        event_id = EventId(f"event-{i:03d}")
        uow.events.save(
            Event(
                event_id=event_id,
                title=f"Event {i}",
                date=event_date,
                registration_deadline=event_date - timedelta(days=1),
                status=EventStatus.ACTIVE,
            )
        )
        registration = Registration.create(USER_ID, event_id, event_date - timedelta(days=30))
        if cancelled:
            registration.cancel(None, event_date - timedelta(days=20))
        uow.registrations.add(registration)
    return uow


class TestCheckDeletionEligibilityUseCase:
    """削除可否判定のテスト."""

    def test_登録がなければ即時削除可能(self):
        result = CheckDeletionEligibilityUseCase(_setup()).execute(USER_ID, now=NOW)
        assert result.eligible

    def test_40日前のイベントなら即時削除可能(self):
        result = CheckDeletionEligibilityUseCase(_setup(-40)).execute(USER_ID, now=NOW)
        assert result.eligible

    def test_10日前のイベントなら開催日の28日後まで削除不可(self):
        result = CheckDeletionEligibilityUseCase(_setup(-10)).execute(USER_ID, now=NOW)
        assert not result.eligible
        assert result.eligible_after == NOW - timedelta(days=10) + timedelta(days=28)

    def test_今後のイベントがあれば削除不可(self):
        result = CheckDeletionEligibilityUseCase(_setup(-40, 7, 14)).execute(USER_ID, now=NOW)
        assert not result.eligible
        assert result.eligible_after == NOW + timedelta(days=14 + 28)

    def test_キャンセル済みの登録は考慮しない(self):
        result = CheckDeletionEligibilityUseCase(_setup(5, cancelled=True)).execute(USER_ID, now=NOW)
        assert result.eligible

    def test_状態が変わらなければ同じ結果(self):
        use_case = CheckDeletionEligibilityUseCase(_setup(-10, 3))
        assert use_case.execute(USER_ID, now=NOW) == use_case.execute(USER_ID, now=NOW)

    def test_存在しないユーザーでエラー(self):
        with pytest.raises(UserNotFoundError):
            CheckDeletionEligibilityUseCase(InMemoryUnitOfWork()).execute(USER_ID, now=NOW)
