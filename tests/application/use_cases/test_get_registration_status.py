"""GetRegistrationStatusUseCaseのテスト."""
from datetime import datetime, timezone

from berufsorientierung.application.use_cases import GetRegistrationStatusUseCase
from berufsorientierung.domain.entities import Registration
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.infrastructure.repositories import InMemoryUnitOfWork

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestGetRegistrationStatusUseCase:
    """参加登録状況のテスト."""

    def test_キャンセル済みは数えない(self):
        uow = InMemoryUnitOfWork()
        uow.registrations.add(Registration.create(UserId("user-a"), EventId("event-001"), NOW))
        cancelled = Registration.create(UserId("user-b"), EventId("event-001"), NOW)
        cancelled.cancel(None, NOW)
        uow.registrations.add(cancelled)
        uow.registrations.add(Registration.create(UserId("user-c"), EventId("event-002"), NOW))

        use_case = GetRegistrationStatusUseCase(uow)
        assert use_case.count_active(EventId("event-001")) == 1
        assert use_case.is_active(UserId("user-a"), EventId("event-001")) is True
        assert use_case.is_active(UserId("user-b"), EventId("event-001")) is False
        assert use_case.is_active(UserId("user-c"), EventId("event-001")) is False

    def test_登録がなければ0(self):
        assert GetRegistrationStatusUseCase(InMemoryUnitOfWork()).count_active(EventId("event-001")) == 0
