"""CancelRegistrationUseCaseのテスト."""
from datetime import datetime, timedelta, timezone

import pytest

from berufsorientierung.application.use_cases import (
    CancelRegistrationUseCase,
    GetRegistrationStatusUseCase,
    RegisterForEventUseCase,
    RegistrationNotFoundError,
)
from berufsorientierung.domain.entities import Event, User
from berufsorientierung.domain.enums import ActivityActionType, EventStatus
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.services import TooLateToCancelError
from berufsorientierung.domain.value_objects import Email
from berufsorientierung.infrastructure.repositories import InMemoryUnitOfWork

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
EVENT_ID = EventId("event-001")
USER_ID = UserId("user-001")
EVENT_DATE = NOW + timedelta(days=10)


def _setup_registered() -> InMemoryUnitOfWork:
    uow = InMemoryUnitOfWork()
    uow.users.save(
        User(user_id=USER_ID, email=Email("anna@example.com"), first_name="Anna", last_name="Schmidt")
    )
    uow.events.save(
        Event(
            event_id=EVENT_ID,
            title="Berufsinfotag",
            date=EVENT_DATE,
            registration_deadline=NOW + timedelta(days=1),
            status=EventStatus.ACTIVE,
        )
    )
    RegisterForEventUseCase(uow).execute(USER_ID, EVENT_ID, now=NOW)
    return uow


class TestCancelRegistrationUseCase:
    """参加登録キャンセルのテスト."""

    def test_開始前日はキャンセルできず4日前ならキャンセルできる(self):
        uow = _setup_registered()
        use_case = CancelRegistrationUseCase(uow)

        with pytest.raises(TooLateToCancelError):
            use_case.execute(USER_ID, EVENT_ID, "krank", now=EVENT_DATE - timedelta(days=1))
        assert GetRegistrationStatusUseCase(uow).is_active(USER_ID, EVENT_ID)

        registration = use_case.execute(
            USER_ID, EVENT_ID, "krank", now=EVENT_DATE - timedelta(days=4)
        )
        assert not registration.is_active
        assert registration.cancelled_at == EVENT_DATE - timedelta(days=4)
        assert registration.cancellation_reason == "krank"

    def test_開始までちょうど3日ならキャンセルできない(self):
        uow = _setup_registered()
        with pytest.raises(TooLateToCancelError):
            CancelRegistrationUseCase(uow).execute(
                USER_ID, EVENT_ID, now=EVENT_DATE - timedelta(days=3)
            )

    def test_キャンセルしても行は残る(self):
        uow = _setup_registered()
        CancelRegistrationUseCase(uow).execute(USER_ID, EVENT_ID, now=NOW)

        assert len(uow.store.registrations) == 1
        assert uow.registrations.find(USER_ID, EVENT_ID) is not None
        assert GetRegistrationStatusUseCase(uow).count_active(EVENT_ID) == 0

    def test_登録がなければエラー(self):
        uow = _setup_registered()
        with pytest.raises(RegistrationNotFoundError):
            CancelRegistrationUseCase(uow).execute(UserId("user-999"), EVENT_ID, now=NOW)

    def test_キャンセル済みならエラー(self):
        uow = _setup_registered()
        use_case = CancelRegistrationUseCase(uow)
        use_case.execute(USER_ID, EVENT_ID, now=NOW)
        with pytest.raises(RegistrationNotFoundError):
            use_case.execute(USER_ID, EVENT_ID, now=NOW)

    def test_アクティビティログに理由が記録される(self):
        uow = _setup_registered()
        CancelRegistrationUseCase(uow).execute(USER_ID, EVENT_ID, "Terminkonflikt", now=NOW)

        entries = [
            e
            for e in uow.activity_log.find_by_user(USER_ID)
            if e.action_type == ActivityActionType.REGISTRATION_CANCEL
        ]
        assert len(entries) == 1
        assert entries[0].details == {"event_id": "event-001", "reason": "Terminkonflikt"}
