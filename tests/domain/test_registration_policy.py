"""RegistrationPolicyのテスト."""
from datetime import datetime, timedelta, timezone

import pytest

from berufsorientierung.domain.entities import Event, Registration, User
from berufsorientierung.domain.enums import EventStatus
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.services import (
    AccountBlockedError,
    AlreadyRegisteredError,
    DeadlinePassedError,
    EventFullError,
    EventNotOpenError,
    RegistrationPolicy,
    TooLateToCancelError,
)
from berufsorientierung.domain.value_objects import Email

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def _make_user(**overrides) -> User:
    defaults = {
        "user_id": UserId("user-001"),
        "email": Email("anna@example.com"),
        "first_name": "Anna",
        "last_name": "Schmidt",
    }
    defaults.update(overrides)
    return User(**defaults)


def _make_event(**overrides) -> Event:
    defaults = {
        "event_id": EventId("event-001"),
        "title": "Berufsinfotag",
        "date": NOW + timedelta(days=10),
        "registration_deadline": NOW + timedelta(days=1),
        "status": EventStatus.ACTIVE,
        "max_participants": 2,
    }
    defaults.update(overrides)
    return Event(**defaults)


class TestCheckCanRegister:
    """登録可否のテスト."""

    def test_条件を満たせば例外なし(self):
        RegistrationPolicy.check_can_register(_make_user(), _make_event(), 1, None, NOW)

    def test_ブロック中のユーザーは登録できない(self):
        with pytest.raises(AccountBlockedError):
            RegistrationPolicy.check_can_register(
                _make_user(is_blocked=True), _make_event(), 0, None, NOW
            )

    def test_受付中でないイベントには登録できない(self):
        with pytest.raises(EventNotOpenError):
            RegistrationPolicy.check_can_register(
                _make_user(), _make_event(status=EventStatus.DRAFT), 0, None, NOW
            )

    def test_締め切り後は登録できない(self):
        with pytest.raises(DeadlinePassedError):
            RegistrationPolicy.check_can_register(
                _make_user(), _make_event(), 0, None, NOW + timedelta(days=2)
            )

    def test_満席なら登録できない(self):
        with pytest.raises(EventFullError):
            RegistrationPolicy.check_can_register(_make_user(), _make_event(), 2, None, NOW)

    def test_定員なしなら人数に関係なく登録できる(self):
        RegistrationPolicy.check_can_register(
            _make_user(), _make_event(max_participants=None), 500, None, NOW
        )

    def test_アクティブな登録があれば登録できない(self):
        existing = Registration.create(UserId("user-001"), EventId("event-001"), NOW)
        with pytest.raises(AlreadyRegisteredError):
            RegistrationPolicy.check_can_register(_make_user(), _make_event(), 1, existing, NOW)

    def test_キャンセル済みの登録があっても登録できる(self):
        existing = Registration.create(UserId("user-001"), EventId("event-001"), NOW)
        existing.cancel(None, NOW)
        RegistrationPolicy.check_can_register(_make_user(), _make_event(), 0, existing, NOW)


class TestCheckCanCancel:
    """キャンセル可否のテスト."""

    def test_開始まで4日あればキャンセルできる(self):
        event = _make_event()
        RegistrationPolicy.check_can_cancel(event, event.date - timedelta(days=4))

    def test_開始までちょうど3日ならキャンセルできない(self):
        event = _make_event()
        with pytest.raises(TooLateToCancelError):
            RegistrationPolicy.check_can_cancel(event, event.date - timedelta(days=3))

    def test_開始まで3日と1秒ならキャンセルできる(self):
        event = _make_event()
        RegistrationPolicy.check_can_cancel(event, event.date - timedelta(days=3, seconds=1))

    def test_開始前日はキャンセルできない(self):
        event = _make_event()
        with pytest.raises(TooLateToCancelError):
            RegistrationPolicy.check_can_cancel(event, event.date - timedelta(days=1))
