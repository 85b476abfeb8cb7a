"""削除関連の値オブジェクト・エンティティのテスト."""
from datetime import datetime, timedelta, timezone

import pytest

from berufsorientierung.domain.entities import DeletedUserArchive, PendingDeletion, User
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.value_objects import DeletionEligibility, Email, ParticipatedEvent

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestDeletionEligibility:
    """DeletionEligibilityのテスト."""

    def test_削除不可なら削除可能日時が必須(self):
        with pytest.raises(ValueError):
            DeletionEligibility(eligible=False)

    def test_deferredは理由と日時を持つ(self):
        result = DeletionEligibility.deferred(NOW, "User has upcoming events")
        assert not result.eligible
        assert result.eligible_after == NOW


class TestParticipatedEvent:
    """ParticipatedEventのテスト."""

    def test_辞書のキーはeventId_title_date(self):
        event = ParticipatedEvent(EventId("event-001"), "Berufsinfotag", NOW)
        assert event.to_dict() == {
            "eventId": "event-001",
            "title": "Berufsinfotag",
            "date": "2025-06-01T12:00:00+00:00",
        }


class TestPendingDeletion:
    """PendingDeletionのテスト."""

    def test_予定日ちょうどで削除対象(self):
        pending = PendingDeletion(user_id=UserId("user-001"), deletion_date=NOW)
        assert pending.is_due(NOW)
        assert not pending.is_due(NOW - timedelta(seconds=1))

    def test_開始マーカー(self):
        pending = PendingDeletion(user_id=UserId("user-001"), deletion_date=NOW)
        assert not pending.is_erasure_in_progress()
        pending.mark_erasure_started(NOW)
        assert pending.is_erasure_in_progress()


class TestDeletedUserArchive:
    """DeletedUserArchiveのテスト."""

    def _make_user(self) -> User:
        return User(
            user_id=UserId("user-001"),
            email=Email("anna@example.com"),
            first_name="Anna",
            last_name="Schmidt",
            created_at=NOW - timedelta(days=365),
        )

    def test_参加実績がなければNone(self):
        archive = DeletedUserArchive.from_user(self._make_user(), [], NOW)
        assert archive.events_participated is None

    def test_氏名と登録日を引き継ぐ(self):
        participated = [ParticipatedEvent(EventId("event-001"), "Berufsinfotag", NOW)]
        archive = DeletedUserArchive.from_user(self._make_user(), participated, NOW)
        assert archive.first_name == "Anna"
        assert archive.last_name == "Schmidt"
        assert archive.registered_at == NOW - timedelta(days=365)
        assert archive.deleted_at == NOW
        assert archive.events_participated == tuple(participated)
