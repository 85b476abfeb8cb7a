"""DynamoDBRegistrationRepositoryのテスト."""
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

from berufsorientierung.domain.entities import Registration
from berufsorientierung.domain.identifiers import EventId, RegistrationId, UserId
from berufsorientierung.domain.services import AlreadyRegisteredError
from berufsorientierung.infrastructure.repositories import DynamoDBRegistrationRepository

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def _make_repo() -> DynamoDBRegistrationRepository:
    repo = DynamoDBRegistrationRepository()
    repo._table = MagicMock()
    repo._table_name = "registration"
    repo._transaction = MagicMock()
    return repo


def _make_registration() -> Registration:
    return Registration.create(
        UserId("user-001"), EventId("event-001"), NOW, additional_data={"school": "Gymnasium"}
    )


class TestDynamoDBRegistrationRepository:
    """DynamoDBRegistrationRepositoryのテスト."""

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_addは同じ組の行がないことを条件にする(self):
        repo = _make_repo()
        repo.add(_make_registration())

        kwargs = repo._transaction.put.call_args.kwargs
        assert kwargs["condition"] == "attribute_not_exists(user_id)"
        assert isinstance(kwargs["conflict_error"], AlreadyRegisteredError)

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_再有効化はキャンセル済みの行であることを条件にする(self):
        repo = _make_repo()
        registration = _make_registration()
        registration.cancel(None, NOW)
        registration.reactivate(NOW)

        repo.update(registration)

        args, kwargs = repo._transaction.put.call_args
        assert "cancelled_at" not in args[1]
        assert kwargs["condition"] == "attribute_exists(cancelled_at)"
        assert isinstance(kwargs["conflict_error"], AlreadyRegisteredError)

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_キャンセルはアクティブな行であることを条件にする(self):
        repo = _make_repo()
        registration = _make_registration()
        registration.cancel("krank", NOW)

        repo.update(registration)

        args, kwargs = repo._transaction.put.call_args
        assert args[1]["cancelled_at"] == NOW.isoformat()
        assert args[1]["cancellation_reason"] == "krank"
        assert kwargs["condition"] == "attribute_exists(user_id) AND attribute_not_exists(cancelled_at)"

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_count_activeは複数ページを合計する(self):
        repo = _make_repo()
        repo._table.query.side_effect = [
            {"Count": 3, "LastEvaluatedKey": {"user_id": "u3", "event_id": "event-001"}},
            {"Count": 2},
        ]

        assert repo.count_active(EventId("event-001")) == 5
        assert repo._table.query.call_count == 2
        assert repo._table.query.call_args.kwargs["IndexName"] == "event_id-index"

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_find_by_userは複数ページを結合する(self):
        repo = _make_repo()
        item = DynamoDBRegistrationRepository._to_dynamodb_item(_make_registration())
        repo._table.query.side_effect = [
            {"Items": [item], "LastEvaluatedKey": {"user_id": "user-001", "event_id": "event-001"}},
            {"Items": [{**item, "event_id": "event-002"}]},
        ]

        results = repo.find_by_user(UserId("user-001"))
        assert [r.event_id.value for r in results] == ["event-001", "event-002"]

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_find_by_idはインデックスで探してキーで読み直す(self):
        repo = _make_repo()
        registration = _make_registration()
        item = DynamoDBRegistrationRepository._to_dynamodb_item(registration)
        repo._table.query.return_value = {"Items": [item]}
        repo._table.get_item.return_value = {"Item": item}

        found = repo.find_by_id(registration.registration_id)

        assert found == registration
        assert repo._table.query.call_args.kwargs["IndexName"] == "registration_id-index"
        get_kwargs = repo._table.get_item.call_args.kwargs
        assert get_kwargs["Key"] == {"user_id": "user-001", "event_id": "event-001"}
        assert get_kwargs["ConsistentRead"] is True

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_find_by_idで見つからなければNone(self):
        repo = _make_repo()
        repo._table.query.return_value = {"Items": []}
        assert repo.find_by_id(RegistrationId("registration-999")) is None

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_イベントのアクティブな登録は登録日時の昇順(self):
        repo = _make_repo()
        late = Registration.create(UserId("user-001"), EventId("event-001"), NOW)
        early = Registration.create(UserId("user-002"), EventId("event-001"), NOW - timedelta(days=2))
        repo._table.query.side_effect = [
            {
                "Items": [DynamoDBRegistrationRepository._to_dynamodb_item(late)],
                "LastEvaluatedKey": {"user_id": "user-001", "event_id": "event-001"},
            },
            {"Items": [DynamoDBRegistrationRepository._to_dynamodb_item(early)]},
        ]

        results = repo.find_active_by_event(EventId("event-001"))

        assert [r.user_id.value for r in results] == ["user-002", "user-001"]
        assert repo._table.query.call_args.kwargs["IndexName"] == "event_id-index"

    @patch.object(DynamoDBRegistrationRepository, "__init__", lambda self: None)
    def test_キャンセル済みの行がなければexists_activeはFalse(self):
        repo = _make_repo()
        registration = _make_registration()
        registration.cancel(None, NOW)
        repo._table.get_item.return_value = {
            "Item": DynamoDBRegistrationRepository._to_dynamodb_item(registration)
        }

        assert repo.exists_active(UserId("user-001"), EventId("event-001")) is False

    def test_キャンセル済みの行を復元できる(self):
        registration = _make_registration()
        registration.cancel("krank", NOW)

        item = DynamoDBRegistrationRepository._to_dynamodb_item(registration)
        restored = DynamoDBRegistrationRepository._from_dynamodb_item(item)

        assert item["additional_data"] == '{"school": "Gymnasium"}'
        assert restored == registration
