"""依存性注入コンテナのテスト."""
from unittest.mock import MagicMock, patch

from berufsorientierung.dependencies import Dependencies
from berufsorientierung.infrastructure.repositories import DynamoDBUnitOfWork, InMemoryUnitOfWork


class TestDependencies:
    """Dependenciesのテスト."""

    def setup_method(self):
        Dependencies.reset()

    def teardown_method(self):
        Dependencies.reset()

    def test_環境変数がなければインメモリ実装(self, monkeypatch):
        monkeypatch.delenv("USER_TABLE_NAME", raising=False)
        uow = Dependencies.get_unit_of_work()
        assert isinstance(uow, InMemoryUnitOfWork)

    def test_インメモリ実装は呼び出しごとに別インスタンスで同じストアを共有する(self, monkeypatch):
        monkeypatch.delenv("USER_TABLE_NAME", raising=False)
        first = Dependencies.get_unit_of_work()
        second = Dependencies.get_unit_of_work()
        assert first is not second
        assert first.store is second.store

    @patch("boto3.client", return_value=MagicMock())
    @patch("boto3.resource")
    def test_USER_TABLE_NAMEがあればDynamoDB実装(self, _mock_resource, _mock_client, monkeypatch):
        monkeypatch.setenv("USER_TABLE_NAME", "berufsorientierung-user")
        assert isinstance(Dependencies.get_unit_of_work(), DynamoDBUnitOfWork)

    def test_設定したユニットオブワークを返す(self):
        uow = InMemoryUnitOfWork()
        Dependencies.set_unit_of_work(uow)
        assert Dependencies.get_unit_of_work() is uow
