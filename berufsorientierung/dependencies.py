"""依存性注入コンテナ."""
import os

from berufsorientierung.domain.ports import UnitOfWork
from berufsorientierung.infrastructure.repositories import InMemoryStore, InMemoryUnitOfWork


def _use_dynamodb() -> bool:
    """DynamoDBを使用するか判定する."""
    # USER_TABLE_NAME が設定されていればDynamoDBを使用
    return os.environ.get("USER_TABLE_NAME") is not None


class Dependencies:
    """依存性を管理するコンテナ.

    USER_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
    そうでない場合はプロセス内で共有するインメモリストアを使用（ローカル開発・テスト用）。
    """

    _store: InMemoryStore | None = None
    _unit_of_work: UnitOfWork | None = None

    @classmethod
    def get_unit_of_work(cls) -> UnitOfWork:
        """ユニットオブワークを取得する.

        インメモリ実装ではスレッドごとに別インスタンスが必要なため、
        設定されていない限り呼び出しごとに新しく作る。
        """
        if cls._unit_of_work is not None:
            return cls._unit_of_work
        if _use_dynamodb():
            from berufsorientierung.infrastructure.repositories import DynamoDBUnitOfWork

            return DynamoDBUnitOfWork()
        return InMemoryUnitOfWork(cls.get_store())

    @classmethod
    def get_store(cls) -> InMemoryStore:
        """インメモリストアを取得する."""
        if cls._store is None:
            cls._store = InMemoryStore()
        return cls._store

    @classmethod
    def set_unit_of_work(cls, unit_of_work: UnitOfWork) -> None:
        """ユニットオブワークを設定する（テスト用）."""
        cls._unit_of_work = unit_of_work

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._store = None
        cls._unit_of_work = None
