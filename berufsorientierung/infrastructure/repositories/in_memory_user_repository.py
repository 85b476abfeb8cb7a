"""インメモリユーザーリポジトリ実装."""
from berufsorientierung.domain.entities import User
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import UserRepository

from .in_memory_store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """インメモリユーザーリポジトリ."""

    def __init__(self, store: InMemoryStore) -> None:
        """初期化."""
        self._store = store

    def save(self, user: User) -> None:
        """ユーザーを保存する."""
        self._store.put("users", user.user_id.value, user)

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索する."""
        return self._store.get("users", user_id.value)

    def block(self, user_id: UserId) -> None:
        """ユーザーをブロックする."""
        user = self._store.get("users", user_id.value)
        if user is None:
            raise KeyError(f"User not found: {user_id}")
        user.block()
        self._store.put("users", user_id.value, user)

    def delete(self, user_id: UserId) -> None:
        """ユーザーを削除する."""
        self._store.remove("users", user_id.value)
