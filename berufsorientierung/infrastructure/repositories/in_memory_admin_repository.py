"""インメモリ管理者リポジトリ実装."""
from berufsorientierung.domain.entities import Admin
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import AdminRepository

from .in_memory_store import InMemoryStore


class InMemoryAdminRepository(AdminRepository):
    """インメモリ管理者リポジトリ."""

    def __init__(self, store: InMemoryStore) -> None:
        """初期化."""
        self._store = store

    def add(self, admin: Admin) -> None:
        """管理者権限を付与する."""
        self._store.put("admins", admin.user_id.value, admin)

    def exists(self, user_id: UserId) -> bool:
        """管理者権限があるか."""
        return self._store.contains("admins", user_id.value)

    def remove(self, user_id: UserId) -> None:
        """管理者権限を外す."""
        self._store.remove("admins", user_id.value)
