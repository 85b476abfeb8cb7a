"""インメモリアクティビティログリポジトリ実装."""
from berufsorientierung.domain.entities import ActivityLogEntry
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import ActivityLogRepository

from .in_memory_store import InMemoryStore


class InMemoryActivityLogRepository(ActivityLogRepository):
    """インメモリアクティビティログ."""

    def __init__(self, store: InMemoryStore) -> None:
        """初期化."""
        self._store = store

    def append(self, entry: ActivityLogEntry) -> None:
        """ログ行を追記する."""
        self._store.put("activity_log", entry.log_id.value, entry)

    def find_by_user(self, user_id: UserId) -> list[ActivityLogEntry]:
        """ユーザーに紐づくログ行を取得する."""
        return self._store.select("activity_log", lambda e: e.user_id == user_id)

    def detach_user(self, entry: ActivityLogEntry) -> None:
        """ログ行からユーザー参照を外す."""
        stored = self._store.get("activity_log", entry.log_id.value)
        if stored is not None:
            stored.detach_user()
            self._store.put("activity_log", entry.log_id.value, stored)
