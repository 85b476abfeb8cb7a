"""インメモリ削除予約リポジトリ実装."""
from datetime import datetime

from berufsorientierung.domain.entities import PendingDeletion
from berufsorientierung.domain.identifiers import UserId
from berufsorientierung.domain.ports import PendingDeletionRepository
from berufsorientierung.domain.services import AlreadyScheduledError

from .in_memory_store import InMemoryStore


class InMemoryPendingDeletionRepository(PendingDeletionRepository):
    """インメモリ削除予約リポジトリ."""

    def __init__(self, store: InMemoryStore) -> None:
        """初期化."""
        self._store = store

    def add(self, pending: PendingDeletion) -> None:
        """削除予約を追加する."""
        if self._store.contains("pending_deletions", pending.user_id.value):
            raise AlreadyScheduledError(f"User deletion is already scheduled: {pending.user_id}")
        self._store.put("pending_deletions", pending.user_id.value, pending)

    def save(self, pending: PendingDeletion) -> None:
        """削除予約を保存する."""
        self._store.put("pending_deletions", pending.user_id.value, pending)

    def find_by_user(self, user_id: UserId) -> PendingDeletion | None:
        """ユーザーIDで検索する."""
        return self._store.get("pending_deletions", user_id.value)

    def find_due(self, now: datetime) -> list[PendingDeletion]:
        """削除予定日を迎えた予約を予定日の昇順で取得する."""
        return [p for p in self.find_all() if p.is_due(now)]

    def find_all(self) -> list[PendingDeletion]:
        """全ての予約を予定日の昇順で取得する."""
        pendings = self._store.select("pending_deletions", lambda p: True)
        return sorted(pendings, key=lambda p: p.deletion_date)

    def delete(self, user_id: UserId) -> None:
        """削除予約を削除する."""
        self._store.remove("pending_deletions", user_id.value)
