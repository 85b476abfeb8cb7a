"""インメモリユニットオブワーク実装."""
from __future__ import annotations

from berufsorientierung.domain.ports import UnitOfWork

from .in_memory_activity_log_repository import InMemoryActivityLogRepository
from .in_memory_admin_repository import InMemoryAdminRepository
from .in_memory_deleted_user_archive_repository import InMemoryDeletedUserArchiveRepository
from .in_memory_event_repository import InMemoryEventRepository
from .in_memory_pending_deletion_repository import InMemoryPendingDeletionRepository
from .in_memory_registration_repository import InMemoryRegistrationRepository
from .in_memory_review_repository import InMemoryReviewRepository
from .in_memory_store import InMemoryStore
from .in_memory_user_repository import InMemoryUserRepository


class InMemoryUnitOfWork(UnitOfWork):
    """インメモリユニットオブワーク.

    トランザクション中はストアのロックを保持するため、同じストアを共有する
    他のユニットオブワークとは直列に実行される。ロールバックはこのトランザクションで
    書き込んだ行だけを戻す。
    """

    def __init__(self, store: InMemoryStore | None = None, max_batch_size: int | None = None) -> None:
        """初期化."""
        self.store = store if store is not None else InMemoryStore()
        self.max_batch_size = max_batch_size
        self.users = InMemoryUserRepository(self.store)
        self.events = InMemoryEventRepository(self.store)
        self.registrations = InMemoryRegistrationRepository(self.store)
        self.pending_deletions = InMemoryPendingDeletionRepository(self.store)
        self.archive = InMemoryDeletedUserArchiveRepository(self.store)
        self.activity_log = InMemoryActivityLogRepository(self.store)
        self.admins = InMemoryAdminRepository(self.store)
        self.reviews = InMemoryReviewRepository(self.store)
        self._in_progress = False

    def begin(self) -> None:
        """トランザクションを開始する."""
        if self._in_progress:
            raise RuntimeError("Unit of work is already in progress")
        self.store.lock.acquire()
        self.store.start_undo_log()
        self._in_progress = True

    def commit(self) -> None:
        """コミットする."""
        if self._in_progress:
            self.store.discard_undo_log()
        self._finish()

    def rollback(self) -> None:
        """ロールバックする."""
        if self._in_progress:
            self.store.undo()
        self._finish()

    def _finish(self) -> None:
        if not self._in_progress:
            return
        self._in_progress = False
        self.store.lock.release()
