"""ユニットオブワーク（トランザクション境界）インターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from .activity_log_repository import ActivityLogRepository
from .admin_repository import AdminRepository
from .deleted_user_archive_repository import DeletedUserArchiveRepository
from .event_repository import EventRepository
from .pending_deletion_repository import PendingDeletionRepository
from .registration_repository import RegistrationRepository
from .review_repository import ReviewRepository
from .user_repository import UserRepository


class TransactionFailedError(Exception):
    """トランザクションが中断されたエラー（書き込みは一切反映されない）."""

    pass


class TransactionTooLargeError(TransactionFailedError):
    """1トランザクションの書き込み上限を超えたエラー."""

    pass


class UnitOfWork(ABC):
    """複数リポジトリへの書き込みを1つの原子的な単位にまとめる.

    with ブロックを正常に抜けるとコミット、例外で抜けるとロールバックする。
    例外はそのまま呼び出し元へ伝播する。
    """

    users: UserRepository
    events: EventRepository
    registrations: RegistrationRepository
    pending_deletions: PendingDeletionRepository
    archive: DeletedUserArchiveRepository
    activity_log: ActivityLogRepository
    admins: AdminRepository
    reviews: ReviewRepository

    # 1トランザクションで扱える書き込み数の上限（None は無制限）
    max_batch_size: int | None = None

    def __enter__(self) -> UnitOfWork:
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def begin(self) -> None:
        """トランザクションを開始する."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """コミットする."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """ロールバックする."""
        pass
