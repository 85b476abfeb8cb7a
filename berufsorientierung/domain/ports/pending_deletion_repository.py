"""削除予約リポジトリインターフェース."""
from abc import ABC, abstractmethod
from datetime import datetime

from ..entities import PendingDeletion
from ..identifiers import UserId


class PendingDeletionRepository(ABC):
    """削除予約リポジトリのインターフェース."""

    @abstractmethod
    def add(self, pending: PendingDeletion) -> None:
        """削除予約を追加する.

        既に同じユーザーの予約がある場合は AlreadyScheduledError を送出する。
        """
        pass

    @abstractmethod
    def save(self, pending: PendingDeletion) -> None:
        """削除予約を保存する（上書き）."""
        pass

    @abstractmethod
    def find_by_user(self, user_id: UserId) -> PendingDeletion | None:
        """ユーザーIDで検索する."""
        pass

    @abstractmethod
    def find_due(self, now: datetime) -> list[PendingDeletion]:
        """削除予定日を迎えた予約を予定日の昇順で取得する."""
        pass

    @abstractmethod
    def find_all(self) -> list[PendingDeletion]:
        """全ての予約を予定日の昇順で取得する."""
        pass

    @abstractmethod
    def delete(self, user_id: UserId) -> None:
        """削除予約を削除する."""
        pass
