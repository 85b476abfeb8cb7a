"""参加登録リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Registration
from ..identifiers import EventId, RegistrationId, UserId


class RegistrationRepository(ABC):
    """参加登録リポジトリのインターフェース."""

    @abstractmethod
    def add(self, registration: Registration) -> None:
        """新しい登録行を追加する（同じユーザー・イベントの行が無いこと）."""
        pass

    @abstractmethod
    def update(self, registration: Registration) -> None:
        """既存の登録行の状態（キャンセル・再有効化）を更新する."""
        pass

    @abstractmethod
    def find(self, user_id: UserId, event_id: EventId) -> Registration | None:
        """ユーザーとイベントの組で検索する（キャンセル済みを含む）."""
        pass

    @abstractmethod
    def find_by_id(self, registration_id: RegistrationId) -> Registration | None:
        """登録IDで検索する（キャンセル済みを含む）."""
        pass

    @abstractmethod
    def find_by_user(self, user_id: UserId) -> list[Registration]:
        """ユーザーの全登録を取得する（キャンセル済みを含む）."""
        pass

    @abstractmethod
    def find_active_by_event(self, event_id: EventId) -> list[Registration]:
        """イベントのアクティブな登録を登録日時の昇順で取得する."""
        pass

    @abstractmethod
    def count_active(self, event_id: EventId) -> int:
        """イベントのアクティブな登録数を数える."""
        pass

    @abstractmethod
    def exists_active(self, user_id: UserId, event_id: EventId) -> bool:
        """アクティブな登録があるか."""
        pass

    @abstractmethod
    def delete(self, registration: Registration) -> None:
        """登録行を削除する."""
        pass
