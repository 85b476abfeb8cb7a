"""アクティビティログリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import ActivityLogEntry
from ..identifiers import UserId


class ActivityLogRepository(ABC):
    """アクティビティログのインターフェース.

    ログ行は削除しない。ユーザー削除時は参照のみを外す。
    """

    @abstractmethod
    def append(self, entry: ActivityLogEntry) -> None:
        """ログ行を追記する."""
        pass

    @abstractmethod
    def find_by_user(self, user_id: UserId) -> list[ActivityLogEntry]:
        """ユーザーに紐づくログ行を取得する."""
        pass

    @abstractmethod
    def detach_user(self, entry: ActivityLogEntry) -> None:
        """ログ行からユーザー参照を外す."""
        pass
