"""ユーザーリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import User
from ..identifiers import UserId


class UserRepository(ABC):
    """ユーザーリポジトリのインターフェース."""

    @abstractmethod
    def save(self, user: User) -> None:
        """ユーザーを保存する."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索する."""
        pass

    @abstractmethod
    def block(self, user_id: UserId) -> None:
        """ユーザーをブロックする."""
        pass

    @abstractmethod
    def delete(self, user_id: UserId) -> None:
        """ユーザーを削除する."""
        pass
