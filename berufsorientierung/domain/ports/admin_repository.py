"""管理者リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Admin
from ..identifiers import UserId


class AdminRepository(ABC):
    """管理者権限リポジトリのインターフェース."""

    @abstractmethod
    def add(self, admin: Admin) -> None:
        """管理者権限を付与する."""
        pass

    @abstractmethod
    def exists(self, user_id: UserId) -> bool:
        """管理者権限があるか."""
        pass

    @abstractmethod
    def remove(self, user_id: UserId) -> None:
        """管理者権限を外す."""
        pass
