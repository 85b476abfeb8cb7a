"""レビューリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Review
from ..identifiers import ReviewId, UserId


class ReviewRepository(ABC):
    """レビューリポジトリのインターフェース."""

    @abstractmethod
    def add(self, review: Review) -> None:
        """レビューを追加する."""
        pass

    @abstractmethod
    def find_by_user(self, user_id: UserId) -> list[Review]:
        """ユーザーのレビューを取得する."""
        pass

    @abstractmethod
    def delete(self, review_id: ReviewId) -> None:
        """レビューを削除する."""
        pass
