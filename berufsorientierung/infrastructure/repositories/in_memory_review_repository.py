"""インメモリレビューリポジトリ実装."""
from berufsorientierung.domain.entities import Review
from berufsorientierung.domain.identifiers import ReviewId, UserId
from berufsorientierung.domain.ports import ReviewRepository

from .in_memory_store import InMemoryStore


class InMemoryReviewRepository(ReviewRepository):
    """インメモリレビューリポジトリ."""

    def __init__(self, store: InMemoryStore) -> None:
        """初期化."""
        self._store = store

    def add(self, review: Review) -> None:
        """レビューを追加する."""
        self._store.put("reviews", review.review_id.value, review)

    def find_by_user(self, user_id: UserId) -> list[Review]:
        """ユーザーのレビューを取得する."""
        return self._store.select("reviews", lambda r: r.user_id == user_id)

    def delete(self, review_id: ReviewId) -> None:
        """レビューを削除する."""
        self._store.remove("reviews", review_id.value)
