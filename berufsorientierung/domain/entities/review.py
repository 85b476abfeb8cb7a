"""イベントレビューエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import EventId, ReviewId, UserId


@dataclass
class Review:
    """ユーザーが投稿したイベントレビュー."""

    review_id: ReviewId
    event_id: EventId
    user_id: UserId
    rating: int
    comment: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """バリデーション."""
        if not 1 <= self.rating <= 10:
            raise ValueError("rating must be between 1 and 10")
