"""イベントステータスの列挙型."""
from enum import Enum


class EventStatus(str, Enum):
    """イベントステータス."""

    DRAFT = "draft"
    ACTIVE = "active"
    CANCELLED = "cancelled"

    def is_open(self) -> bool:
        """参加登録を受け付ける状態か."""
        return self == EventStatus.ACTIVE
