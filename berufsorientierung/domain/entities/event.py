"""イベントエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from ..enums import EventStatus
from ..identifiers import EventId


@dataclass
class Event:
    """イベントエンティティ.

    登録の受付可否はステータス・締め切り・定員で決まる。
    max_participants が None の場合は定員なし。
    """

    event_id: EventId
    title: str
    date: datetime
    registration_deadline: datetime
    status: EventStatus = EventStatus.DRAFT
    end_date: datetime | None = None
    max_participants: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.title:
            raise ValueError("Event title cannot be empty")
        if self.max_participants is not None and self.max_participants < 1:
            raise ValueError("max_participants must be positive")
        if self.end_date is not None and self.end_date < self.date:
            raise ValueError("end_date must not be before date")

    def is_open(self) -> bool:
        """登録受付中のステータスか."""
        return self.status.is_open()

    def is_before_deadline(self, now: datetime) -> bool:
        """登録締め切り前（締め切り時刻ちょうどを含む）か."""
        return now <= self.registration_deadline

    def has_capacity(self, active_count: int) -> bool:
        """空きがあるか."""
        if self.max_participants is None:
            return True
        return active_count < self.max_participants

    def time_until_start(self, now: datetime) -> timedelta:
        """開始までの残り時間."""
        return self.date - now

    def has_taken_place(self, now: datetime) -> bool:
        """開催済みか."""
        return self.date <= now

