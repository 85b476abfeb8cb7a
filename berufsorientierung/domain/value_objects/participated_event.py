"""アーカイブに残す参加イベント情報."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..identifiers import EventId


@dataclass(frozen=True)
class ParticipatedEvent:
    """実際に参加したイベント（アクティブな登録かつ開催済み）."""

    event_id: EventId
    title: str
    date: datetime

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "eventId": self.event_id.value,
            "title": self.title,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ParticipatedEvent:
        """辞書から復元する."""
        return cls(
            event_id=EventId(data["eventId"]),
            title=data["title"],
            date=datetime.fromisoformat(data["date"]),
        )
