"""削除済みユーザーアーカイブエンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..identifiers import ArchiveId
from ..value_objects import ParticipatedEvent
from .user import User


@dataclass(frozen=True)
class DeletedUserArchive:
    """削除時に残す最小限の記録.

    events_participated は参加実績がない場合 None（空リストにはしない）。
    """

    archive_id: ArchiveId
    first_name: str
    last_name: str
    registered_at: datetime
    deleted_at: datetime
    events_participated: tuple[ParticipatedEvent, ...] | None = None

    @classmethod
    def from_user(
        cls,
        user: User,
        participated: list[ParticipatedEvent],
        deleted_at: datetime,
    ) -> DeletedUserArchive:
        """ユーザーからアーカイブを作成する."""
        return cls(
            archive_id=ArchiveId.generate(),
            first_name=user.first_name,
            last_name=user.last_name,
            registered_at=user.created_at,
            deleted_at=deleted_at,
            events_participated=tuple(participated) if participated else None,
        )
