"""削除予約エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import UserId


@dataclass
class PendingDeletion:
    """ユーザーごとの削除予約（1ユーザー1件）.

    erasure_started_at は削除処理を分割実行している途中であることを示す。
    """

    user_id: UserId
    deletion_date: datetime
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    erasure_started_at: datetime | None = None

    def is_due(self, now: datetime) -> bool:
        """削除予定日を迎えているか."""
        return self.deletion_date <= now

    def is_erasure_in_progress(self) -> bool:
        """削除処理が途中まで進んでいるか."""
        return self.erasure_started_at is not None

    def mark_erasure_started(self, now: datetime) -> None:
        """削除処理の開始を記録する."""
        self.erasure_started_at = now
