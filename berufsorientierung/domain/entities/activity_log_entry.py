"""アクティビティログエンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..enums import ActivityActionType
from ..identifiers import ActivityLogId, UserId


@dataclass
class ActivityLogEntry:
    """追記専用の監査ログ行.

    user_id は匿名・システム操作や削除済みユーザーの場合 None。
    """

    log_id: ActivityLogId
    action_type: ActivityActionType
    timestamp: datetime
    user_id: UserId | None = None
    details: dict | None = None
    ip_address: str | None = None

    @classmethod
    def record(
        cls,
        action_type: ActivityActionType,
        now: datetime,
        user_id: UserId | None = None,
        details: dict | None = None,
        ip_address: str | None = None,
    ) -> ActivityLogEntry:
        """新しいログ行を作成する."""
        return cls(
            log_id=ActivityLogId.generate(),
            action_type=action_type,
            timestamp=now,
            user_id=user_id,
            details=details,
            ip_address=ip_address,
        )

    def detach_user(self) -> None:
        """ユーザーへの参照を外す."""
        self.user_id = None
