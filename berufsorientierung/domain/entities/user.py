"""ユーザーエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import UserId
from ..value_objects import Email


@dataclass
class User:
    """ユーザーエンティティ."""

    user_id: UserId
    email: Email
    first_name: str
    last_name: str
    is_blocked: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def block(self) -> None:
        """アカウントをブロックする."""
        self.is_blocked = True
        self.updated_at = datetime.now(timezone.utc)
