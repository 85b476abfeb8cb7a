"""管理者権限エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import UserId


@dataclass
class Admin:
    """ユーザーに付与された管理者権限."""

    user_id: UserId
    created_by: UserId | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
