"""アカウント削除可否の判定結果."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DeletionEligibility:
    """アカウント削除可否."""

    eligible: bool
    reason: str | None = None
    eligible_after: datetime | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.eligible and self.eligible_after is None:
            raise ValueError("eligible_after is required when not eligible")

    @classmethod
    def immediate(cls) -> DeletionEligibility:
        """即時削除可能."""
        return cls(eligible=True)

    @classmethod
    def deferred(cls, eligible_after: datetime, reason: str) -> DeletionEligibility:
        """指定日以降に削除可能."""
        return cls(eligible=False, reason=reason, eligible_after=eligible_after)
