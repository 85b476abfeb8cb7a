"""参加登録のキャンセル情報."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Cancellation:
    """キャンセル状態（キャンセル日時と理由）.

    登録行がこの値を持たない間はアクティブとして扱う。
    """

    cancelled_at: datetime
    reason: str | None = None
