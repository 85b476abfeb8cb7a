"""参加登録エンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..identifiers import EventId, RegistrationId, UserId
from ..value_objects import Cancellation


@dataclass
class Registration:
    """ユーザーとイベントの参加登録.

    (user_id, event_id) につき1行のみ存在する。キャンセルしても行は残り、
    再登録時は同じ行を再有効化する。
    """

    registration_id: RegistrationId
    user_id: UserId
    event_id: EventId
    registered_at: datetime
    additional_data: dict | None = None
    cancellation: Cancellation | None = None

    @classmethod
    def create(
        cls,
        user_id: UserId,
        event_id: EventId,
        now: datetime,
        additional_data: dict | None = None,
    ) -> Registration:
        """新しい参加登録を作成する."""
        return cls(
            registration_id=RegistrationId.generate(),
            user_id=user_id,
            event_id=event_id,
            registered_at=now,
            additional_data=additional_data,
        )

    @property
    def is_active(self) -> bool:
        """アクティブ（未キャンセル）か."""
        return self.cancellation is None

    @property
    def cancelled_at(self) -> datetime | None:
        """キャンセル日時."""
        return self.cancellation.cancelled_at if self.cancellation else None

    @property
    def cancellation_reason(self) -> str | None:
        """キャンセル理由."""
        return self.cancellation.reason if self.cancellation else None

    def cancel(self, reason: str | None, now: datetime) -> None:
        """キャンセルする."""
        if not self.is_active:
            raise ValueError("Registration is already cancelled")
        self.cancellation = Cancellation(cancelled_at=now, reason=reason)

    def reactivate(self, now: datetime, additional_data: dict | None = None) -> None:
        """キャンセル済みの登録を再有効化する."""
        if self.is_active:
            raise ValueError("Registration is already active")
        self.cancellation = None
        self.registered_at = now
        if additional_data is not None:
            self.additional_data = additional_data
