"""アカウント削除ドメインサービス."""
from datetime import datetime, timedelta

from ..value_objects import DeletionEligibility


class AlreadyEligibleError(Exception):
    """既に即時削除できるため予約不要なエラー."""

    pass


class AlreadyScheduledError(Exception):
    """既に削除予約があるエラー."""

    pass


class AccountDeletionService:
    """アカウント削除サービス.

    最後の参加イベントから RETENTION_DAYS 日経過するまでは削除できない。
    """

    RETENTION_DAYS = 28

    @staticmethod
    def evaluate(event_dates: list[datetime], now: datetime) -> DeletionEligibility:
        """アクティブな登録のイベント日時から削除可否を判定する.

        Args:
            event_dates: アクティブな登録のイベント日時
            now: 判定時刻

        Returns:
            削除可否
        """
        if not event_dates:
            return DeletionEligibility.immediate()

        retention = timedelta(days=AccountDeletionService.RETENTION_DAYS)

        upcoming = [d for d in event_dates if d > now]
        if upcoming:
            return DeletionEligibility.deferred(
                eligible_after=max(upcoming) + retention,
                reason="User has upcoming events",
            )

        last_event_date = max(event_dates)
        elapsed = now - last_event_date
        if elapsed >= retention:
            return DeletionEligibility.immediate()

        return DeletionEligibility.deferred(
            eligible_after=last_event_date + retention,
            reason=(
                f"Only {elapsed.days} days passed since last event "
                f"(required: {AccountDeletionService.RETENTION_DAYS})"
            ),
        )
