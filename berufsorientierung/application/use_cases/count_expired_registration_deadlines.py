"""登録締め切り超過イベント数の集計ユースケース."""
from datetime import datetime, timezone

from berufsorientierung.domain.ports import UnitOfWork


class CountExpiredRegistrationDeadlinesUseCase:
    """受付中のまま登録締め切りを過ぎたイベント数を数える（統計用、読み取りのみ）."""

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(self, now: datetime | None = None) -> int:
        """集計する."""
        now = now or datetime.now(timezone.utc)
        with self._unit_of_work as uow:
            return uow.events.count_expired_registration_deadlines(now)
