"""参加登録状況取得ユースケース."""
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.ports import UnitOfWork


class GetRegistrationStatusUseCase:
    """参加登録状況取得ユースケース（読み取り専用）."""

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def count_active(self, event_id: EventId) -> int:
        """イベントのアクティブな登録数を返す."""
        with self._unit_of_work as uow:
            return uow.registrations.count_active(event_id)

    def is_active(self, user_id: UserId, event_id: EventId) -> bool:
        """ユーザーがイベントにアクティブに登録しているか."""
        with self._unit_of_work as uow:
            return uow.registrations.exists_active(user_id, event_id)
