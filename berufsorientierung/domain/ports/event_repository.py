"""イベントリポジトリインターフェース."""
from abc import ABC, abstractmethod
from datetime import datetime

from ..entities import Event
from ..identifiers import EventId


class EventRepository(ABC):
    """イベントリポジトリのインターフェース."""

    @abstractmethod
    def save(self, event: Event) -> None:
        """イベントを保存する."""
        pass

    @abstractmethod
    def find_by_id(self, event_id: EventId) -> Event | None:
        """イベントIDで検索する."""
        pass

    @abstractmethod
    def count_expired_registration_deadlines(self, now: datetime) -> int:
        """受付中で登録締め切りを過ぎたイベント数を数える."""
        pass

    @abstractmethod
    def reserve_seat(self, event: Event) -> None:
        """席を1つ確保する.

        同じトランザクション内で定員を再確認する。満席なら
        EventFullError を送出する（DynamoDB実装ではコミット時）。
        """
        pass

    @abstractmethod
    def release_seat(self, event_id: EventId) -> None:
        """確保済みの席を1つ解放する（イベントが存在すること）."""
        pass
