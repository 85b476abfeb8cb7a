"""インメモリイベントリポジトリ実装."""
from datetime import datetime

from berufsorientierung.domain.entities import Event
from berufsorientierung.domain.enums import EventStatus
from berufsorientierung.domain.identifiers import EventId
from berufsorientierung.domain.ports import EventRepository
from berufsorientierung.domain.services import EventFullError

from .in_memory_store import InMemoryStore


class InMemoryEventRepository(EventRepository):
    """インメモリイベントリポジトリ.

    アクティブ登録数は登録テーブルから都度数えるため、席の解放は何もしない。
    """

    def __init__(self, store: InMemoryStore) -> None:
        """初期化."""
        self._store = store

    def save(self, event: Event) -> None:
        """イベントを保存する."""
        self._store.put("events", event.event_id.value, event)

    def find_by_id(self, event_id: EventId) -> Event | None:
        """イベントIDで検索する."""
        return self._store.get("events", event_id.value)

    def count_expired_registration_deadlines(self, now: datetime) -> int:
        """受付中で登録締め切りを過ぎたイベント数を数える."""
        return sum(
            1
            for event in self._store.events.values()
            if event.status == EventStatus.ACTIVE and event.registration_deadline < now
        )

    def reserve_seat(self, event: Event) -> None:
        """席を1つ確保する."""
        active_count = sum(
            1
            for registration in self._store.registrations.values()
            if registration.event_id == event.event_id and registration.is_active
        )
        if not event.has_capacity(active_count):
            raise EventFullError("Event is full, no available spots")

    def release_seat(self, event_id: EventId) -> None:
        """確保済みの席を1つ解放する."""
        pass
