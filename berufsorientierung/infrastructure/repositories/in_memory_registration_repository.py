"""インメモリ参加登録リポジトリ実装."""
from berufsorientierung.domain.entities import Registration
from berufsorientierung.domain.identifiers import EventId, RegistrationId, UserId
from berufsorientierung.domain.ports import RegistrationRepository
from berufsorientierung.domain.services import AlreadyRegisteredError

from .in_memory_store import InMemoryStore


class InMemoryRegistrationRepository(RegistrationRepository):
    """インメモリ参加登録リポジトリ（キーは (user_id, event_id)）."""

    def __init__(self, store: InMemoryStore) -> None:
        """初期化."""
        self._store = store

    @staticmethod
    def _key(user_id: UserId, event_id: EventId) -> tuple[str, str]:
        return (user_id.value, event_id.value)

    def add(self, registration: Registration) -> None:
        """新しい登録行を追加する."""
        key = self._key(registration.user_id, registration.event_id)
        if self._store.contains("registrations", key):
            raise AlreadyRegisteredError("Registration row already exists for this user and event")
        self._store.put("registrations", key, registration)

    def update(self, registration: Registration) -> None:
        """既存の登録行の状態を更新する."""
        key = self._key(registration.user_id, registration.event_id)
        if not self._store.contains("registrations", key):
            raise KeyError(f"Registration not found: {registration.registration_id}")
        self._store.put("registrations", key, registration)

    def find(self, user_id: UserId, event_id: EventId) -> Registration | None:
        """ユーザーとイベントの組で検索する."""
        return self._store.get("registrations", self._key(user_id, event_id))

    def find_by_id(self, registration_id: RegistrationId) -> Registration | None:
        """登録IDで検索する."""
        found = self._store.select(
            "registrations", lambda r: r.registration_id == registration_id
        )
        return found[0] if found else None

    def find_by_user(self, user_id: UserId) -> list[Registration]:
        """ユーザーの全登録を取得する."""
        return self._store.select("registrations", lambda r: r.user_id == user_id)

    def find_active_by_event(self, event_id: EventId) -> list[Registration]:
        """イベントのアクティブな登録を登録日時の昇順で取得する."""
        registrations = self._store.select(
            "registrations", lambda r: r.event_id == event_id and r.is_active
        )
        return sorted(registrations, key=lambda r: r.registered_at)

    def count_active(self, event_id: EventId) -> int:
        """イベントのアクティブな登録数を数える."""
        return sum(
            1 for r in self._store.registrations.values() if r.event_id == event_id and r.is_active
        )

    def exists_active(self, user_id: UserId, event_id: EventId) -> bool:
        """アクティブな登録があるか."""
        registration = self.find(user_id, event_id)
        return registration is not None and registration.is_active

    def delete(self, registration: Registration) -> None:
        """登録行を削除する."""
        self._store.remove("registrations", self._key(registration.user_id, registration.event_id))
