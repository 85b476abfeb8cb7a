"""インメモリ削除済みユーザーアーカイブリポジトリ実装."""
from berufsorientierung.domain.entities import DeletedUserArchive
from berufsorientierung.domain.ports import DeletedUserArchiveRepository

from .in_memory_store import InMemoryStore


class InMemoryDeletedUserArchiveRepository(DeletedUserArchiveRepository):
    """インメモリ削除済みユーザーアーカイブ."""

    def __init__(self, store: InMemoryStore) -> None:
        """初期化."""
        self._store = store

    def add(self, archive: DeletedUserArchive) -> None:
        """アーカイブを追加する."""
        self._store.put("archive", archive.archive_id.value, archive)

    def find_all(self) -> list[DeletedUserArchive]:
        """全てのアーカイブを削除日時の昇順で取得する."""
        return sorted(self._store.select("archive", lambda a: True), key=lambda a: a.deleted_at)
