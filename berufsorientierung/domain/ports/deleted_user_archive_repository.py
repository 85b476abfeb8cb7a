"""削除済みユーザーアーカイブリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import DeletedUserArchive


class DeletedUserArchiveRepository(ABC):
    """削除済みユーザーアーカイブのインターフェース（追記のみ）."""

    @abstractmethod
    def add(self, archive: DeletedUserArchive) -> None:
        """アーカイブを追加する."""
        pass

    @abstractmethod
    def find_all(self) -> list[DeletedUserArchive]:
        """全てのアーカイブを削除日時の昇順で取得する."""
        pass
