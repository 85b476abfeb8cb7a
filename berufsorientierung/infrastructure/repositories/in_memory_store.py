"""インメモリストア."""
import copy
import threading
from collections.abc import Callable, Hashable

from berufsorientierung.domain.entities import (
    ActivityLogEntry,
    Admin,
    DeletedUserArchive,
    Event,
    PendingDeletion,
    Registration,
    Review,
    User,
)

# 取り消しログで「書き込み前は行が無かった」ことを表す
_MISSING = object()


class InMemoryStore:
    """インメモリリポジトリ群が共有するデータ.

    行の読み書きはコピーで行い、保存済みの行が呼び出し側から直接変更されないようにする。
    ユニットオブワークはトランザクション中 lock を保持し、書き込んだ行の
    変更前の値を取り消しログに残してロールバックに使う。
    """

    def __init__(self) -> None:
        """初期化."""
        self.lock = threading.RLock()
        self.users: dict[str, User] = {}
        self.events: dict[str, Event] = {}
        self.registrations: dict[tuple[str, str], Registration] = {}
        self.pending_deletions: dict[str, PendingDeletion] = {}
        self.archive: dict[str, DeletedUserArchive] = {}
        self.activity_log: dict[str, ActivityLogEntry] = {}
        self.admins: dict[str, Admin] = {}
        self.reviews: dict[str, Review] = {}
        # 入れ子のトランザクションごとの取り消しログ
        self._undo_logs: list[dict[tuple[str, Hashable], object]] = []

    def get(self, table: str, key: Hashable):
        """行のコピーを取得する（無ければ None）."""
        row = getattr(self, table).get(key)
        return copy.deepcopy(row) if row is not None else None

    def select(self, table: str, predicate: Callable[[object], bool]) -> list:
        """条件に合う行のコピーを取得する."""
        return [copy.deepcopy(row) for row in getattr(self, table).values() if predicate(row)]

    def contains(self, table: str, key: Hashable) -> bool:
        """行が存在するか."""
        return key in getattr(self, table)

    def put(self, table: str, key: Hashable, row: object) -> None:
        """行のコピーを書き込む."""
        self._remember(table, key)
        getattr(self, table)[key] = copy.deepcopy(row)

    def remove(self, table: str, key: Hashable) -> None:
        """行を削除する（無ければ何もしない）."""
        self._remember(table, key)
        getattr(self, table).pop(key, None)

    def start_undo_log(self) -> None:
        """取り消しログの記録を開始する."""
        self._undo_logs.append({})

    def discard_undo_log(self) -> None:
        """取り消しログを捨てて変更を確定する.

        外側のトランザクションがあれば、そのロールバックで戻せるよう引き継ぐ。
        """
        undo_log = self._undo_logs.pop()
        if self._undo_logs:
            outer = self._undo_logs[-1]
            for undo_key, previous in undo_log.items():
                outer.setdefault(undo_key, previous)

    def undo(self) -> None:
        """取り消しログに残した変更前の値に戻す."""
        for (table, key), previous in self._undo_logs.pop().items():
            rows = getattr(self, table)
            if previous is _MISSING:
                rows.pop(key, None)
            else:
                rows[key] = previous

    def _remember(self, table: str, key: Hashable) -> None:
        # 保存済みの行は置き換えられるだけで、その場では変更されない
        if not self._undo_logs:
            return
        self._undo_logs[-1].setdefault((table, key), getattr(self, table).get(key, _MISSING))
