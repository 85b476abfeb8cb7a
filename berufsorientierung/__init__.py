"""イベント参加登録とアカウント削除ライフサイクルのパッケージ."""
from . import domain

__all__ = ["domain"]
