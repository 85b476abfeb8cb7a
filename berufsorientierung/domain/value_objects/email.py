"""メールアドレス値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Email:
    """ユーザーの連絡先メールアドレス.

    前後の空白を除き小文字に正規化して保持する。
    """

    value: str

    _PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")

    def __post_init__(self) -> None:
        """正規化とバリデーション."""
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise ValueError("Email is required")
        if not self._PATTERN.match(normalized):
            raise ValueError(f"Invalid email address: {self.value!r}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
