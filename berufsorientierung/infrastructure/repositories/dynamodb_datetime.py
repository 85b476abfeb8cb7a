"""DynamoDB の日時属性変換."""
from datetime import datetime, timezone


def to_dynamodb_datetime(value: datetime) -> str:
    """日時を UTC の ISO 8601 文字列にする.

    DynamoDB は文字列を辞書順で比較するため、条件式で大小比較する属性は
    全て同じオフセットで保存する必要がある。タイムゾーンなしの日時は UTC とみなす。
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def from_dynamodb_datetime(value: str) -> datetime:
    """ISO 8601 文字列から日時を復元する."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed
