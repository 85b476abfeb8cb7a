"""列挙型モジュール."""
from .activity_action_type import ActivityActionType
from .event_status import EventStatus

__all__ = [
    "ActivityActionType",
    "EventStatus",
]
