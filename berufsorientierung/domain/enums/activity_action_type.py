"""アクティビティログのアクション種別."""
from enum import Enum


class ActivityActionType(str, Enum):
    """アクティビティログに記録するアクション."""

    REGISTRATION_CREATE = "registration_create"
    REGISTRATION_CANCEL = "registration_cancel"
    USER_DELETION_SCHEDULED = "user_deletion_scheduled"
    USER_DELETED = "user_deleted"
    SYSTEM_CRON_DELETION = "system_cron_deletion"
