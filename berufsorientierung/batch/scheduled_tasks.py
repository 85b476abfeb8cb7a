"""アカウント削除の定期実行 Lambda handler.

EventBridgeから毎日トリガーされ、削除予定日を迎えたアカウントを削除する。
あわせて登録締め切りを過ぎたイベント数を集計し、実行結果を
アクティビティログに記録する。
"""

import logging
import os
from datetime import datetime, timezone
from typing import Any

from berufsorientierung.application.use_cases import (
    CountExpiredRegistrationDeadlinesUseCase,
    EraseAccountUseCase,
    ProcessScheduledDeletionsUseCase,
)
from berufsorientierung.dependencies import Dependencies
from berufsorientierung.domain.entities import ActivityLogEntry
from berufsorientierung.domain.enums import ActivityActionType

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

DEFAULT_CRON_SCHEDULE = "cron(0 2 * * ? *)"


def handler(event: dict, context: Any) -> dict:
    """Lambda ハンドラー.

    Args:
        event: Lambda イベント（EventBridgeからのスケジュールイベント）
        context: Lambda コンテキスト

    Returns:
        dict: 実行結果
    """
    logger.info(f"Starting scheduled deletion run: event={event}")

    now = datetime.now(timezone.utc)
    unit_of_work = Dependencies.get_unit_of_work()

    try:
        result = ProcessScheduledDeletionsUseCase(
            unit_of_work, EraseAccountUseCase(unit_of_work)
        ).execute(now)
        expired_count = CountExpiredRegistrationDeadlinesUseCase(unit_of_work).execute(now)

        with unit_of_work as uow:
            uow.activity_log.append(
                ActivityLogEntry.record(
                    ActivityActionType.SYSTEM_CRON_DELETION,
                    now,
                    details={
                        "deleted_count": result.deleted_count,
                        "expired_registrations_count": expired_count,
                        "triggered_by": "cron",
                        "scheduled_time": os.environ.get("CRON_SCHEDULE", DEFAULT_CRON_SCHEDULE),
                    },
                )
            )
    except Exception as e:
        logger.exception(f"Scheduled deletion run failed: {e}")
        return {
            "statusCode": 500,
            "body": {
                "success": False,
                "error": str(e),
            },
        }

    logger.info(
        f"Scheduled deletion run completed: deleted={result.deleted_count}, "
        f"failed={len(result.failed_user_ids)}, expired_registrations={expired_count}"
    )
    return {
        "statusCode": 200,
        "body": {
            "success": True,
            "deleted_count": result.deleted_count,
            "failed_user_ids": [user_id.value for user_id in result.failed_user_ids],
            "expired_registrations_count": expired_count,
        },
    }
