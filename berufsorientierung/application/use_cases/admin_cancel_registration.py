"""管理者による参加登録キャンセルユースケース."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from berufsorientierung.domain.entities import ActivityLogEntry, Registration
from berufsorientierung.domain.enums import ActivityActionType
from berufsorientierung.domain.identifiers import RegistrationId, UserId
from berufsorientierung.domain.ports import UnitOfWork

from .cancel_registration import RegistrationNotFoundError

logger = logging.getLogger(__name__)

MIN_REASON_LENGTH = 5


class AdminPermissionError(Exception):
    """管理者権限がないエラー."""

    pass


class InvalidCancellationReasonError(Exception):
    """キャンセル理由が短すぎるエラー."""

    pass


class RegistrationAlreadyCancelledError(Exception):
    """既にキャンセル済みの登録をキャンセルしようとしたエラー."""

    pass


class AdminCancelRegistrationUseCase:
    """管理者による参加登録キャンセルユースケース.

    登録IDで対象を特定し、開始3日前の締め切りは適用しない。
    ログには管理者を操作者として記録する。
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(
        self,
        admin_id: UserId,
        registration_id: RegistrationId,
        reason: str,
        now: datetime | None = None,
    ) -> Registration:
        """参加登録をキャンセルする.

        Args:
            admin_id: 操作する管理者のユーザーID
            registration_id: 登録ID
            reason: キャンセル理由（5文字以上）
            now: 現在時刻（省略時はUTC現在時刻）

        Returns:
            キャンセルされた登録

        Raises:
            InvalidCancellationReasonError: 理由が5文字未満の場合
            AdminPermissionError: 管理者でない場合
            RegistrationNotFoundError: 登録が見つからない場合
            RegistrationAlreadyCancelledError: 既にキャンセル済みの場合
        """
        reason = (reason or "").strip()
        if len(reason) < MIN_REASON_LENGTH:
            raise InvalidCancellationReasonError(
                f"Reason must be at least {MIN_REASON_LENGTH} characters"
            )
        now = now or datetime.now(timezone.utc)

        with self._unit_of_work as uow:
            if not uow.admins.exists(admin_id):
                raise AdminPermissionError(f"User is not an admin: {admin_id}")

            registration = uow.registrations.find_by_id(registration_id)
            if registration is None:
                raise RegistrationNotFoundError(f"Registration not found: {registration_id}")
            if not registration.is_active:
                raise RegistrationAlreadyCancelledError(
                    f"Registration is already cancelled: {registration_id}"
                )

            registration.cancel(reason, now)
            uow.registrations.update(registration)
            if uow.events.find_by_id(registration.event_id) is not None:
                uow.events.release_seat(registration.event_id)
            uow.activity_log.append(
                ActivityLogEntry.record(
                    ActivityActionType.REGISTRATION_CANCEL,
                    now,
                    user_id=admin_id,
                    details={
                        "registration_id": registration_id.value,
                        "user_id": registration.user_id.value,
                        "event_id": registration.event_id.value,
                        "reason": reason,
                        "cancelled_by": "admin",
                    },
                )
            )

        logger.info(
            f"Admin {admin_id} cancelled registration {registration_id} "
            f"of user {registration.user_id}"
        )
        return registration
