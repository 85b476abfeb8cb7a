"""アカウント削除実行ユースケース."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone

from berufsorientierung.domain.entities import (
    ActivityLogEntry,
    DeletedUserArchive,
    Event,
    PendingDeletion,
    Registration,
    Review,
    User,
)
from berufsorientierung.domain.enums import ActivityActionType
from berufsorientierung.domain.identifiers import EventId, UserId
from berufsorientierung.domain.ports import UnitOfWork
from berufsorientierung.domain.value_objects import ParticipatedEvent

from .register_for_event import UserNotFoundError

logger = logging.getLogger(__name__)

# (書き込み数, 書き込み処理)
_Step = tuple[int, Callable[[UnitOfWork], None]]


@dataclass(frozen=True)
class EraseAccountResult:
    """アカウント削除結果."""

    user_id: UserId
    deleted_at: datetime
    # 1トランザクションに収まらず分割実行したか
    batched: bool


@dataclass
class _ErasurePlan:
    """削除対象の読み取り結果."""

    user: User
    pending: PendingDeletion | None
    registrations: list[Registration]
    reviews: list[Review]
    log_entries: list[ActivityLogEntry]
    is_admin: bool
    participated: list[ParticipatedEvent] = field(default_factory=list)
    # 席を解放するイベント（削除済みのイベントを除く）
    seat_event_ids: frozenset[EventId] = frozenset()

    @property
    def archived(self) -> bool:
        """前回の分割実行でアーカイブ済みか."""
        return self.pending is not None and self.pending.is_erasure_in_progress()

    def releases_seat(self, registration: Registration) -> bool:
        """登録の削除で席を解放するか."""
        return registration.is_active and registration.event_id in self.seat_event_ids

    @property
    def write_count(self) -> int:
        """一括削除に必要な書き込み数."""
        releases = sum(1 for r in self.registrations if self.releases_seat(r))
        return (
            (0 if self.archived else 1)
            + int(self.is_admin)
            + len(self.registrations)
            + releases
            + int(self.pending is not None)
            + len(self.reviews)
            + len(self.log_entries)
            + 1  # user_deleted ログ
            + 1  # ユーザー行
        )


class EraseAccountUseCase:
    """アカウント削除実行ユースケース.

    アーカイブ作成から本人行の削除までを1トランザクションで行う。
    ストアの書き込み上限を超える場合は、削除予約に開始マーカーを付けてから
    分割実行し、途中で失敗しても次回の実行で再開できるようにする。
    """

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        """初期化."""
        self._unit_of_work = unit_of_work

    def execute(self, user_id: UserId, now: datetime | None = None) -> EraseAccountResult:
        """アカウントを削除する.

        Args:
            user_id: ユーザーID
            now: 現在時刻（省略時はUTC現在時刻）

        Returns:
            削除結果

        Raises:
            UserNotFoundError: ユーザーが見つからない場合
        """
        now = now or datetime.now(timezone.utc)

        with self._unit_of_work as uow:
            plan = self._plan(uow, user_id, now)
            limit = uow.max_batch_size
            batched = limit is not None and plan.write_count > limit
            if not batched:
                self._erase_at_once(uow, plan, now)

        if batched:
            logger.info(
                f"Erasure of user {user_id} needs {plan.write_count} writes "
                f"(limit: {limit}), running in batches"
            )
            self._erase_in_batches(user_id, now, limit)

        logger.info(f"Erased user {user_id}")
        return EraseAccountResult(user_id=user_id, deleted_at=now, batched=batched)

    def _plan(self, uow: UnitOfWork, user_id: UserId, now: datetime) -> _ErasurePlan:
        user = uow.users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User not found: {user_id}")

        registrations = uow.registrations.find_by_user(user_id)
        active_events = self._active_events(uow, registrations)
        return _ErasurePlan(
            user=user,
            pending=uow.pending_deletions.find_by_user(user_id),
            registrations=registrations,
            reviews=uow.reviews.find_by_user(user_id),
            log_entries=uow.activity_log.find_by_user(user_id),
            is_admin=uow.admins.exists(user_id),
            participated=self._participated_events(active_events, now),
            seat_event_ids=frozenset(event.event_id for event in active_events),
        )

    @staticmethod
    def _active_events(uow: UnitOfWork, registrations: list[Registration]) -> list[Event]:
        """アクティブな登録のイベントを取得する（削除済みのイベントは含まない）."""
        events = []
        for registration in registrations:
            if not registration.is_active:
                continue
            event = uow.events.find_by_id(registration.event_id)
            if event is not None:
                events.append(event)
        return events

    @staticmethod
    def _participated_events(events: list[Event], now: datetime) -> list[ParticipatedEvent]:
        """実際に参加したイベント（アクティブな登録かつ開催済み）を取得する."""
        participated = [
            ParticipatedEvent(event_id=event.event_id, title=event.title, date=event.date)
            for event in events
            if event.has_taken_place(now)
        ]
        return sorted(participated, key=lambda p: p.date, reverse=True)

    @staticmethod
    def _deleted_log_entry(user_id: UserId, now: datetime, batched: bool) -> ActivityLogEntry:
        return ActivityLogEntry.record(
            ActivityActionType.USER_DELETED,
            now,
            details={"deleted_user_id": user_id.value, "batched": batched},
        )

    def _erase_at_once(self, uow: UnitOfWork, plan: _ErasurePlan, now: datetime) -> None:
        user_id = plan.user.user_id

        if not plan.archived:
            uow.archive.add(DeletedUserArchive.from_user(plan.user, plan.participated, now))
        if plan.is_admin:
            uow.admins.remove(user_id)
        for registration in plan.registrations:
            if plan.releases_seat(registration):
                uow.events.release_seat(registration.event_id)
            uow.registrations.delete(registration)
        if plan.pending is not None:
            uow.pending_deletions.delete(user_id)
        for review in plan.reviews:
            uow.reviews.delete(review.review_id)
        uow.activity_log.append(self._deleted_log_entry(user_id, now, batched=False))
        for entry in plan.log_entries:
            uow.activity_log.detach_user(entry)
        uow.users.delete(user_id)

    def _erase_in_batches(self, user_id: UserId, now: datetime, limit: int) -> None:
        # 1. 開始マーカーとアーカイブ（再開時はスキップ）
        with self._unit_of_work as uow:
            plan = self._plan(uow, user_id, now)
            if not plan.archived:
                pending = plan.pending or PendingDeletion(
                    user_id=user_id, deletion_date=now, created_at=now
                )
                pending.mark_erasure_started(now)
                uow.pending_deletions.save(pending)
                uow.archive.add(DeletedUserArchive.from_user(plan.user, plan.participated, now))
                if not plan.user.is_blocked:
                    uow.users.block(user_id)
            else:
                logger.info(
                    f"Resuming erasure of user {user_id} "
                    f"started at {plan.pending.erasure_started_at}"
                )

        # 2. 従属データの分割削除
        steps: list[_Step] = []
        for entry in plan.log_entries:
            steps.append((1, lambda u, e=entry: u.activity_log.detach_user(e)))
        for review in plan.reviews:
            steps.append((1, lambda u, r=review: u.reviews.delete(r.review_id)))
        for registration in plan.registrations:
            releases = plan.releases_seat(registration)
            steps.append((2 if releases else 1, self._registration_step(registration, releases)))

        for chunk in self._chunks(steps, limit):
            with self._unit_of_work as uow:
                for _, apply in chunk:
                    apply(uow)

        # 3. 本人行の削除
        with self._unit_of_work as uow:
            if uow.admins.exists(user_id):
                uow.admins.remove(user_id)
            uow.pending_deletions.delete(user_id)
            uow.activity_log.append(self._deleted_log_entry(user_id, now, batched=True))
            uow.users.delete(user_id)

    @staticmethod
    def _registration_step(
        registration: Registration, releases_seat: bool
    ) -> Callable[[UnitOfWork], None]:
        def apply(uow: UnitOfWork) -> None:
            if releases_seat:
                uow.events.release_seat(registration.event_id)
            uow.registrations.delete(registration)

        return apply

    @staticmethod
    def _chunks(steps: list[_Step], size: int) -> Iterator[list[_Step]]:
        """書き込み数の合計が size 以下になるように分割する."""
        chunk: list[_Step] = []
        writes = 0
        for step in steps:
            if chunk and writes + step[0] > size:
                yield chunk
                chunk, writes = [], 0
            chunk.append(step)
            writes += step[0]
        if chunk:
            yield chunk
