"""Access guard predicates.

Each check is pure: it returns ``None`` when the predicate holds or the
error that should reject the operation. ``enforce`` runs deferred checks in
order and raises the first failure without evaluating the rest.
"""

from __future__ import annotations

from typing import Callable, Optional

from questline.domain.errors import (
    AlreadyActedOnQuest,
    MustJoinFirst,
    QuestError,
    QuestNotFound,
    QuestWindowClosed,
    SubmissionDeadlinePassed,
    Unauthorized,
)
from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import ParticipantStatus, Quest

GuardResult = Optional[QuestError]
Guard = Callable[[], GuardResult]


def check_admin(admin: Address, caller: Address) -> GuardResult:
    if caller != admin:
        return Unauthorized(f"Caller {caller} is not the admin")
    return None


def check_exists(quest: Quest) -> GuardResult:
    if not quest.exists:
        return QuestNotFound(f"Quest {quest.quest_id} does not exist")
    return None


def check_join_window(quest: Quest, now: int) -> GuardResult:
    if not quest.is_open_at(now):
        return QuestWindowClosed(
            f"Quest {quest.quest_id} accepts joins between "
            f"{quest.start_time} and {quest.end_time}, now is {now}"
        )
    return None


def check_not_acted(quest_id: int, status: ParticipantStatus) -> GuardResult:
    if status is not ParticipantStatus.NOT_JOINED:
        return AlreadyActedOnQuest(
            f"Caller already acted on quest {quest_id} ({status.value})"
        )
    return None


def check_joined(quest_id: int, status: ParticipantStatus) -> GuardResult:
    if status is not ParticipantStatus.JOINED:
        return MustJoinFirst(
            f"Caller must join quest {quest_id} before submitting ({status.value})"
        )
    return None


def check_before_deadline(quest: Quest, now: int) -> GuardResult:
    if not quest.accepts_submission_at(now):
        return SubmissionDeadlinePassed(
            f"Quest {quest.quest_id} closed for submissions at {quest.end_time}"
        )
    return None


def first_failure(*guards: Guard) -> GuardResult:
    for guard in guards:
        failure = guard()
        if failure is not None:
            return failure
    return None


def enforce(*guards: Guard) -> None:
    failure = first_failure(*guards)
    if failure is not None:
        raise failure


__all__ = [
    "Guard",
    "GuardResult",
    "check_admin",
    "check_exists",
    "check_join_window",
    "check_not_acted",
    "check_joined",
    "check_before_deadline",
    "first_failure",
    "enforce",
]
