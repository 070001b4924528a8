"""Failure kinds raised when an operation is rejected.

Every rejection leaves the board untouched, so callers may retry with
corrected inputs.
"""

from __future__ import annotations

from typing import ClassVar


class QuestError(Exception):
    kind: ClassVar[str] = "QuestError"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind)

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else self.kind


class Unauthorized(QuestError):
    kind = "Unauthorized"


class QuestNotFound(QuestError):
    kind = "QuestNotFound"


class QuestWindowClosed(QuestError):
    kind = "QuestWindowClosed"


class AlreadyActedOnQuest(QuestError):
    kind = "AlreadyActedOnQuest"


class MustJoinFirst(QuestError):
    kind = "MustJoinFirst"


class SubmissionDeadlinePassed(QuestError):
    kind = "SubmissionDeadlinePassed"


__all__ = [
    "QuestError",
    "Unauthorized",
    "QuestNotFound",
    "QuestWindowClosed",
    "AlreadyActedOnQuest",
    "MustJoinFirst",
    "SubmissionDeadlinePassed",
]
