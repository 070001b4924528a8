from __future__ import annotations

import pytest

from questline.domain.models.BoardModel import BoardContext
from questline.domain.service import QuestBoard
from questline.infra.memory import QuestsRepoMemory, StatusesRepoMemory

ADMIN = "0x" + "a" * 40
ALICE = "0x" + "1" * 40
BOB = "0x" + "2" * 40


class FakeClock:
    """Manually advanced clock returning integer unix seconds."""

    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def quests_repo() -> QuestsRepoMemory:
    return QuestsRepoMemory()


@pytest.fixture()
def statuses_repo() -> StatusesRepoMemory:
    return StatusesRepoMemory()


@pytest.fixture()
def context() -> BoardContext:
    return BoardContext.for_admin(ADMIN)


@pytest.fixture()
def board(
    context: BoardContext,
    quests_repo: QuestsRepoMemory,
    statuses_repo: StatusesRepoMemory,
    clock: FakeClock,
) -> QuestBoard:
    return QuestBoard(context, quests_repo, statuses_repo, clock=clock)
