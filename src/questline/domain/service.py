"""Quest board facade.

Runs every public operation one at a time under a single lock, reads the
clock once per operation and notifies listeners after a mutation commits.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, Iterable, Optional, TypeVar

from questline.domain.errors import QuestError
from questline.domain.events import (
    EventListener,
    QuestCreated,
    QuestDeleted,
    QuestEdited,
    QuestEvent,
    QuestJoined,
    QuestSubmitted,
)
from questline.domain.models.AddressModel import Address
from questline.domain.models.BoardModel import BoardContext
from questline.domain.models.QuestModel import ParticipantStatus, Participation, Quest
from questline.domain.usecase import quests as quest_usecases
from questline.domain.usecase._shared import parse_address, parse_quest_id
from questline.domain.usecase.ports import QuestsRepo, StatusesRepo

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
T = TypeVar("T")


def wall_clock() -> int:
    return int(time.time())


class QuestBoard:
    def __init__(
        self,
        context: BoardContext,
        quests_repo: QuestsRepo,
        statuses_repo: StatusesRepo,
        *,
        clock: Optional[Clock] = None,
        listeners: Iterable[EventListener] = (),
    ) -> None:
        self.context = context
        self.quests_repo = quests_repo
        self.statuses_repo = statuses_repo
        self._clock: Clock = clock or wall_clock
        self._listeners: list[EventListener] = list(listeners)
        self._lock = asyncio.Lock()

    # ------- Accessors -------

    @property
    def admin(self) -> Address:
        return self.context.admin

    async def next_quest_id(self) -> int:
        return await self.quests_repo.peek_next_id()

    async def get_quest(self, quest_id: int | str) -> Quest:
        usecase = quest_usecases.GetQuest(quests_repo=self.quests_repo)
        return await usecase.execute(quest_id)

    async def get_participation(
        self, address: Address | str, quest_id: int | str
    ) -> Participation:
        usecase = quest_usecases.GetParticipantStatus(statuses_repo=self.statuses_repo)
        return await usecase.execute(address, quest_id)

    async def get_status(
        self, address: Address | str, quest_id: int | str
    ) -> ParticipantStatus:
        participation = await self.get_participation(address, quest_id)
        return participation.status

    async def list_participants(self, quest_id: int | str) -> list[Participation]:
        usecase = quest_usecases.ListParticipants(statuses_repo=self.statuses_repo)
        return await usecase.execute(quest_id)

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    # ------- Registry -------

    async def create_quest(
        self,
        caller: Address | str,
        *,
        title: str,
        reward: int,
        number_of_rewards: int,
        start_time: int,
        end_time: int,
    ) -> Quest:
        usecase = quest_usecases.CreateQuest(
            quests_repo=self.quests_repo, context=self.context
        )

        async def run(now: int) -> Quest:
            return await usecase.execute(
                caller,
                title=title,
                reward=reward,
                number_of_rewards=number_of_rewards,
                start_time=start_time,
                end_time=end_time,
            )

        quest, now = await self._serialized("create_quest", caller, run)
        if not quest.exists:
            logger.warning(
                "Quest %s was created with reward 0 and reads as absent",
                quest.quest_id,
            )
        self._emit(QuestCreated(quest_id=quest.quest_id, caller=parse_address(caller), at=now))
        return quest

    async def edit_quest(
        self,
        caller: Address | str,
        quest_id: int | str,
        *,
        title: str,
        reward: int,
        number_of_rewards: int,
        start_time: int,
        end_time: int,
    ) -> Quest:
        usecase = quest_usecases.EditQuest(
            quests_repo=self.quests_repo, context=self.context
        )

        async def run(now: int) -> Quest:
            return await usecase.execute(
                caller,
                quest_id,
                title=title,
                reward=reward,
                number_of_rewards=number_of_rewards,
                start_time=start_time,
                end_time=end_time,
            )

        quest, now = await self._serialized("edit_quest", caller, run)
        self._emit(QuestEdited(quest_id=quest.quest_id, caller=parse_address(caller), at=now))
        return quest

    async def delete_quest(self, caller: Address | str, quest_id: int | str) -> None:
        usecase = quest_usecases.DeleteQuest(
            quests_repo=self.quests_repo, context=self.context
        )

        async def run(now: int) -> int:
            return await usecase.execute(caller, quest_id)

        deleted_id, now = await self._serialized("delete_quest", caller, run)
        self._emit(QuestDeleted(quest_id=deleted_id, caller=parse_address(caller), at=now))

    # ------- Participation -------

    async def join_quest(self, caller: Address | str, quest_id: int | str) -> Quest:
        usecase = quest_usecases.JoinQuest(
            quests_repo=self.quests_repo, statuses_repo=self.statuses_repo
        )

        async def run(now: int) -> Quest:
            return await usecase.execute(caller, quest_id, now=now)

        quest, now = await self._serialized("join_quest", caller, run)
        self._emit(
            QuestJoined(
                quest_id=quest.quest_id,
                caller=parse_address(caller),
                at=now,
                number_of_players=quest.number_of_players,
            )
        )
        return quest

    async def submit_quest(
        self, caller: Address | str, quest_id: int | str
    ) -> ParticipantStatus:
        usecase = quest_usecases.SubmitQuest(
            quests_repo=self.quests_repo, statuses_repo=self.statuses_repo
        )

        async def run(now: int) -> ParticipantStatus:
            return await usecase.execute(caller, quest_id, now=now)

        status, now = await self._serialized("submit_quest", caller, run)
        self._emit(
            QuestSubmitted(
                quest_id=parse_quest_id(quest_id), caller=parse_address(caller), at=now
            )
        )
        return status

    # ---------- Helpers ----------

    async def _serialized(
        self,
        operation: str,
        caller: Address | str,
        run: Callable[[int], Awaitable[T]],
    ) -> tuple[T, int]:
        async with self._lock:
            now = self._clock()
            try:
                result = await run(now)
            except QuestError as err:
                logger.info(
                    "%s rejected for %s: %s (%s)", operation, caller, err.kind, err
                )
                raise
            logger.info("%s committed for %s at %s", operation, caller, now)
            return result, now

    def _emit(self, event: QuestEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Listener %r failed on %s", listener, type(event).__name__
                )


__all__ = ["QuestBoard", "Clock", "wall_clock"]
