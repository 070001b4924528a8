from __future__ import annotations

from dataclasses import dataclass

from questline.domain.errors import AlreadyActedOnQuest, QuestNotFound
from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import Quest
from questline.domain.usecase._shared import load_quest, parse_address
from questline.domain.usecase.guards import (
    check_exists,
    check_join_window,
    check_not_acted,
    enforce,
)
from questline.domain.usecase.ports import QuestsRepo, StatusesRepo


@dataclass(slots=True)
class JoinQuest:
    quests_repo: QuestsRepo
    statuses_repo: StatusesRepo

    async def execute(self, caller: Address | str, quest_id: int | str, *, now: int) -> Quest:
        caller_addr = parse_address(caller)
        quest = await load_quest(self.quests_repo, quest_id)
        status = await self.statuses_repo.get(caller_addr, quest.quest_id)

        enforce(
            lambda: check_exists(quest),
            lambda: check_join_window(quest, now),
            lambda: check_not_acted(quest.quest_id, status),
        )

        # The claim is conditional; another writer may have joined since the read.
        if not await self.statuses_repo.claim(caller_addr, quest.quest_id):
            raise AlreadyActedOnQuest(
                f"Caller already acted on quest {quest.quest_id}"
            )

        try:
            updated = await self.quests_repo.increment_players(quest.quest_id)
        except Exception:
            await self.statuses_repo.release(caller_addr, quest.quest_id)
            raise
        if updated is None:
            await self.statuses_repo.release(caller_addr, quest.quest_id)
            raise QuestNotFound(f"Quest {quest.quest_id} does not exist")
        return updated
