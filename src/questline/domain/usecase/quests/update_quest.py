from __future__ import annotations

from dataclasses import dataclass

from questline.domain.models.AddressModel import Address
from questline.domain.models.BoardModel import BoardContext
from questline.domain.models.QuestModel import Quest
from questline.domain.usecase._shared import (
    load_quest,
    parse_address,
    parse_unsigned,
)
from questline.domain.usecase.guards import check_admin, check_exists, enforce
from questline.domain.usecase.ports import QuestsRepo


@dataclass(slots=True)
class EditQuest:
    quests_repo: QuestsRepo
    context: BoardContext

    async def execute(
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
        caller_addr = parse_address(caller)
        enforce(lambda: check_admin(self.context.admin, caller_addr))

        quest = await load_quest(self.quests_repo, quest_id)
        enforce(lambda: check_exists(quest))

        quest.overwrite(
            title=title,
            reward=parse_unsigned("reward", reward),
            number_of_rewards=parse_unsigned("number_of_rewards", number_of_rewards),
            start_time=parse_unsigned("start_time", start_time),
            end_time=parse_unsigned("end_time", end_time),
        )
        await self.quests_repo.upsert(quest)
        return quest
