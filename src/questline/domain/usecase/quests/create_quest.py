from __future__ import annotations

from dataclasses import dataclass

from questline.domain.models.AddressModel import Address
from questline.domain.models.BoardModel import BoardContext
from questline.domain.models.QuestModel import Quest
from questline.domain.usecase._shared import parse_address, parse_unsigned
from questline.domain.usecase.guards import check_admin, enforce
from questline.domain.usecase.ports import QuestsRepo


@dataclass(slots=True)
class CreateQuest:
    quests_repo: QuestsRepo
    context: BoardContext

    async def execute(
        self,
        caller: Address | str,
        *,
        title: str,
        reward: int,
        number_of_rewards: int,
        start_time: int,
        end_time: int,
    ) -> Quest:
        caller_addr = parse_address(caller)
        enforce(lambda: check_admin(self.context.admin, caller_addr))

        # A zero reward or an inverted window is stored as given.
        fields = dict(
            title=title,
            reward=parse_unsigned("reward", reward),
            number_of_rewards=parse_unsigned("number_of_rewards", number_of_rewards),
            start_time=parse_unsigned("start_time", start_time),
            end_time=parse_unsigned("end_time", end_time),
        )

        quest_id = await self.quests_repo.next_id()
        quest = Quest(quest_id=quest_id, number_of_players=0, **fields)
        try:
            await self.quests_repo.upsert(quest)
        except Exception:
            await self.quests_repo.release_id(quest_id)
            raise
        return quest
