from __future__ import annotations

from dataclasses import dataclass

from questline.domain.models.AddressModel import Address
from questline.domain.models.BoardModel import BoardContext
from questline.domain.usecase._shared import load_quest, parse_address
from questline.domain.usecase.guards import check_admin, check_exists, enforce
from questline.domain.usecase.ports import QuestsRepo


@dataclass(slots=True)
class DeleteQuest:
    """Reset a quest to its absent record; participant statuses are kept."""

    quests_repo: QuestsRepo
    context: BoardContext

    async def execute(self, caller: Address | str, quest_id: int | str) -> int:
        caller_addr = parse_address(caller)
        enforce(lambda: check_admin(self.context.admin, caller_addr))

        quest = await load_quest(self.quests_repo, quest_id)
        enforce(lambda: check_exists(quest))

        await self.quests_repo.reset(quest.quest_id)
        return quest.quest_id
