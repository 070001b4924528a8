from __future__ import annotations

from dataclasses import dataclass

from questline.domain.models.QuestModel import Quest
from questline.domain.usecase._shared import load_quest
from questline.domain.usecase.ports import QuestsRepo


@dataclass(slots=True)
class GetQuest:
    quests_repo: QuestsRepo

    async def execute(self, quest_id: int | str) -> Quest:
        return await load_quest(self.quests_repo, quest_id)
