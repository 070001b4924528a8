from __future__ import annotations

from dataclasses import replace
from typing import Dict

from questline.domain.models.QuestModel import Quest


class QuestsRepoMemory:
    def __init__(self, quests: Dict[int, Quest] | None = None, next_id: int = 0) -> None:
        self.store: Dict[int, Quest] = dict(quests or {})
        self._next_id = next_id

    async def get(self, quest_id: int) -> Quest | None:
        quest = self.store.get(quest_id)
        # Stored quests are copied in and out.
        return replace(quest) if quest is not None else None

    async def upsert(self, quest: Quest) -> None:
        self.store[quest.quest_id] = replace(quest)

    async def reset(self, quest_id: int) -> None:
        self.store[quest_id] = Quest.absent(quest_id)

    async def increment_players(self, quest_id: int) -> Quest | None:
        quest = self.store.get(quest_id)
        if quest is None:
            return None
        quest.add_player()
        return replace(quest)

    async def next_id(self) -> int:
        current = self._next_id
        self._next_id += 1
        return current

    async def release_id(self, quest_id: int) -> None:
        if self._next_id == quest_id + 1:
            self._next_id = quest_id

    async def peek_next_id(self) -> int:
        return self._next_id
