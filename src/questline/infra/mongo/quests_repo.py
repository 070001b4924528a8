from __future__ import annotations

from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from questline.domain.models.QuestModel import Quest
from questline.infra.serialization import from_bson, to_bson

MongoDocument = Dict[str, Any]

QUEST_COUNTER_ID = "QUEST"


class QuestsRepoMongo:
    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._quests: AsyncIOMotorCollection = db["quests"]
        self._counters: AsyncIOMotorCollection = db["counters"]

    async def ensure_indexes(self) -> None:
        await self._quests.create_index(
            [("quest_id", ASCENDING)], unique=True, name="uq_quests_quest_id"
        )

    async def upsert(self, quest: Quest) -> None:
        doc = to_bson(quest)
        await self._quests.replace_one({"quest_id": quest.quest_id}, doc, upsert=True)

    async def get(self, quest_id: int) -> Quest | None:
        doc = await self._quests.find_one({"quest_id": int(quest_id)})
        return from_bson(Quest, doc) if doc else None

    async def reset(self, quest_id: int) -> None:
        await self.upsert(Quest.absent(int(quest_id)))

    async def increment_players(self, quest_id: int) -> Quest | None:
        doc = await self._quests.find_one_and_update(
            {"quest_id": int(quest_id)},
            {"$inc": {"number_of_players": 1}},
            return_document=ReturnDocument.AFTER,
        )
        return from_bson(Quest, doc) if doc else None

    async def next_id(self) -> int:
        # BEFORE returns the pre-increment value; the first call sees no document.
        doc = await self._counters.find_one_and_update(
            {"_id": QUEST_COUNTER_ID},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.BEFORE,
        )
        return self._seq(doc)

    async def release_id(self, quest_id: int) -> None:
        # No-op once another writer has taken a later id.
        await self._counters.update_one(
            {"_id": QUEST_COUNTER_ID, "seq": int(quest_id) + 1},
            {"$inc": {"seq": -1}},
        )

    async def peek_next_id(self) -> int:
        doc = await self._counters.find_one({"_id": QUEST_COUNTER_ID})
        return self._seq(doc)

    @staticmethod
    def _seq(doc: MongoDocument | None) -> int:
        if doc is None:
            return 0
        seq_value = doc.get("seq", 0)
        if not isinstance(seq_value, int):
            raise TypeError(
                f"Counter for {QUEST_COUNTER_ID} returned non-int value: {seq_value!r}"
            )
        return seq_value
