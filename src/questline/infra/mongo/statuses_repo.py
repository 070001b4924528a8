from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import ParticipantStatus, Participation
from questline.infra.serialization import from_bson, to_bson


class StatusesRepoMongo:
    """Only touched (address, quest) pairs are stored; absence means NOT_JOINED.

    Writes are conditional so the unique (address, quest_id) index decides
    races between processes sharing the database.
    """

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._statuses: AsyncIOMotorCollection = db["participant_statuses"]

    async def ensure_indexes(self) -> None:
        await self._statuses.create_index(
            [("address", ASCENDING), ("quest_id", ASCENDING)],
            unique=True,
            name="uq_participant_statuses_address_quest",
        )

    async def get(self, address: Address, quest_id: int) -> ParticipantStatus:
        doc = await self._statuses.find_one(self._key(address, quest_id))
        if not doc:
            return ParticipantStatus.NOT_JOINED
        return from_bson(Participation, doc).status

    async def claim(self, address: Address, quest_id: int) -> bool:
        doc = to_bson(
            Participation(
                address=address,
                quest_id=int(quest_id),
                status=ParticipantStatus.JOINED,
            )
        )
        try:
            await self._statuses.insert_one(doc)
        except DuplicateKeyError:
            return False
        return True

    async def advance(
        self,
        address: Address,
        quest_id: int,
        expected: ParticipantStatus,
        status: ParticipantStatus,
    ) -> bool:
        result = await self._statuses.update_one(
            {**self._key(address, quest_id), "status": expected.value},
            {"$set": {"status": status.value}},
        )
        return result.modified_count > 0

    async def release(self, address: Address, quest_id: int) -> None:
        await self._statuses.delete_one(self._key(address, quest_id))

    async def list_for_quest(
        self, quest_id: int
    ) -> list[tuple[Address, ParticipantStatus]]:
        cursor = self._statuses.find({"quest_id": int(quest_id)}).sort(
            "address", ASCENDING
        )
        docs = await cursor.to_list(length=None)
        rows = [from_bson(Participation, doc) for doc in docs]
        return [(row.address, row.status) for row in rows]

    @staticmethod
    def _key(address: Address, quest_id: int) -> dict[str, object]:
        return {"address": str(address), "quest_id": int(quest_id)}
