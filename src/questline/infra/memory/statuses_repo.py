from __future__ import annotations

from typing import Dict, Tuple

from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import ParticipantStatus

StatusKey = Tuple[str, int]


class StatusesRepoMemory:
    def __init__(self) -> None:
        self.store: Dict[StatusKey, ParticipantStatus] = {}

    async def get(self, address: Address, quest_id: int) -> ParticipantStatus:
        return self.store.get((str(address), quest_id), ParticipantStatus.NOT_JOINED)

    async def claim(self, address: Address, quest_id: int) -> bool:
        key = (str(address), quest_id)
        if key in self.store:
            return False
        self.store[key] = ParticipantStatus.JOINED
        return True

    async def advance(
        self,
        address: Address,
        quest_id: int,
        expected: ParticipantStatus,
        status: ParticipantStatus,
    ) -> bool:
        key = (str(address), quest_id)
        if self.store.get(key, ParticipantStatus.NOT_JOINED) is not expected:
            return False
        self.store[key] = status
        return True

    async def release(self, address: Address, quest_id: int) -> None:
        self.store.pop((str(address), quest_id), None)

    async def list_for_quest(
        self, quest_id: int
    ) -> list[tuple[Address, ParticipantStatus]]:
        return [
            (Address(addr), status)
            for (addr, qid), status in sorted(self.store.items())
            if qid == quest_id
        ]
