from __future__ import annotations

from dataclasses import dataclass

from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import ParticipantStatus, Participation
from questline.domain.usecase._shared import parse_address, parse_quest_id
from questline.domain.usecase.ports import StatusesRepo


@dataclass(slots=True)
class GetParticipantStatus:
    statuses_repo: StatusesRepo

    async def execute(self, address: Address | str, quest_id: int | str) -> Participation:
        addr = parse_address(address)
        qid = parse_quest_id(quest_id)
        status = await self.statuses_repo.get(addr, qid)
        return Participation(address=addr, quest_id=qid, status=status)


@dataclass(slots=True)
class ListParticipants:
    """Every recorded status for a quest, orphaned ones included."""

    statuses_repo: StatusesRepo

    async def execute(self, quest_id: int | str) -> list[Participation]:
        qid = parse_quest_id(quest_id)
        rows = await self.statuses_repo.list_for_quest(qid)
        return [
            Participation(address=addr, quest_id=qid, status=status)
            for addr, status in rows
            if status is not ParticipantStatus.NOT_JOINED
        ]
