from __future__ import annotations

from typing import Protocol

from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import ParticipantStatus, Quest


class QuestsRepo(Protocol):
    async def get(self, quest_id: int) -> Quest | None: ...

    async def upsert(self, quest: Quest) -> None: ...

    async def reset(self, quest_id: int) -> None: ...

    async def increment_players(self, quest_id: int) -> Quest | None:
        """Add one player in a single write and return the updated quest."""
        ...

    async def next_id(self) -> int:
        """Return the current counter value and advance it by one."""
        ...

    async def release_id(self, quest_id: int) -> None:
        """Undo ``next_id`` if the counter still sits right after ``quest_id``."""
        ...

    async def peek_next_id(self) -> int: ...


class StatusesRepo(Protocol):
    async def get(self, address: Address, quest_id: int) -> ParticipantStatus: ...

    async def claim(self, address: Address, quest_id: int) -> bool:
        """Record JOINED only if the pair has no status yet."""
        ...

    async def advance(
        self,
        address: Address,
        quest_id: int,
        expected: ParticipantStatus,
        status: ParticipantStatus,
    ) -> bool:
        """Move the pair from ``expected`` to ``status``; False if it was not ``expected``."""
        ...

    async def release(self, address: Address, quest_id: int) -> None: ...

    async def list_for_quest(
        self, quest_id: int
    ) -> list[tuple[Address, ParticipantStatus]]: ...
