from __future__ import annotations

from dataclasses import dataclass

from questline.domain.errors import MustJoinFirst
from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import ParticipantStatus
from questline.domain.usecase._shared import load_quest, parse_address
from questline.domain.usecase.guards import (
    check_before_deadline,
    check_exists,
    check_joined,
    enforce,
)
from questline.domain.usecase.ports import QuestsRepo, StatusesRepo


@dataclass(slots=True)
class SubmitQuest:
    """Record completion. Payout is left to whoever watches for SUBMITTED."""

    quests_repo: QuestsRepo
    statuses_repo: StatusesRepo

    async def execute(
        self, caller: Address | str, quest_id: int | str, *, now: int
    ) -> ParticipantStatus:
        caller_addr = parse_address(caller)
        quest = await load_quest(self.quests_repo, quest_id)
        status = await self.statuses_repo.get(caller_addr, quest.quest_id)

        # Only the deadline applies to submissions; start_time is not checked.
        enforce(
            lambda: check_exists(quest),
            lambda: check_joined(quest.quest_id, status),
            lambda: check_before_deadline(quest, now),
        )

        advanced = await self.statuses_repo.advance(
            caller_addr,
            quest.quest_id,
            ParticipantStatus.JOINED,
            ParticipantStatus.SUBMITTED,
        )
        if not advanced:
            raise MustJoinFirst(
                f"Caller must join quest {quest.quest_id} before submitting"
            )
        return ParticipantStatus.SUBMITTED
