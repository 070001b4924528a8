from __future__ import annotations

from questline.api.schemas import ParticipantList as APIParticipantList
from questline.api.schemas import ParticipantStatus as APIParticipantStatus
from questline.api.schemas import Participation as APIParticipation
from questline.api.schemas import Quest as APIQuest
from questline.domain.models.QuestModel import Participation as DParticipation
from questline.domain.models.QuestModel import Quest as DQuest


def quest_to_api(quest: DQuest) -> APIQuest:
    return APIQuest(
        quest_id=quest.quest_id,
        title=quest.title,
        reward=quest.reward,
        number_of_rewards=quest.number_of_rewards,
        number_of_players=quest.number_of_players,
        start_time=quest.start_time,
        end_time=quest.end_time,
        exists=quest.exists,
    )


def participation_to_api(participation: DParticipation) -> APIParticipation:
    return APIParticipation(
        address=str(participation.address),
        quest_id=participation.quest_id,
        status=APIParticipantStatus(participation.status.value),
    )


def participants_to_api(
    quest_id: int, participations: list[DParticipation]
) -> APIParticipantList:
    return APIParticipantList(
        quest_id=quest_id,
        participants=[participation_to_api(p) for p in participations],
    )
