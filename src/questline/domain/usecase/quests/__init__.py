from questline.domain.usecase.quests.create_quest import CreateQuest
from questline.domain.usecase.quests.delete_quest import DeleteQuest
from questline.domain.usecase.quests.get_quest import GetQuest
from questline.domain.usecase.quests.join_quest import JoinQuest
from questline.domain.usecase.quests.participants import (
    GetParticipantStatus,
    ListParticipants,
)
from questline.domain.usecase.quests.submit_quest import SubmitQuest
from questline.domain.usecase.quests.update_quest import EditQuest

__all__ = [
    "CreateQuest",
    "GetQuest",
    "EditQuest",
    "DeleteQuest",
    "JoinQuest",
    "SubmitQuest",
    "GetParticipantStatus",
    "ListParticipants",
]
