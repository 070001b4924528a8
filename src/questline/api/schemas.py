from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

# --- Shared Types ---


class ParticipantStatus(str, Enum):
    NOT_JOINED = "NOT_JOINED"
    JOINED = "JOINED"
    SUBMITTED = "SUBMITTED"


# --- Board ---


class BoardInfo(BaseModel):
    admin: str
    next_quest_id: int


# --- Quests ---


class QuestDefinition(BaseModel):
    title: str = Field(default="", max_length=256)
    reward: int = Field(..., ge=0)
    number_of_rewards: int = Field(default=0, ge=0)
    start_time: int = Field(..., ge=0, description="Unix seconds, inclusive")
    end_time: int = Field(..., ge=0, description="Unix seconds, inclusive")


class QuestCreate(QuestDefinition):
    pass


class QuestUpdate(QuestDefinition):
    pass


class Quest(BaseModel):
    quest_id: int
    title: str
    reward: int
    number_of_rewards: int
    number_of_players: int
    start_time: int
    end_time: int
    exists: bool


# --- Participation ---


class Participation(BaseModel):
    address: str
    quest_id: int
    status: ParticipantStatus


class ParticipantList(BaseModel):
    quest_id: int
    participants: List[Participation] = Field(default_factory=list)


class ErrorBody(BaseModel):
    detail: str
    error: str
