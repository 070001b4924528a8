from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from questline.domain.models.AddressModel import Address


class ParticipantStatus(Enum):
    NOT_JOINED = "NOT_JOINED"
    JOINED = "JOINED"
    SUBMITTED = "SUBMITTED"


@dataclass
class Quest:
    # Identity
    quest_id: int

    # Definition (admin-mutable)
    title: str = ""
    reward: int = 0
    number_of_rewards: int = 0
    start_time: int = 0
    end_time: int = 0

    # Participation
    number_of_players: int = 0

    @classmethod
    def absent(cls, quest_id: int) -> Quest:
        """Zero record returned for ids that were never created or were deleted."""
        return cls(quest_id=quest_id)

    # ------- Property Helpers -------

    @property
    def exists(self) -> bool:
        # A zero reward is indistinguishable from a missing quest.
        return self.reward != 0

    def is_open_at(self, now: int) -> bool:
        return self.start_time <= now <= self.end_time

    def accepts_submission_at(self, now: int) -> bool:
        return now <= self.end_time

    # ------- Mutation Helpers -------

    def overwrite(
        self,
        *,
        title: str,
        reward: int,
        number_of_rewards: int,
        start_time: int,
        end_time: int,
    ) -> None:
        self.title = title
        self.reward = reward
        self.number_of_rewards = number_of_rewards
        self.start_time = start_time
        self.end_time = end_time

    def add_player(self) -> None:
        self.number_of_players += 1


@dataclass
class Participation:
    address: Address
    quest_id: int
    status: ParticipantStatus = ParticipantStatus.NOT_JOINED

