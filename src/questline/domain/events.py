from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from questline.domain.models.AddressModel import Address


@dataclass(frozen=True, slots=True)
class QuestEvent:
    quest_id: int
    caller: Address
    at: int


@dataclass(frozen=True, slots=True)
class QuestCreated(QuestEvent):
    pass


@dataclass(frozen=True, slots=True)
class QuestEdited(QuestEvent):
    pass


@dataclass(frozen=True, slots=True)
class QuestDeleted(QuestEvent):
    pass


@dataclass(frozen=True, slots=True)
class QuestJoined(QuestEvent):
    number_of_players: int = 0


@dataclass(frozen=True, slots=True)
class QuestSubmitted(QuestEvent):
    pass


EventListener = Callable[[QuestEvent], None]


__all__ = [
    "QuestEvent",
    "QuestCreated",
    "QuestEdited",
    "QuestDeleted",
    "QuestJoined",
    "QuestSubmitted",
    "EventListener",
]
