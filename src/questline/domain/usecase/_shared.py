from __future__ import annotations

from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import Quest
from questline.domain.usecase.ports import QuestsRepo


def parse_address(raw: Address | str) -> Address:
    """Return a normalized ``Address`` from raw inputs."""

    return Address.parse(raw)


def parse_quest_id(raw: int | str) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"Invalid quest id: {raw!r}")
    try:
        quest_id = int(raw)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Invalid quest id: {raw!r}") from err
    if quest_id < 0:
        raise ValueError(f"Quest id must be non-negative: {raw!r}")
    return quest_id


async def load_quest(quests_repo: QuestsRepo, quest_id: int | str) -> Quest:
    """Fetch a quest, falling back to its zero record when nothing is stored."""

    qid = parse_quest_id(quest_id)
    quest = await quests_repo.get(qid)
    return quest if quest is not None else Quest.absent(qid)


def parse_unsigned(name: str, raw: int) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if raw < 0:
        raise ValueError(f"{name} must be non-negative, got {raw}")
    return raw
