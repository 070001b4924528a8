from __future__ import annotations

import asyncio

import pytest

from questline.domain.errors import (
    MustJoinFirst,
    QuestNotFound,
    QuestWindowClosed,
    Unauthorized,
)
from questline.domain.events import (
    QuestCreated,
    QuestDeleted,
    QuestEdited,
    QuestJoined,
    QuestSubmitted,
)
from questline.domain.models.AddressModel import Address
from questline.domain.models.QuestModel import ParticipantStatus

pytestmark = pytest.mark.asyncio

ADMIN = "0x" + "a" * 40
ALICE = "0x" + "1" * 40
BOB = "0x" + "2" * 40

DEFINITION = dict(title="Harvest", reward=5, number_of_rewards=10, start_time=100, end_time=200)


async def test_full_lifecycle_scenario(board, clock):
    quest = await board.create_quest(ADMIN, **DEFINITION)
    assert quest.quest_id == 0

    clock.now = 150
    joined = await board.join_quest(ALICE, quest.quest_id)
    assert joined.number_of_players == 1
    assert await board.get_status(ALICE, 0) is ParticipantStatus.JOINED

    clock.now = 180
    assert await board.submit_quest(ALICE, 0) is ParticipantStatus.SUBMITTED
    assert await board.get_status(ALICE, 0) is ParticipantStatus.SUBMITTED

    clock.now = 250
    with pytest.raises(QuestWindowClosed):
        await board.join_quest(BOB, 0)
    assert (await board.get_quest(0)).number_of_players == 1


async def test_submit_without_join(board, clock):
    await board.create_quest(ADMIN, **DEFINITION)
    clock.now = 150
    with pytest.raises(MustJoinFirst):
        await board.submit_quest(ALICE, 0)


async def test_accessors(board):
    assert board.admin == Address(ADMIN)
    assert await board.next_quest_id() == 0
    await board.create_quest(ADMIN, **DEFINITION)
    assert await board.next_quest_id() == 1
    assert (await board.get_quest(5)).exists is False


async def test_delete_orphans_statuses(board, clock):
    await board.create_quest(ADMIN, **DEFINITION)
    clock.now = 150
    await board.join_quest(ALICE, 0)
    await board.join_quest(BOB, 0)
    await board.submit_quest(BOB, 0)

    await board.delete_quest(ADMIN, 0)

    for op in (board.join_quest, board.submit_quest):
        with pytest.raises(QuestNotFound):
            await op(ALICE, 0)
    with pytest.raises(QuestNotFound):
        await board.edit_quest(ADMIN, 0, **DEFINITION)
    with pytest.raises(QuestNotFound):
        await board.delete_quest(ADMIN, 0)

    assert await board.get_status(ALICE, 0) is ParticipantStatus.JOINED
    assert await board.get_status(BOB, 0) is ParticipantStatus.SUBMITTED
    participants = await board.list_participants(0)
    assert {str(p.address) for p in participants} == {ALICE, BOB}
    assert (await board.get_quest(0)).number_of_players == 0
    # Ids are never reused.
    assert (await board.create_quest(ADMIN, **DEFINITION)).quest_id == 1


async def test_non_admin_mutations_are_rejected(board):
    with pytest.raises(Unauthorized):
        await board.create_quest(ALICE, **DEFINITION)
    await board.create_quest(ADMIN, **DEFINITION)
    with pytest.raises(Unauthorized):
        await board.edit_quest(ALICE, 0, **DEFINITION)
    with pytest.raises(Unauthorized):
        await board.delete_quest(ALICE, 0)
    assert (await board.get_quest(0)).exists


async def test_listeners_receive_committed_events_only(board, clock):
    events = []
    board.subscribe(events.append)

    with pytest.raises(Unauthorized):
        await board.create_quest(ALICE, **DEFINITION)
    assert events == []

    clock.now = 150
    await board.create_quest(ADMIN, **DEFINITION)
    await board.edit_quest(ADMIN, 0, **{**DEFINITION, "title": "Renamed"})
    await board.join_quest(ALICE, 0)
    await board.submit_quest(ALICE, 0)
    await board.delete_quest(ADMIN, 0)

    assert [type(e) for e in events] == [
        QuestCreated,
        QuestEdited,
        QuestJoined,
        QuestSubmitted,
        QuestDeleted,
    ]
    assert all(e.quest_id == 0 and e.at == 150 for e in events)
    assert events[2].number_of_players == 1
    assert events[2].caller == Address(ALICE)


async def test_failing_listener_does_not_undo_mutation(board, caplog):
    def boom(event):
        raise RuntimeError("listener down")

    board.subscribe(boom)
    quest = await board.create_quest(ADMIN, **DEFINITION)

    assert (await board.get_quest(quest.quest_id)).exists
    assert "Listener" in caplog.text


async def test_concurrent_joins_are_serialized(board, clock):
    await board.create_quest(ADMIN, **DEFINITION)
    clock.now = 150

    results = await asyncio.gather(
        *(board.join_quest(ALICE, 0) for _ in range(5)), return_exceptions=True
    )

    assert sum(1 for r in results if not isinstance(r, Exception)) == 1
    assert (await board.get_quest(0)).number_of_players == 1


async def test_zero_reward_quest_is_created_but_absent(board, clock, caplog):
    quest = await board.create_quest(ADMIN, **{**DEFINITION, "reward": 0})
    assert quest.quest_id == 0
    assert await board.next_quest_id() == 1
    assert "reads as absent" in caplog.text
    clock.now = 150
    with pytest.raises(QuestNotFound):
        await board.join_quest(ALICE, 0)
