from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict

import pytest

pytestmark = pytest.mark.asyncio

ALICE = {"X-Caller-Address": "0x" + "1" * 40}
BOB = {"X-Caller-Address": "0x" + "2" * 40}


def _definition(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "title": "Harvest Moon",
        "reward": 5,
        "number_of_rewards": 10,
        "start_time": 100,
        "end_time": 200,
    }
    payload.update(overrides)
    return payload


async def _create_quest(api_client: Any, admin_headers: dict[str, str], **overrides: Any) -> Dict[str, Any]:
    response = await api_client.post("/v1/quests", json=_definition(**overrides), headers=admin_headers)
    assert response.status_code == HTTPStatus.CREATED, response.text
    return response.json()


async def test_create_quest_returns_record(api_client: Any, admin_headers: dict[str, str]) -> None:
    quest = await _create_quest(api_client, admin_headers)

    assert quest == {
        "quest_id": 0,
        "title": "Harvest Moon",
        "reward": 5,
        "number_of_rewards": 10,
        "number_of_players": 0,
        "start_time": 100,
        "end_time": 200,
        "exists": True,
    }


async def test_create_quest_requires_admin(api_client: Any) -> None:
    response = await api_client.post("/v1/quests", json=_definition(), headers=ALICE)

    assert response.status_code == HTTPStatus.FORBIDDEN, response.text
    assert response.json()["error"] == "Unauthorized"


async def test_missing_caller_header_is_unauthorized(api_client: Any) -> None:
    response = await api_client.post("/v1/quests", json=_definition())
    assert response.status_code == HTTPStatus.UNAUTHORIZED


async def test_malformed_caller_header_is_bad_request(api_client: Any) -> None:
    response = await api_client.post("/v1/quests", json=_definition(), headers={"X-Caller-Address": "0xnothex"})
    assert response.status_code == HTTPStatus.BAD_REQUEST


async def test_negative_reward_fails_validation(api_client: Any, admin_headers: dict[str, str]) -> None:
    response = await api_client.post("/v1/quests", json=_definition(reward=-1), headers=admin_headers)
    assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


async def test_get_unknown_quest_returns_zero_record(api_client: Any) -> None:
    response = await api_client.get("/v1/quests/42")

    assert response.status_code == HTTPStatus.OK
    body = response.json()
    assert body["exists"] is False
    assert body["reward"] == 0 and body["quest_id"] == 42


async def test_edit_quest_overwrites_fields(api_client: Any, admin_headers: dict[str, str], api_clock: Any) -> None:
    await _create_quest(api_client, admin_headers)
    api_clock.now = 150
    await api_client.post("/v1/quests/0:join", headers=ALICE)

    response = await api_client.put(
        "/v1/quests/0",
        json=_definition(title="Renamed", reward=7, start_time=300, end_time=400),
        headers=admin_headers,
    )

    assert response.status_code == HTTPStatus.OK, response.text
    body = response.json()
    assert (body["title"], body["reward"], body["start_time"], body["end_time"]) == ("Renamed", 7, 300, 400)
    assert body["number_of_players"] == 1


async def test_edit_missing_quest_is_not_found(api_client: Any, admin_headers: dict[str, str]) -> None:
    response = await api_client.put("/v1/quests/3", json=_definition(), headers=admin_headers)
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json()["error"] == "QuestNotFound"


async def test_edit_by_non_admin_is_forbidden_even_when_missing(api_client: Any) -> None:
    response = await api_client.put("/v1/quests/3", json=_definition(), headers=ALICE)
    assert response.status_code == HTTPStatus.FORBIDDEN


async def test_lifecycle_scenario(api_client: Any, admin_headers: dict[str, str], api_clock: Any) -> None:
    await _create_quest(api_client, admin_headers)

    api_clock.now = 150
    joined = await api_client.post("/v1/quests/0:join", headers=ALICE)
    assert joined.status_code == HTTPStatus.OK, joined.text
    assert joined.json()["number_of_players"] == 1

    status = await api_client.get(f"/v1/quests/0/participants/{ALICE['X-Caller-Address']}")
    assert status.json()["status"] == "JOINED"

    api_clock.now = 180
    submitted = await api_client.post("/v1/quests/0:submit", headers=ALICE)
    assert submitted.status_code == HTTPStatus.OK, submitted.text
    assert submitted.json() == {
        "address": ALICE["X-Caller-Address"],
        "quest_id": 0,
        "status": "SUBMITTED",
    }

    api_clock.now = 250
    late = await api_client.post("/v1/quests/0:join", headers=BOB)
    assert late.status_code == HTTPStatus.CONFLICT
    assert late.json()["error"] == "QuestWindowClosed"


async def test_double_join_conflicts(api_client: Any, admin_headers: dict[str, str], api_clock: Any) -> None:
    await _create_quest(api_client, admin_headers)
    api_clock.now = 150
    await api_client.post("/v1/quests/0:join", headers=ALICE)

    again = await api_client.post("/v1/quests/0:join", headers=ALICE)

    assert again.status_code == HTTPStatus.CONFLICT
    assert again.json()["error"] == "AlreadyActedOnQuest"
    quest = await api_client.get("/v1/quests/0")
    assert quest.json()["number_of_players"] == 1


async def test_submit_without_join_conflicts(api_client: Any, admin_headers: dict[str, str], api_clock: Any) -> None:
    await _create_quest(api_client, admin_headers)
    api_clock.now = 150

    response = await api_client.post("/v1/quests/0:submit", headers=ALICE)

    assert response.status_code == HTTPStatus.CONFLICT
    assert response.json()["error"] == "MustJoinFirst"


async def test_submit_after_deadline_conflicts(api_client: Any, admin_headers: dict[str, str], api_clock: Any) -> None:
    await _create_quest(api_client, admin_headers)
    api_clock.now = 150
    await api_client.post("/v1/quests/0:join", headers=ALICE)
    api_clock.now = 201

    response = await api_client.post("/v1/quests/0:submit", headers=ALICE)

    assert response.status_code == HTTPStatus.CONFLICT
    assert response.json()["error"] == "SubmissionDeadlinePassed"


async def test_delete_leaves_orphaned_participants(api_client: Any, admin_headers: dict[str, str], api_clock: Any) -> None:
    await _create_quest(api_client, admin_headers)
    api_clock.now = 150
    await api_client.post("/v1/quests/0:join", headers=ALICE)

    deleted = await api_client.delete("/v1/quests/0", headers=admin_headers)
    assert deleted.status_code == HTTPStatus.NO_CONTENT

    join = await api_client.post("/v1/quests/0:join", headers=BOB)
    assert join.status_code == HTTPStatus.NOT_FOUND

    again = await api_client.delete("/v1/quests/0", headers=admin_headers)
    assert again.status_code == HTTPStatus.NOT_FOUND

    participants = await api_client.get("/v1/quests/0/participants")
    assert participants.status_code == HTTPStatus.OK
    assert participants.json() == {
        "quest_id": 0,
        "participants": [
            {"address": ALICE["X-Caller-Address"], "quest_id": 0, "status": "JOINED"}
        ],
    }


async def test_participant_status_defaults_to_not_joined(api_client: Any) -> None:
    response = await api_client.get("/v1/quests/9/participants/carol")
    assert response.status_code == HTTPStatus.OK
    assert response.json() == {"address": "carol", "quest_id": 9, "status": "NOT_JOINED"}


async def test_participant_status_rejects_bad_address(api_client: Any) -> None:
    response = await api_client.get("/v1/quests/9/participants/0x12")
    assert response.status_code == HTTPStatus.BAD_REQUEST
