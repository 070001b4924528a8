"""REST endpoints for the quest registry and participation tracker."""

from fastapi import APIRouter, Depends, HTTPException

import questline.api.deps as deps
from questline.api.mappers import participants_to_api, participation_to_api, quest_to_api
from questline.api.schemas import (
    ErrorBody,
    ParticipantList,
    Participation,
    Quest,
    QuestCreate,
    QuestUpdate,
)
from questline.domain.models.AddressModel import Address
from questline.domain.service import QuestBoard

router = APIRouter(prefix="/v1/quests", tags=["Quests"])

_errors = {
    401: {"description": "Missing caller address"},
    403: {"model": ErrorBody, "description": "Caller is not the admin"},
    404: {"model": ErrorBody, "description": "Quest does not exist"},
    409: {"model": ErrorBody, "description": "Participation rule violated"},
}


# --- Registry ---
@router.post("", response_model=Quest, status_code=201, responses=_errors)
async def create_quest(
    body: QuestCreate,
    caller: Address = Depends(deps.get_caller),
    board: QuestBoard = Depends(deps.get_board),
) -> Quest:
    """Define a new quest. Admin only."""
    try:
        quest = await board.create_quest(caller, **body.model_dump())
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    return quest_to_api(quest)


@router.get("/{quest_id}", response_model=Quest)
async def get_quest(quest_id: int, board: QuestBoard = Depends(deps.get_board)) -> Quest:
    """Fetch a quest record; ids that do not exist return the zero record."""
    try:
        quest = await board.get_quest(quest_id)
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    return quest_to_api(quest)


@router.put("/{quest_id}", response_model=Quest, responses=_errors)
async def edit_quest(
    quest_id: int,
    body: QuestUpdate,
    caller: Address = Depends(deps.get_caller),
    board: QuestBoard = Depends(deps.get_board),
) -> Quest:
    """Overwrite every mutable field of an existing quest. Admin only."""
    try:
        quest = await board.edit_quest(caller, quest_id, **body.model_dump())
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    return quest_to_api(quest)


@router.delete("/{quest_id}", status_code=204, responses=_errors)
async def delete_quest(
    quest_id: int,
    caller: Address = Depends(deps.get_caller),
    board: QuestBoard = Depends(deps.get_board),
) -> None:
    """Reset a quest to absent. Participant statuses are left in place."""
    try:
        await board.delete_quest(caller, quest_id)
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err


# --- Participation ---
@router.post("/{quest_id}:join", response_model=Quest, responses=_errors)
async def join_quest(
    quest_id: int,
    caller: Address = Depends(deps.get_caller),
    board: QuestBoard = Depends(deps.get_board),
) -> Quest:
    """Join an open quest."""
    try:
        quest = await board.join_quest(caller, quest_id)
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    return quest_to_api(quest)


@router.post("/{quest_id}:submit", response_model=Participation, responses=_errors)
async def submit_quest(
    quest_id: int,
    caller: Address = Depends(deps.get_caller),
    board: QuestBoard = Depends(deps.get_board),
) -> Participation:
    """Submit completion of a joined quest before its end time."""
    try:
        await board.submit_quest(caller, quest_id)
        participation = await board.get_participation(caller, quest_id)
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    return participation_to_api(participation)


@router.get("/{quest_id}/participants", response_model=ParticipantList)
async def list_participants(
    quest_id: int, board: QuestBoard = Depends(deps.get_board)
) -> ParticipantList:
    try:
        participations = await board.list_participants(quest_id)
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    return participants_to_api(quest_id, participations)


@router.get("/{quest_id}/participants/{address}", response_model=Participation)
async def get_participant_status(
    quest_id: int, address: str, board: QuestBoard = Depends(deps.get_board)
) -> Participation:
    try:
        participation = await board.get_participation(address, quest_id)
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    return participation_to_api(participation)
