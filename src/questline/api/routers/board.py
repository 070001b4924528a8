"""Read-only board metadata."""

from __future__ import annotations

from fastapi import APIRouter, Depends

import questline.api.deps as deps
from questline.api.schemas import BoardInfo
from questline.domain.service import QuestBoard

router = APIRouter(prefix="/v1/board", tags=["Board"])


@router.get("", response_model=BoardInfo)
async def get_board_info(board: QuestBoard = Depends(deps.get_board)) -> BoardInfo:
    """Return the admin address and the id the next created quest will receive."""
    return BoardInfo(admin=str(board.admin), next_quest_id=await board.next_quest_id())
