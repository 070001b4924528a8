"""Shared dependency providers for FastAPI routers."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Header, HTTPException, status

from questline.core.settings import Settings, load_settings
from questline.domain.models.AddressModel import Address
from questline.domain.models.BoardModel import BoardContext
from questline.domain.service import QuestBoard
from questline.infra.db import get_db
from questline.infra.memory import QuestsRepoMemory, StatusesRepoMemory
from questline.infra.mongo import QuestsRepoMongo, StatusesRepoMongo

logger = logging.getLogger(__name__)

board: Optional[QuestBoard] = None


def build_board(settings: Settings) -> QuestBoard:
    """Wire a QuestBoard against the configured store backend."""
    context = BoardContext.for_admin(settings.admin_address)
    if settings.store_backend == "mongo":
        db = get_db()
        logger.info("Using MongoDB quest store")
        return QuestBoard(context, QuestsRepoMongo(db), StatusesRepoMongo(db))

    logger.info("Using in-memory quest store")
    return QuestBoard(context, QuestsRepoMemory(), StatusesRepoMemory())


async def get_board() -> QuestBoard:
    """Expose the singleton quest board for dependency injection."""
    global board
    if board is None:
        board = build_board(load_settings())
    return board


async def get_caller(
    x_caller_address: Optional[str] = Header(default=None, alias="X-Caller-Address"),
) -> Address:
    """Resolve the caller identity supplied by the execution context."""
    if not x_caller_address:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing caller address",
        )
    try:
        return Address.parse(x_caller_address)
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)
        ) from err
