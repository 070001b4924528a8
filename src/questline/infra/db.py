# questline/infra/db.py
from __future__ import annotations

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from questline.infra.settings import (
    DB_NAME,
    MONGO_APPNAME,
    MONGO_OP_TIMEOUT_MS,
    MONGO_SERVER_SELECTION_TIMEOUT_MS,
    MONGODB_URI,
)

logger = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    """Return a cached AsyncIOMotorClient (lazy init)."""
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(
            MONGODB_URI,
            appname=MONGO_APPNAME,
            serverSelectionTimeoutMS=MONGO_SERVER_SELECTION_TIMEOUT_MS,
            socketTimeoutMS=MONGO_OP_TIMEOUT_MS,
            connectTimeoutMS=MONGO_OP_TIMEOUT_MS,
            uuidRepresentation="standard",
        )
    return _client


def get_db() -> AsyncIOMotorDatabase:
    return get_client()[DB_NAME]


async def ping() -> bool:
    try:
        await get_client().admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("Mongo ping failed: %s", e)
        return False


async def close_client() -> None:
    """Close the cached client (useful for app shutdown / tests)."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
