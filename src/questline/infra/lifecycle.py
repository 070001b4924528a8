import logging

from questline.infra.db import close_client, get_client, ping

logger = logging.getLogger(__name__)


async def on_startup():
    get_client()
    if not await ping():
        logger.error("MongoDB is unreachable; quest operations will fail")


async def on_shutdown():
    await close_client()
