from __future__ import annotations

import logging

import uvicorn

from questline.core.logging import configure_logging
from questline.core.settings import load_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Starting Questline API on %s:%s (store=%s)",
        settings.api_host,
        settings.api_port,
        settings.store_backend,
    )
    uvicorn.run(
        "questline.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
