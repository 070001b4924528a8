import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

import questline.api.deps as deps
from questline.api.routers.board import router as board_router
from questline.api.routers.quests import router as quests_router
from questline.core.settings import load_settings
from questline.domain.errors import (
    AlreadyActedOnQuest,
    MustJoinFirst,
    QuestError,
    QuestNotFound,
    QuestWindowClosed,
    SubmissionDeadlinePassed,
    Unauthorized,
)
from questline.infra import lifecycle

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[QuestError], int] = {
    Unauthorized: 403,
    QuestNotFound: 404,
    QuestWindowClosed: 409,
    AlreadyActedOnQuest: 409,
    MustJoinFirst: 409,
    SubmissionDeadlinePassed: 409,
}


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = load_settings()
    mongo = settings.store_backend == "mongo"
    if mongo:
        await lifecycle.on_startup()
    board = await deps.get_board()
    if mongo:
        await board.quests_repo.ensure_indexes()
        await board.statuses_repo.ensure_indexes()
    logger.info("Quest board ready; admin is %s", board.admin)
    try:
        yield
    finally:
        if mongo:
            await lifecycle.on_shutdown()


app = FastAPI(title="Questline API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(QuestError)
async def quest_error_handler(_: Request, exc: QuestError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS.get(type(exc), 400),
        content={"detail": exc.message, "error": exc.kind},
    )


# Routers
app.include_router(board_router)
app.include_router(quests_router)


@app.get("/healthz")
def healthz():
    return {"ok": True}
