from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest
import pytest_asyncio

from questline.api import deps
from questline.api.main import app
from questline.domain.models.BoardModel import BoardContext
from questline.domain.service import QuestBoard
from questline.infra.memory import QuestsRepoMemory, StatusesRepoMemory

TEST_ADMIN_ADDRESS = "0x" + "a" * 40


class _Clock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


@pytest.fixture()
def api_clock() -> _Clock:
    return _Clock()


@pytest.fixture(autouse=True)
def configure_board(api_clock: _Clock) -> Any:
    # Fresh in-memory board per test.
    deps.board = QuestBoard(
        BoardContext.for_admin(TEST_ADMIN_ADDRESS),
        QuestsRepoMemory(),
        StatusesRepoMemory(),
        clock=api_clock,
    )
    yield deps.board
    deps.board = None


@pytest_asyncio.fixture()
async def api_client() -> AsyncIterator[Any]:
    from httpx import ASGITransport, AsyncClient

    transport: Any = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"X-Caller-Address": TEST_ADMIN_ADDRESS}
