"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Iterator

import httpx
import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.models import GameModel, LightUser, PlayerModel
from src.core.shared_types import Variant
from src.db.schema import Base
from src.gif.export import GifExport
from src.gif.upstream import Success, UpstreamResult
from src.users.light_user_api import LightUserApi

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Iterator[Session]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


# --- SHARED TEST DATA ---
class MockUserRepository:
    """Mock the UserRepository using a dictionary of users, counting the lookups."""

    def __init__(self, users: list[LightUser] | None = None) -> None:
        self._users = {user.id: user for user in users or []}
        self.requested: list[list[str]] = []

    def get_light_users(self, user_ids: list[str]) -> list[LightUser]:
        self.requested.append(list(user_ids))
        return [self._users[uid] for uid in user_ids if uid in self._users]

    def create_user(self, user: LightUser) -> LightUser:
        self._users[user.id] = user
        return user


@pytest.fixture
def users() -> list[LightUser]:
    return [
        LightUser(id="magnus", name="DrNykterstein", title="GM"),
        LightUser(id="newbie", name="Newbie"),
    ]


@pytest.fixture
def user_repository(users: list[LightUser]) -> MockUserRepository:
    return MockUserRepository(users)


@pytest.fixture
def scholars_mate() -> GameModel:
    """Short finished game, ending in checkmate, with clock data."""
    return GameModel(
        id="abcd1234",
        white=PlayerModel(user_id="magnus", rating=2850),
        black=PlayerModel(user_id="newbie", rating=1500, provisional=True),
        moves_san=["e4", "e5", "Qh5", "Nc6", "Bc4", "Nf6", "Qxf7#"],
        variant=Variant.STANDARD,
        move_times=[30, 50, 120, 300, 90, 600, 10],
    )


class MockGameRepository:
    """Mock the GameRepository using a dictionary of game models."""

    def __init__(self, games: list[GameModel] | None = None) -> None:
        self._games = {game.id: game for game in games or []}

    def get_game(self, game_id: str) -> GameModel | None:
        return self._games.get(game_id)

    def create_game(self, game: GameModel) -> GameModel:
        self._games[game.id] = game
        return game


GIF_BYTES = b"GIF89a" + b"\x00" * 64


class RenderingServiceStub:
    """Stand-in for the rendering service: records the requests and answers with a fixed status."""

    def __init__(self, status_code: int = 200, content: bytes = GIF_BYTES) -> None:
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, content=b"service unavailable")
        return httpx.Response(
            200, content=self.content, headers={"content-type": "image/gif"}
        )

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def rendering_service() -> RenderingServiceStub:
    return RenderingServiceStub()


@pytest.fixture
def export(
    rendering_service: RenderingServiceStub, user_repository: MockUserRepository
) -> GifExport:
    return GifExport(
        rendering_service.client(),
        LightUserApi(user_repository),
        base_url="http://site.test",
        url="http://gif.test/",
    )


async def read_all(result: UpstreamResult) -> bytes:
    """Drain a successful result."""
    assert isinstance(result, Success)
    return b"".join([chunk async for chunk in result.stream])
