"""Implementation of the repositories using SQLAlchemy"""

from dataclasses import asdict

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel, LightUser, PlayerModel, UserId
from src.core.shared_types import Variant
from src.db.schema import DBGame, DBUser


class SQLGameRepository:
    """Games stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: str) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self.db.scalar(select(DBGame).where(DBGame.id == game_id))
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> GameModel:
        """Store a new game and return the stored data."""
        game_db = DBGame(
            id=game.id,
            variant=game.variant.value,
            initial_fen=game.initial_fen,
            moves_san=game.moves_san,
            move_times=game.move_times,
            white=asdict(game.white),
            black=asdict(game.black),
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            id=game_db.id,
            variant=Variant(game_db.variant),
            initial_fen=game_db.initial_fen,
            moves_san=list(game_db.moves_san),
            move_times=list(game_db.move_times) if game_db.move_times is not None else None,
            white=PlayerModel(**game_db.white),
            black=PlayerModel(**game_db.black),
        )


class SQLUserRepository:
    """Users stored using SQL"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_light_users(self, user_ids: list[UserId]) -> list[LightUser]:
        if not user_ids:
            return []
        query = select(DBUser).where(DBUser.id.in_(user_ids))
        return [self._to_model(user_db) for user_db in self.db.scalars(query)]

    def create_user(self, user: LightUser) -> LightUser:
        user_db = DBUser(id=user.id, username=user.name, title=user.title)
        self.db.add(user_db)
        self.db.commit()
        self.db.refresh(user_db)
        return self._to_model(user_db)

    def _to_model(self, user_db: DBUser) -> LightUser:
        return LightUser(id=user_db.id, name=user_db.username, title=user_db.title)
