"""Protocol repositories (implemented with SQLAlchemy in sql_repository.py, with dictionaries in tests)"""

from typing import Protocol

from src.core.models import GameModel, LightUser, UserId


class GameRepository(Protocol):
    """Persistence of the games to export"""

    def get_game(self, game_id: str) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> GameModel:
        """Store a new game and return the stored data."""
        ...


class UserRepository(Protocol):
    """Read access to the users, for display names"""

    def get_light_users(self, user_ids: list[UserId]) -> list[LightUser]:
        """Users with the given IDs. Unknown IDs are left out."""
        ...

    def create_user(self, user: LightUser) -> LightUser:
        """Store a new user."""
        ...
