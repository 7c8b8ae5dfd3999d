"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) use the models defined here
(decouples the data model of the DB layer from what the export logic needs to know about a game).
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.shared_types import Centis, Color, Variant

UserId = str


@dataclass(frozen=True)
class LightUser:
    """Minimal user record needed to display a name."""

    id: UserId
    name: str
    title: Optional[str] = None

    @property
    def title_name(self) -> str:
        return f"{self.title} {self.name}" if self.title else self.name


@dataclass(frozen=True)
class PlayerModel:
    """One side of a game. Either a registered user, an engine (ai_level) or a free-text name."""

    user_id: Optional[UserId] = None
    rating: Optional[int] = None
    provisional: bool = False
    ai_level: Optional[int] = None
    name: Optional[str] = None

    @property
    def is_ai(self) -> bool:
        return self.ai_level is not None

    @property
    def is_human(self) -> bool:
        return not self.is_ai


@dataclass
class GameModel:
    """Transport-safe representation of a played (or ongoing) game."""

    id: str
    white: PlayerModel
    black: PlayerModel
    moves_san: list[str] = field(default_factory=list)
    variant: Variant = Variant.STANDARD
    initial_fen: Optional[str] = None
    # one entry per ply, None when the game was played without a clock
    move_times: Optional[list[Centis]] = None

    @property
    def user_ids(self) -> list[UserId]:
        return [p.user_id for p in (self.white, self.black) if p.user_id is not None]

    @property
    def natural_orientation(self) -> Color:
        """White at the bottom, unless only the white side is an engine."""
        if self.variant is Variant.RACING_KINGS:
            return Color.WHITE
        if self.white.is_human or self.black.is_ai:
            return Color.WHITE
        return Color.BLACK


@dataclass(frozen=True)
class Pov:
    """A game seen from the side of one color."""

    game: GameModel
    color: Color
