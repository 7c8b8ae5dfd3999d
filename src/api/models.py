"""Request models"""

import re
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Variant

DEFAULT_THEME = "brown"
DEFAULT_PIECE = "cburnett"

THEMES = ("blue", "brown", "green", "ic", "pink", "purple")
PIECE_SETS = (
    "alpha",
    "anarcandy",
    "caliente",
    "california",
    "cardinal",
    "cburnett",
    "celtic",
    "chess7",
    "chessnut",
    "companion",
    "disguised",
    "dubrovny",
    "fantasy",
    "fresca",
    "gioco",
    "governor",
    "horsey",
    "icpieces",
    "kosal",
    "leipzig",
    "letter",
    "maestro",
    "merida",
    "mpchess",
    "pirouetti",
    "pixel",
    "reillycraig",
    "riohacha",
    "shapes",
    "spatial",
    "staunty",
    "tatiana",
)

# origin and destination squares, e.g. "e2e4"
LAST_MOVE_PATTERN = re.compile(r"^([a-h][1-8]){2}$")


# --- REQUEST MODELS ---
class RenderOptions(BaseModel):
    """Looks of the rendered board. Unknown names fall back to the defaults."""

    theme: str = DEFAULT_THEME
    piece: str = DEFAULT_PIECE

    @field_validator("theme", mode="before")
    @classmethod
    def validate_theme(cls, value: Any) -> str:
        return value if value in THEMES else DEFAULT_THEME

    @field_validator("piece", mode="before")
    @classmethod
    def validate_piece(cls, value: Any) -> str:
        return value if value in PIECE_SETS else DEFAULT_PIECE


class GameGifRequest(RenderOptions):
    game_id: str
    color: Color = Color.WHITE


class GameThumbnailRequest(RenderOptions):
    game_id: str


class PositionThumbnailRequest(RenderOptions):
    fen: str
    last_move: Optional[str] = None
    orientation: Color = Color.WHITE
    variant: Variant = Variant.STANDARD

    @field_validator("fen", mode="before")
    @classmethod
    def validate_fen(cls, value: Any) -> str:
        """Underscores are accepted in place of spaces, so that a FEN fits in a URL unescaped."""
        if not isinstance(value, str):
            raise InvalidRequestError(f"FEN must be a string, got {value!r}.")
        fen = value.replace("_", " ").strip()
        if not fen:
            raise InvalidRequestError("FEN string must not be empty.")

        # 8 ranks, plus the pocket as a 9th part in some crazyhouse FENs
        ranks = fen.split(" ")[0].split("/")
        if len(ranks) not in (8, 9):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a FEN: the board must have 8 ranks."
            )
        return fen

    @field_validator("last_move", mode="before")
    @classmethod
    def validate_last_move(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        if not isinstance(value, str) or not LAST_MOVE_PATTERN.match(value):
            raise InvalidRequestError(
                f"Cannot interpret last move: {value!r} as two square names."
            )
        return value

    @field_validator("variant", mode="before")
    @classmethod
    def validate_variant(cls, value: Any) -> Variant:
        if isinstance(value, Variant):
            return value
        try:
            return Variant(value)
        except ValueError:
            raise InvalidRequestError(
                f"Unknown variant {value!r}. Pick one from {', '.join(Variant)}."
            ) from None
