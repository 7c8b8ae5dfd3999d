"""Bodies and query strings sent to the rendering service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.core.shared_types import Centis, Color


class Frame(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    fen: str
    last_move: Optional[str] = Field(default=None, serialization_alias="lastMove")
    check: Optional[str] = None
    delay: Optional[Centis] = None


class AnimationRequest(BaseModel):
    """JSON body of POST /game.gif"""

    white: str
    black: str
    comment: str
    orientation: Color
    delay: Centis  # default delay, for frames without their own
    frames: list[Frame]
    theme: str
    piece: str

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ThumbnailQuery(BaseModel):
    """Query string of GET /image.gif"""

    model_config = ConfigDict(populate_by_name=True)

    fen: str
    orientation: Color
    white: Optional[str] = None
    black: Optional[str] = None
    last_move: Optional[str] = Field(default=None, serialization_alias="lastMove")
    check: Optional[str] = None
    theme: Optional[str] = None
    piece: Optional[str] = None

    def to_params(self) -> dict[str, str]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
