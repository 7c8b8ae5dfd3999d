"""HTTP routes streaming the rendered images to the client."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from src.api.deps import get_export_service
from src.api.models import (
    DEFAULT_PIECE,
    DEFAULT_THEME,
    GameGifRequest,
    GameThumbnailRequest,
    PositionThumbnailRequest,
)
from src.core.shared_types import Color, Variant
from src.gif.upstream import Failure, UpstreamResult
from src.services.export_service import GifExportService

router = APIRouter(tags=["export"])


def stream_result(result: UpstreamResult) -> StreamingResponse:
    """Pass the image through as it arrives. The upstream connection is released even if the client goes away."""
    if isinstance(result, Failure):
        raise result.error
    return StreamingResponse(
        result.stream,
        media_type=result.stream.media_type,
        background=BackgroundTask(result.stream.aclose),
    )


@router.get("/game/export/gif/thumbnail/{game_id}.gif")
async def game_thumbnail(
    game_id: str,
    theme: str = DEFAULT_THEME,
    piece: str = DEFAULT_PIECE,
    service: GifExportService = Depends(get_export_service),
) -> StreamingResponse:
    request = GameThumbnailRequest(game_id=game_id, theme=theme, piece=piece)
    return stream_result(await service.game_thumbnail(request))


@router.get("/game/export/gif/{game_id}.gif")
async def game_gif(
    game_id: str,
    color: Color = Color.WHITE,
    theme: str = DEFAULT_THEME,
    piece: str = DEFAULT_PIECE,
    service: GifExportService = Depends(get_export_service),
) -> StreamingResponse:
    request = GameGifRequest(game_id=game_id, color=color, theme=theme, piece=piece)
    return stream_result(await service.game_gif(request))


@router.get("/export/fen.gif")
async def position_thumbnail(
    fen: str,
    color: Color = Color.WHITE,
    last_move: Optional[str] = Query(default=None, alias="lastMove"),
    variant: str = Variant.STANDARD.value,
    theme: str = DEFAULT_THEME,
    piece: str = DEFAULT_PIECE,
    service: GifExportService = Depends(get_export_service),
) -> StreamingResponse:
    request = PositionThumbnailRequest(
        fen=fen,
        last_move=last_move,
        orientation=color,
        variant=variant,
        theme=theme,
        piece=piece,
    )
    return stream_result(await service.position_thumbnail(request))
