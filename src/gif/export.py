"""
Requests to the rendering service (lila-gif).

Every call issues exactly one HTTP request and returns its result without reading the body:
the caller streams the image onwards (or closes it).
"""

from typing import Optional

import httpx

from src.chess.replay import check_square, move_keys, read_check_square, replay
from src.core.models import GameModel, Pov
from src.core.shared_types import Color, Variant
from src.gif.frames import game_frames
from src.gif.move_times import TARGET_MEDIAN_TIME
from src.gif.payloads import AnimationRequest, ThumbnailQuery
from src.gif.upstream import UpstreamResult, upstream_response
from src.users.light_user_api import LightUserApi
from src.users.namer import player_text

RENDERER_LINK = "https://github.com/lichess-org/lila-gif"


class GifExport:
    """Client of the rendering service.

    The httpx.AsyncClient is the execution context of every call: its timeout and
    connection pool apply, and it is closed by whoever created it.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        light_user_api: LightUserApi,
        base_url: str,
        url: str,
    ) -> None:
        self.client = client
        self.light_user_api = light_user_api
        self.base_url = base_url.rstrip("/")
        self.url = url.rstrip("/")

    async def from_pov(
        self,
        pov: Pov,
        initial_fen: Optional[str],
        theme: str,
        piece: str,
    ) -> UpstreamResult:
        """Animation of the whole game, seen from the side of the pov."""
        game = pov.game
        await self.light_user_api.preload_many(game.user_ids)

        body = AnimationRequest(
            white=player_text(game.white, self.light_user_api.sync, with_rating=True),
            black=player_text(game.black, self.light_user_api.sync, with_rating=True),
            comment=f"{self.base_url}/{game.id} rendered with {RENDERER_LINK}",
            orientation=pov.color,
            delay=TARGET_MEDIAN_TIME,
            frames=game_frames(game, initial_fen),
            theme=theme,
            piece=piece,
        )
        request = self.client.build_request(
            "POST", f"{self.url}/game.gif", json=body.to_json()
        )
        return await self._stream(f"pov {game.id}", request)

    async def game_thumbnail(
        self, game: GameModel, theme: str, piece: str
    ) -> UpstreamResult:
        """Current position of the game, with the player names."""
        await self.light_user_api.preload_many(game.user_ids)

        game_replay = replay(game.moves_san, game.variant, game.initial_fen)
        last_move = game_replay.last_move
        query = ThumbnailQuery(
            fen=game_replay.board.fen(),
            white=player_text(game.white, self.light_user_api.sync, with_rating=True),
            black=player_text(game.black, self.light_user_api.sync, with_rating=True),
            orientation=game.natural_orientation,
            last_move=move_keys(last_move) if last_move else None,
            check=check_square(game_replay.board),
            theme=theme,
            piece=piece,
        )
        return await self._thumbnail(f"gameThumbnail {game.id}", query)

    async def thumbnail(
        self,
        fen: str,
        last_move: Optional[str],
        orientation: Color,
        variant: Variant,
        theme: str,
        piece: str,
    ) -> UpstreamResult:
        """Any position. The FEN is passed on as given."""
        query = ThumbnailQuery(
            fen=fen,
            orientation=orientation,
            last_move=last_move,
            check=read_check_square(variant, fen),
            theme=theme,
            piece=piece,
        )
        return await self._thumbnail(f"thumbnail {fen}", query)

    async def _thumbnail(self, name: str, query: ThumbnailQuery) -> UpstreamResult:
        request = self.client.build_request(
            "GET", f"{self.url}/image.gif", params=query.to_params()
        )
        return await self._stream(name, request)

    async def _stream(self, name: str, request: httpx.Request) -> UpstreamResult:
        response = await self.client.send(request, stream=True)
        return await upstream_response(name, response)
