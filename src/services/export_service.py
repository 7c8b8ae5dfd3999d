"""Orchestration of communication from API router to persistence layer and rendering client."""

import asyncio

from src.api.models import (
    GameGifRequest,
    GameThumbnailRequest,
    PositionThumbnailRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel, Pov
from src.db.repository import GameRepository
from src.gif.export import GifExport
from src.gif.upstream import UpstreamResult


class GifExportService:
    """Orchestration of layers for exporting games as images."""

    def __init__(self, repository: GameRepository, export: GifExport) -> None:
        self.repo = repository
        self.export = export

    # -- API routes logic ---
    async def game_gif(self, request: GameGifRequest) -> UpstreamResult:
        """Animated GIF of a stored game, seen from the requested color."""
        game = await self._fetch_game(request.game_id)
        return await self.export.from_pov(
            Pov(game=game, color=request.color),
            initial_fen=game.initial_fen,
            theme=request.theme,
            piece=request.piece,
        )

    async def game_thumbnail(self, request: GameThumbnailRequest) -> UpstreamResult:
        """Still image of the current position of a stored game."""
        game = await self._fetch_game(request.game_id)
        return await self.export.game_thumbnail(
            game, theme=request.theme, piece=request.piece
        )

    async def position_thumbnail(
        self, request: PositionThumbnailRequest
    ) -> UpstreamResult:
        """Still image of any position (no game involved)."""
        return await self.export.thumbnail(
            fen=request.fen,
            last_move=request.last_move,
            orientation=request.orientation,
            variant=request.variant,
            theme=request.theme,
            piece=request.piece,
        )

    # -- Internal helpers --
    async def _fetch_game(self, game_id: str) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails.

        The repository is synchronous, so the lookup runs in a worker thread.
        """
        game = await asyncio.to_thread(self.repo.get_game, game_id)
        if game is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game
