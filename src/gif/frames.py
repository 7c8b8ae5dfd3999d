"""Frames of the animation: one per position of the game, with the delay before the next one."""

from typing import Optional, Sequence

from src.chess.replay import Replay, check_square, replay
from src.core.models import GameModel
from src.core.shared_types import Centis
from src.gif.move_times import scale_move_times
from src.gif.payloads import Frame

# the final position stays on screen longer
LAST_FRAME_DELAY: Centis = 500


def build_frames(game_replay: Replay, move_times: Sequence[Centis]) -> list[Frame]:
    """Zip the replayed positions with the scaled move times.

    Step i (the initial position being step 0) gets scaled time i. Missing times leave the delay unset.
    """
    steps = [(game_replay.initial, None)] + [
        (step.board, step.uci) for step in game_replay.steps
    ]
    delays: list[Optional[Centis]] = scale_move_times(move_times)[: len(steps)]
    delays += [None] * (len(steps) - len(delays))

    frames = []
    for index, ((board, uci), delay) in enumerate(zip(steps, delays)):
        if index == len(steps) - 1:
            delay = LAST_FRAME_DELAY
        frames.append(
            Frame(fen=board.fen(), last_move=uci, check=check_square(board), delay=delay)
        )
    return frames


def game_frames(game: GameModel, initial_fen: Optional[str] = None) -> list[Frame]:
    """Replay the game (from the given FEN, else its own initial FEN) and build its frames."""
    game_replay = replay(game.moves_san, game.variant, initial_fen or game.initial_fen)
    return build_frames(game_replay, game.move_times or [])
