"""
Chess rules needed by the export: replaying a game and reading positions.

All of it is delegated to python-chess. This module only translates between our
types (Variant, SAN move lists, FEN strings) and python-chess boards.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import chess
import chess.variant

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Variant

logger = logging.getLogger(__name__)

BOARD_CLASSES: dict[Variant, type[chess.Board]] = {
    Variant.STANDARD: chess.Board,
    Variant.CHESS960: chess.Board,
    Variant.FROM_POSITION: chess.Board,
    Variant.ANTICHESS: chess.variant.AntichessBoard,
    Variant.KING_OF_THE_HILL: chess.variant.KingOfTheHillBoard,
    Variant.THREE_CHECK: chess.variant.ThreeCheckBoard,
    Variant.ATOMIC: chess.variant.AtomicBoard,
    Variant.HORDE: chess.variant.HordeBoard,
    Variant.RACING_KINGS: chess.variant.RacingKingsBoard,
    Variant.CRAZYHOUSE: chess.variant.CrazyhouseBoard,
}


def new_board(variant: Variant, fen: Optional[str] = None) -> chess.Board:
    """Board of the given variant, set up from the FEN (or the variant's starting position).

    Raises InvalidRequestError if the FEN cannot be read.
    """
    board_class = BOARD_CLASSES[variant]
    try:
        return board_class(
            fen or board_class.starting_fen,
            chess960=variant is Variant.CHESS960,
        )
    except ValueError as e:
        raise InvalidRequestError(f"Cannot read FEN {fen!r} as {variant}: {e}") from e


def check_square(board: chess.Board) -> Optional[str]:
    """Name of the square of the king in check, if the side to move is in check."""
    if not board.is_check():
        return None
    king = board.king(board.turn)
    return chess.square_name(king) if king is not None else None


def move_keys(move: chess.Move) -> str:
    """Origin and destination squares, e.g. 'e2e4'. A drop uses its square twice."""
    if move.drop is not None:
        return chess.square_name(move.to_square) * 2
    return chess.square_name(move.from_square) + chess.square_name(move.to_square)


@dataclass(frozen=True)
class ReplayStep:
    """Position reached after playing a move."""

    board: chess.Board
    move: chess.Move
    uci: str


@dataclass
class Replay:
    initial: chess.Board
    steps: list[ReplayStep] = field(default_factory=list)
    # SAN move that stopped the replay, if any
    invalid_move: Optional[str] = None

    @property
    def board(self) -> chess.Board:
        """Current position, after the last valid move."""
        return self.steps[-1].board if self.steps else self.initial

    @property
    def last_move(self) -> Optional[chess.Move]:
        return self.steps[-1].move if self.steps else None


def replay(
    moves_san: list[str], variant: Variant, fen: Optional[str] = None
) -> Replay:
    """Play the SAN moves from the position while they are legal.

    The replay stops at the first move that cannot be played, keeping the positions reached so far.
    """
    board = new_board(variant, fen)
    result = Replay(initial=board.copy(stack=False))
    for san in moves_san:
        try:
            move = board.parse_san(san)
        except ValueError:
            logger.debug("Replay stopped at invalid move %r after %d plies", san, len(result.steps))
            result.invalid_move = san
            break
        uci = board.uci(move)
        board.push(move)
        result.steps.append(ReplayStep(board=board.copy(stack=False), move=move, uci=uci))
    return result


def read_check_square(variant: Variant, fen: str) -> Optional[str]:
    """Check square of an arbitrary position. Unreadable positions have none."""
    try:
        board = new_board(variant, fen)
    except InvalidRequestError:
        return None
    return check_square(board)
