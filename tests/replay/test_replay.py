"""Unit tests for src/chess/replay.py"""

import chess
import chess.variant
import pytest

from src.chess.replay import (
    check_square,
    move_keys,
    new_board,
    read_check_square,
    replay,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Variant

FOOLS_MATE_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


# -- Boards --
def test_new_board_defaults_to_variant_start() -> None:
    assert new_board(Variant.STANDARD).fen() == chess.STARTING_FEN
    assert new_board(Variant.HORDE).fen() == chess.variant.HordeBoard.starting_fen
    assert isinstance(new_board(Variant.ATOMIC), chess.variant.AtomicBoard)


def test_new_board_with_unreadable_fen() -> None:
    with pytest.raises(InvalidRequestError):
        new_board(Variant.STANDARD, "this is not a fen")


# -- Check square --
def test_check_square_of_checked_king() -> None:
    assert check_square(chess.Board(FOOLS_MATE_FEN)) == "e1"


def test_no_check_square_without_check() -> None:
    assert check_square(chess.Board()) is None


def test_read_check_square_of_any_position() -> None:
    assert read_check_square(Variant.STANDARD, FOOLS_MATE_FEN) == "e1"
    assert read_check_square(Variant.STANDARD, chess.STARTING_FEN) is None


def test_read_check_square_of_unreadable_position() -> None:
    """No check square, and no error either."""
    assert read_check_square(Variant.STANDARD, "8/8/8 w") is None


# -- Move keys --
@pytest.mark.parametrize(
    "uci, keys",
    [
        ("e2e4", "e2e4"),
        ("e7e8q", "e7e8"),
        ("P@e4", "e4e4"),
    ],
)
def test_move_keys(uci: str, keys: str) -> None:
    assert move_keys(chess.Move.from_uci(uci)) == keys


# -- Replay --
def test_replay_whole_game(scholars_mate) -> None:
    result = replay(scholars_mate.moves_san, scholars_mate.variant)

    assert len(result.steps) == len(scholars_mate.moves_san)
    assert result.invalid_move is None
    assert result.initial.fen() == chess.STARTING_FEN
    assert [step.uci for step in result.steps[:2]] == ["e2e4", "e7e5"]
    assert result.board.is_checkmate()
    assert result.last_move == chess.Move.from_uci("h5f7")
    assert check_square(result.board) == "e8"


def test_replay_keeps_positions_independent(scholars_mate) -> None:
    """Every step holds its own board, not a reference to the board being played on."""
    result = replay(scholars_mate.moves_san, scholars_mate.variant)
    fens = [step.board.fen() for step in result.steps]
    assert len(set(fens)) == len(fens)
    assert result.steps[0].board.fen() == (
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
    )


def test_replay_stops_at_first_invalid_move() -> None:
    result = replay(["e4", "e4", "Nf3"], Variant.STANDARD)

    assert len(result.steps) == 1
    assert result.invalid_move == "e4"


def test_replay_without_moves() -> None:
    result = replay([], Variant.STANDARD)

    assert result.steps == []
    assert result.board.fen() == chess.STARTING_FEN
    assert result.last_move is None


def test_replay_from_position() -> None:
    fen = "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1"
    result = replay(["e4"], Variant.FROM_POSITION, fen)

    assert result.initial.fen() == fen
    assert result.board.fen() == "4k3/8/8/8/4P3/8/8/4K3 b - - 0 1"


def test_replay_castling_in_standard_notation() -> None:
    result = replay(["e4", "e5", "Nf3", "Nc6", "Bc4", "Bc5", "O-O"], Variant.STANDARD)
    assert result.steps[-1].uci == "e1g1"


def test_replay_crazyhouse_drop() -> None:
    result = replay(["e4", "d5", "exd5", "Qxd5", "P@e4"], Variant.CRAZYHOUSE)

    assert len(result.steps) == 5
    assert result.steps[-1].uci == "P@e4"
    assert move_keys(result.last_move) == "e4e4"
