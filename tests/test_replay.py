"""Tests for the replay fold and the PGN-level driver."""

import pytest

from pgnreplay.config import ReplayOptions
from pgnreplay.core.board import Board
from pgnreplay.core.enums import AmbiguityPolicy, Color, PieceType
from pgnreplay.core.errors import (
    AmbiguousMoveError,
    MoveError,
    MoveFormatError,
    OriginNotFoundError,
    UnsupportedMoveError,
)
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import parse_square
from pgnreplay.notation.fen import INITIAL_PLACEMENT, board_from_placement, board_to_placement
from pgnreplay.notation.models import CastleMove, PgnGame
from pgnreplay.replay import apply_san, final_position, replay_game, replay_moves


def _placement(moves: list[str], **kwargs) -> str:
    return board_to_placement(replay_moves(moves, **kwargs))


class TestReplayMoves:
    def test_zero_moves(self) -> None:
        assert _placement([]) == INITIAL_PLACEMENT

    def test_open_game(self) -> None:
        board = replay_moves(["e4", "e5", "Nf3", "Nc6"])
        assert board[parse_square("f3")] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board[parse_square("c6")] == Piece(Color.BLACK, PieceType.KNIGHT)
        assert board[parse_square("e4")] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[parse_square("e5")] == Piece(Color.BLACK, PieceType.PAWN)
        for name in ("e2", "e7", "g1", "b8"):
            assert board[parse_square(name)] is None

    def test_mutates_given_board(self) -> None:
        board = Board.initial()
        result = replay_moves(["d4"], board=board)
        assert result is board
        assert board[parse_square("d4")] == Piece(Color.WHITE, PieceType.PAWN)

    def test_black_to_move_first(self) -> None:
        board = board_from_placement("4k3/4p3/8/8/8/8/8/4K3")
        replay_moves(["e5", "Kd2"], board=board, first_color=Color.BLACK)
        assert board_to_placement(board) == "4k3/8/8/4p3/8/8/3K4/8"

    def test_castling_both_sides(self) -> None:
        moves = ["e4", "d5", "Nf3", "Qd6", "Be2", "Bd7", "O-O", "Nc6", "d3", "O-O-O"]
        assert _placement(moves) == (
            "2kr1bnr/pppbpppp/2nq4/3p4/4P3/3P1N2/PPP1BPPP/RNBQ1RK1"
        )

    def test_en_passant(self) -> None:
        moves = ["e4", "a6", "e5", "d5", "exd6"]
        assert _placement(moves) == "rnbqkbnr/1pp1pppp/p2P4/8/8/8/PPPP1PPP/RNBQKBNR"

    def test_promotion(self) -> None:
        board = board_from_placement("4k3/1P6/8/8/8/8/8/4K3")
        replay_moves(["b8=Q+"], board=board)
        assert board_to_placement(board) == "1Q2k3/8/8/8/8/8/8/4K3"

    def test_long_diagonal_bishop(self) -> None:
        moves = ["g3", "e6", "Bg2", "Nc6", "Bxc6", "dxc6"]
        assert _placement(moves) == "r1bqkbnr/ppp2ppp/2p1p3/8/8/6P1/PPPPPP1P/RNBQK1NR"


class TestReplayErrors:
    def test_origin_not_found_carries_ply_and_token(self) -> None:
        with pytest.raises(OriginNotFoundError) as info:
            replay_moves(["e4", "e5", "Bb6"])
        assert info.value.ply == 2
        assert info.value.token == "Bb6"
        assert "ply 2 ('Bb6')" in str(info.value)

    def test_format_error_aborts(self) -> None:
        with pytest.raises(MoveFormatError) as info:
            replay_moves(["e4", "??"])
        assert info.value.ply == 1

    def test_unsupported_error(self) -> None:
        with pytest.raises(UnsupportedMoveError):
            replay_moves(["e4", "O-O-O-O"])

    def test_all_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            replay_moves(["Ke3"])

    def test_board_left_at_last_good_ply(self) -> None:
        board = Board.initial()
        with pytest.raises(MoveError):
            replay_moves(["e4", "Qxz9"], board=board)
        assert board_to_placement(board) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
        )

    def test_strict_policy(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/1N2KN2")
        options = ReplayOptions(ambiguity=AmbiguityPolicy.STRICT)
        with pytest.raises(AmbiguousMoveError):
            replay_moves(["Nd2"], board=board, options=options)


class TestApplySan:
    def test_castling_skips_resolver(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _fail(*args: object, **kwargs: object) -> None:
            raise AssertionError("resolver called for a castle")

        monkeypatch.setattr("pgnreplay.replay.resolve_origin", _fail)
        board = board_from_placement("r3k3/8/8/8/8/8/8/4K2R")
        apply_san(board, "O-O", Color.WHITE)
        apply_san(board, "O-O-O", Color.BLACK)
        assert board_to_placement(board) == "2kr4/8/8/8/8/8/8/5RK1"

    def test_returns_parsed_move(self) -> None:
        board = Board.initial()
        board[parse_square("f1")] = None
        board[parse_square("g1")] = None
        move = apply_san(board, "O-O", Color.WHITE)
        assert isinstance(move, CastleMove)
        assert board[parse_square("g1")] == Piece(Color.WHITE, PieceType.KING)
        assert board[parse_square("f1")] == Piece(Color.WHITE, PieceType.ROOK)


class TestFinalPosition:
    def test_sample_game(self, sample_pgn: str, sample_final_placement: str) -> None:
        assert final_position(sample_pgn) == sample_final_placement

    def test_moves_only(self) -> None:
        assert final_position("1. e4 e5 2. Nf3 Nc6 *") == (
            "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R"
        )

    def test_setup_fen(self) -> None:
        pgn = (
            '[SetUp "1"]\n'
            '[FEN "4k3/8/8/8/8/8/4p3/4K3 b - - 0 1"]\n'
            "\n"
            "1... Kd7 2. Kxe2 *\n"
        )
        assert final_position(pgn) == "8/3k4/8/8/8/8/4K3/8"

    def test_fen_ignored_without_setup(self) -> None:
        pgn = '[FEN "4k3/8/8/8/8/8/8/4K3 w - - 0 1"]\n\n*\n'
        assert final_position(pgn) == INITIAL_PLACEMENT


class TestReplayGame:
    def test_parsed_game(self) -> None:
        game = PgnGame(headers={}, moves=["d4", "d5", "c4"])
        assert board_to_placement(replay_game(game)) == (
            "rnbqkbnr/ppp1pppp/8/3p4/2PP4/8/PP2PPPP/RNBQKBNR"
        )

    def test_setup_tags_choose_start(self) -> None:
        game = PgnGame(
            headers={"SetUp": "1", "FEN": "4k3/8/8/8/8/8/8/4K3 b - - 0 1"},
            moves=["Ke7", "Kd2"],
        )
        assert board_to_placement(replay_game(game)) == "8/4k3/8/8/8/8/3K4/8"
