"""Unit tests for /src/chess/board.py"""

import pytest

from src.chess.board import STARTING_POSITION, Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square
from src.core.exceptions import InvalidFENError, MissingKingError

EMPTY_FEN = "/".join(["8"] * 8)
BACK_RANK = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """Every one of the 64 squares must match the standard starting position"""
    board = Board.starting_position()

    for col in range(8):
        # row 0 (8th rank): black pieces, row 1: black pawns
        assert board.piece(Square(0, col)) == Piece(BACK_RANK[col], Color.BLACK)
        assert board.piece(Square(1, col)) == Piece(PieceType.PAWN, Color.BLACK)

        # 6th, 5th, 4th, 3rd ranks all empty
        for row in range(2, 6):
            assert board.piece(Square(row, col)) is None

        # row 6 (2nd rank): white pawns, row 7: white pieces
        assert board.piece(Square(6, col)) == Piece(PieceType.PAWN, Color.WHITE)
        assert board.piece(Square(7, col)) == Piece(BACK_RANK[col], Color.WHITE)

    assert len(board.position) == 32


def test_creating_board_after_e4() -> None:
    """Say, white moves the pawn from e2 to e4, and I want to load up the board in this position"""
    board = Board.from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR")
    assert board.piece(Square.from_algebraic("e4")) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.is_empty(Square.from_algebraic("e2"))


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION,
        "2kr1b1r/p1p1pppp/2p2n2/3q2B1/6Q1/2NP4/PPP2PPP/R4RK1",
        EMPTY_FEN,
    ],
)
def test_fen_roundtrip(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


@pytest.mark.parametrize(
    "fen",
    [
        "/".join(["8"] * 7),  # too few ranks
        "/".join(["9"] + ["8"] * 7),  # too many files
        "/".join(["7"] + ["8"] * 7),  # too few files
        "/".join(["ppppppppp"] + ["8"] * 7),  # too many pieces in one rank
        "/".join(["7x"] + ["8"] * 7),  # unknown piece
    ],
)
def test_invalid_fen(fen: str) -> None:
    with pytest.raises(InvalidFENError):
        Board.from_fen(fen)


# -- UPDATES ---
def test_move_piece_returns_capture() -> None:
    board = Board.from_fen("8/8/8/3p4/4P3/8/8/8")
    e4 = Square.from_algebraic("e4")
    d5 = Square.from_algebraic("d5")

    captured = board.move_piece(e4, d5)

    assert captured == Piece(PieceType.PAWN, Color.BLACK)
    assert board.piece(d5) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.is_empty(e4)


def test_place_and_remove_piece() -> None:
    board = Board.from_fen(EMPTY_FEN)
    d4 = Square.from_algebraic("d4")
    queen = Piece(PieceType.QUEEN, Color.WHITE)

    board.place_piece(queen, d4)
    assert board.piece(d4) == queen
    assert board.remove_piece(d4) == queen
    assert board.remove_piece(d4) is None
    assert board.is_empty(d4)


def test_copy_is_independent() -> None:
    board = Board.starting_position()
    snapshot = board.copy()
    board.move_piece(Square.from_algebraic("e2"), Square.from_algebraic("e4"))

    assert snapshot == Board.starting_position()
    assert snapshot != board


def test_is_any_occupied() -> None:
    board = Board.starting_position()
    assert board.is_any_occupied([Square.from_algebraic("e4"), Square.from_algebraic("e2")])
    assert not board.is_any_occupied([Square.from_algebraic("e4"), Square.from_algebraic("e5")])


# -- LOOKUPS ---
@pytest.mark.parametrize("color", list(Color))
def test_locate_color(color: Color) -> None:
    board = Board.starting_position()
    squares = board.locate_color(color)
    assert len(squares) == 16
    assert all(board.piece(square).color == color for square in squares)  # type: ignore[union-attr]


def test_find_king() -> None:
    board = Board.starting_position()
    assert board.find_king(Color.WHITE) == Square.from_algebraic("e1")
    assert board.find_king(Color.BLACK) == Square.from_algebraic("e8")


def test_missing_king_is_fatal() -> None:
    """A board without a king is corrupt, no sentinel value gets returned"""
    board = Board.from_fen("4k3/8/8/8/8/8/8/8")
    with pytest.raises(MissingKingError):
        board.find_king(Color.WHITE)
