"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.position import PositionState
from src.chess.square import Square

EMPTY_FEN = "/".join(["8"] * 8)

StateFactory = Callable[..., PositionState]


def build_state(
    pieces: dict[str, str],
    to_move: str = "w",
    castling: str = "-",
    en_passant: str = "-",
) -> PositionState:
    """
    Place pieces on an otherwise empty board.
    pieces: square name --> FEN character, ex. {"e1": "K", "e8": "k"}
    """
    state = PositionState.from_fen(f"{EMPTY_FEN} {to_move} {castling} {en_passant} 0 1")
    board: Board = state.board
    for square_name, fen_char in pieces.items():
        board.place_piece(Piece.from_fen(fen_char), Square.from_algebraic(square_name))
    return state


@pytest.fixture
def make_state() -> StateFactory:
    """Call the inner function with the pieces to place, and optionally color to move / castling rights / en passant square"""
    return build_state
