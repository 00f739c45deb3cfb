"""
Representation of the full state of a game at a single moment: the board plus everything that is not visible on it.
The part that can be encoded in a FEN string, plus the check/checkmate flags derived after each move.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.castling import (
    CastlingDirection,
    castling_from_fen,
    castling_options,
    castling_to_fen,
)
from src.chess.fen import STARTING_FEN, is_valid_fen
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square
from src.core.exceptions import InvalidFENError


@dataclass
class PositionState:
    """
    Board + ancillary game state.
    ----

    * color_to_move alternates after every committed move
    * castling rights are only ever revoked, never restored
    * the en passant square only lives for a single move
    * the half move clock is carried along for FEN compatibility only (no fifty-move rule)
    * num_turns starts at 1 and increments after every move black makes

    ex) The standard starting position has a FEN
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
    """

    board: Board
    color_to_move: Color = Color.WHITE
    castling_rights: dict[CastlingDirection, bool] = field(
        default_factory=lambda: {direction: True for direction in CastlingDirection}
    )
    en_passant_square: Optional[Square] = None
    half_move_clock: int = 0
    num_turns: int = 1
    is_check: bool = False
    is_checkmate: bool = False

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse the FEN into data"""

        # raise an exception if invalid FEN:
        if not is_valid_fen(fen):
            raise InvalidFENError(f"Cannot interpret supplied string as FEN: {fen}")

        # extract the different components. FEN is space separated
        (
            position,
            active_color,
            castling_str,
            en_passant_algebraic,
            half_move_clock,
            num_turns,
        ) = fen.split(" ")

        en_passant_square = (
            Square.from_algebraic(en_passant_algebraic)
            if en_passant_algebraic != "-"
            else None
        )
        return cls(
            board=Board.from_fen(position),
            color_to_move=Color.WHITE if active_color == "w" else Color.BLACK,
            castling_rights=castling_from_fen(castling_str),
            en_passant_square=en_passant_square,
            half_move_clock=int(half_move_clock),
            num_turns=int(num_turns),
        )

    def to_fen(self) -> str:
        """reverse operation: write a FEN from the given data"""
        active_color = "w" if self.color_to_move == Color.WHITE else "b"
        castling_str = castling_to_fen(self.castling_rights)

        en_passant_algebraic = (
            self.en_passant_square.to_algebraic()
            if self.en_passant_square is not None
            else "-"
        )
        return f"{self.board.to_fen()} {active_color} {castling_str} {en_passant_algebraic} {self.half_move_clock} {self.num_turns}"

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)

    def copy(self) -> Self:
        """Scratch copy used to simulate moves without touching the real game."""
        return type(self)(
            board=self.board.copy(),
            color_to_move=self.color_to_move,
            castling_rights=dict(self.castling_rights),
            en_passant_square=self.en_passant_square,
            half_move_clock=self.half_move_clock,
            num_turns=self.num_turns,
            is_check=self.is_check,
            is_checkmate=self.is_checkmate,
        )

    def validate(self) -> None:
        """
        Consistency of a loaded position (the FEN syntax alone does not guarantee it)
        ----

        1. Exactly one king per color
        2. The en passant square lies behind a pawn of the side that just moved:
           the square itself is empty, the pawn that skipped it stands right in front of it.
        """
        for color in Color:
            num_kings = len(self.board.locate_piece(Piece(PieceType.KING, color)))
            if num_kings != 1:
                raise InvalidFENError(
                    f"Expected a single {color.name.lower()} king, found {num_kings}: {self.to_fen()}"
                )

        if self.en_passant_square is None:
            return

        just_moved = self.color_to_move.opponent
        skipped = self.en_passant_square
        # white pawns skip over the 3rd rank (row 5), black ones over the 6th (row 2)
        expected_row = 5 if just_moved == Color.WHITE else 2
        pawn_row = skipped.row - 1 if just_moved == Color.WHITE else skipped.row + 1
        if (
            skipped.row != expected_row
            or not self.board.is_empty(skipped)
            or self.board.piece(Square(pawn_row, skipped.col)) != Piece(PieceType.PAWN, just_moved)
        ):
            raise InvalidFENError(
                f"En passant square {skipped.to_algebraic()} does not follow a double step of a {just_moved.name.lower()} pawn"
            )

    # -- castling rights bookkeeping --
    def has_castling_right(self, direction: CastlingDirection) -> bool:
        return self.castling_rights[direction]

    def revoke_castling_rights(self, direction: CastlingDirection) -> None:
        self.castling_rights[direction] = False

    def revoke_all_castling_rights(self, color: Color) -> None:
        for direction in castling_options(color):
            self.revoke_castling_rights(direction)
