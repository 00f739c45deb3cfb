"""The Game board holds the `position` (in chess: the configuration of pieces on the board)"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.pieces import FEN_TO_PIECE, Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, RANKS, Square
from src.core.exceptions import InvalidFENError, MissingKingError

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass
class Board:
    """
    Passive container: which piece stands where.
    Only occupied squares are stored. An empty square is simply absent (piece() returns None).
    """

    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the first part of a FEN string (the piece placement).

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 0), starting with the rook on a8
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank (row 7) are the white pieces.
        """
        fen_by_rows = fen_str.split("/")
        if len(fen_by_rows) != BOARD_DIMENSIONS[0]:
            raise InvalidFENError(f"Expected {BOARD_DIMENSIONS[0]} ranks in {fen_str!r}")

        position: dict[Square, Piece] = {}
        # FEN string is read from the top rank (8th) down, which is exactly our row order
        for row, fen_one_row in enumerate(fen_by_rows):
            col = 0
            for character in fen_one_row:
                if character in RANKS:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
                elif character.lower() in FEN_TO_PIECE:
                    if col >= BOARD_DIMENSIONS[1]:
                        raise InvalidFENError(f"Too many squares in rank {fen_one_row!r}")
                    position[Square(row, col)] = Piece.from_fen(character)
                    col += 1
                else:
                    raise InvalidFENError(
                        f"Unexpected character {character!r} in {fen_str!r}"
                    )
            if col != BOARD_DIMENSIONS[1]:
                raise InvalidFENError(f"Rank {fen_one_row!r} does not describe 8 squares")
        return cls(position)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Square(row, col))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    def is_empty(self, square: Square) -> bool:
        return square not in self.position

    def is_any_occupied(self, squares: list[Square]) -> bool:
        return any(not self.is_empty(square) for square in squares)

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.position[square] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        return self.position.pop(square, None)

    def move_piece(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """Update the position on the board. Returns whatever got captured on the target square."""
        piece_that_moved = self.position.pop(from_square)
        captured = self.position.get(to_square)
        self.position[to_square] = piece_that_moved
        return captured

    def locate_color(self, color: Color) -> list[Square]:
        return sorted(
            square for square, piece in self.position.items() if piece.color == color
        )

    def find_king(self, color: Color) -> Square:
        """
        Exactly one king per color is assumed to be on the board.
        A missing king means the board got corrupted --> fail hard.
        """
        kings = self.locate_piece(Piece(PieceType.KING, color))
        if not kings:
            raise MissingKingError(f"No {color.name.lower()} king on the board: {self.to_fen()}")
        return kings[0]

    def locate_piece(self, piece: Piece) -> list[Square]:
        return sorted(square for square, other in self.position.items() if other == piece)

    def copy(self) -> Self:
        """Pieces are immutable, so a shallow copy of the mapping is a fully independent board."""
        return type(self)(dict(self.position))
