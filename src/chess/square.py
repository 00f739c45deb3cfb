"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import SquareOutOfRangeError

# Chess board is always 8x8: (rows, columns)
BOARD_DIMENSIONS = (8, 8)
FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, order=True)
class Square:
    """
    Row 0 is the 8th rank (black's back rank), row 7 is the 1st rank (white's back rank).
    Column 0 is the a-file.
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_within_bounds(self.row, self.col):
            raise SquareOutOfRangeError(
                f"Square ({self.row}, {self.col}) is out of range. Rows and columns must lie in 0-{BOARD_DIMENSIONS[0] - 1}."
            )

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' gets converted to (0, 0), 'h1' to (7, 7)"""
        if len(sq) != 2 or sq[0] not in FILES or sq[1] not in RANKS:
            raise SquareOutOfRangeError(f"Cannot interpret {sq!r} as a square name.")
        col = FILES.index(sq[0])
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{self.file_name}{self.rank}"

    @property
    def file_name(self) -> str:
        return FILES[self.col]

    @property
    def rank(self) -> int:
        """One-indexed rank as printed on the board (1 at the bottom for white)"""
        return BOARD_DIMENSIONS[0] - self.row


def is_within_bounds(row: int, col: int) -> bool:
    return (0 <= row < BOARD_DIMENSIONS[0]) and (0 <= col < BOARD_DIMENSIONS[1])


def all_squares() -> list[Square]:
    """Every square of the board, row by row starting at the 8th rank."""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
