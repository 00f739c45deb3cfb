"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Glyphs used when writing the move history
WHITE_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "♙",
    PieceType.KNIGHT: "♘",
    PieceType.BISHOP: "♗",
    PieceType.ROOK: "♖",
    PieceType.QUEEN: "♕",
    PieceType.KING: "♔",
}
BLACK_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        for color, symbols in ((Color.WHITE, WHITE_SYMBOLS), (Color.BLACK, BLACK_SYMBOLS)):
            for piece_type, glyph in symbols.items():
                if glyph == symbol:
                    return cls(piece_type, color)
        raise ValueError(f"Unknown piece symbol: {symbol!r}")

    @property
    def symbol(self) -> str:
        return (
            WHITE_SYMBOLS[self.type]
            if self.color == Color.WHITE
            else BLACK_SYMBOLS[self.type]
        )
