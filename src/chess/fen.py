"""
Validation of FEN strings.

FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.
<board position string> <active color> <castling rights> <en passant square> <half move clock> <full move number>
"""

from typing import Optional

from src.chess.pieces import FEN_TO_PIECE
from src.chess.square import BOARD_DIMENSIONS, FILES, RANKS
from src.core.exceptions import InvalidRequestError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EN_PASSANT_RANKS = "36"
VALID_CASTLING_ENCODINGS = [
    "-",
    "K",
    "Q",
    "k",
    "q",
    "KQ",
    "Kk",
    "Kq",
    "Qk",
    "Qq",
    "kq",
    "KQk",
    "KQq",
    "Kkq",
    "Qkq",
    "KQkq",
]


def is_valid_fen(fen: str) -> bool:
    """
    Check if given string follows proper FEN notation.
    """

    # there should be 6 parts to the string
    parts = fen.split(" ")
    if len(parts) != 6:
        return False

    position, color, castling, en_passant, half_move_counter, full_move_counter = parts
    return (
        is_valid_position(position)
        and is_valid_color_code(color)
        and is_valid_castling_rights(castling)
        and is_valid_en_passant(en_passant)
        and is_valid_move_counter(half_move_counter)
        and is_valid_move_counter(full_move_counter)
    )


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_rows, num_cols = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_rows:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character in RANKS:
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_cols:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in {"w", "b"}


def is_valid_castling_rights(castling: str) -> bool:
    """A valid castling encoding has either KQkq, KQk, etc. or a '-' if all rights have been revoked."""
    return castling in VALID_CASTLING_ENCODINGS


def is_valid_en_passant(en_passant: str) -> bool:
    """
    A '-' or the square a pawn skipped over with its double step.
    That square always lies on the 3rd rank (white pawn skipped it) or on the 6th (black pawn).
    """
    if en_passant == "-":
        return True
    return is_valid_square(en_passant) and en_passant[1] in EN_PASSANT_RANKS


def is_valid_square(square: str) -> bool:
    """Valid square should be a letter for the file + a number for the rank"""
    if len(square) != 2:
        return False

    file_char, rank_char = square[0], square[1]
    return file_char in FILES and rank_char in RANKS


def is_valid_move_counter(counter: str) -> bool:
    return counter.isascii() and counter.isdigit()


def validate_fen_field(value: Optional[str]) -> Optional[str]:
    """Shared pydantic validator for optional FEN fields (None = the standard starting position)"""
    if value is None:
        return value

    fen = value.strip()
    if not is_valid_fen(fen):
        raise InvalidRequestError(f"Cannot interpret {value!r} as a FEN string.")
    return fen
