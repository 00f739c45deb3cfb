"""
Geometry/Base movement and capturing/attacking rules

Key idea: Use strategy pattern to define the legality check for each piece type.

A rule answers: "May the piece standing on `from_square` go to `to_square`?" looking only at the geometry of the piece,
the occupancy of the board and the special-move state (castling rights, en passant square).
Whose turn it is, and whether the move exposes your own king, is checked later by Game.
"""

from dataclasses import dataclass
from typing import Callable, Self

from src.chess.castling import CASTLING_RULES, castling_direction_for_king_move
from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.position import PositionState
from src.chess.square import BOARD_DIMENSIONS, Square

Vector = tuple[int, int]

# white moves UP the board (towards row 0), black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: BOARD_DIMENSIONS[0] - 2, Color.BLACK: 1}

HISTORY_SEPARATOR = " to "


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface: <from_square><to_square>, ex. "e2e4"
        """
        return cls(Square.from_algebraic(uci[:2]), Square.from_algebraic(uci[2:4]))

    def to_uci(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"

    def to_history(self, piece: Piece) -> str:
        """The entry as written in the move history, ex. '♙e2 to e4'"""
        return f"{piece.symbol}{self.from_square.to_algebraic()}{HISTORY_SEPARATOR}{self.to_square.to_algebraic()}"

    @classmethod
    def from_history(cls, entry: str) -> Self:
        """Replay a history entry: '♞g8 to f6' --> Move(g8, f6)"""
        origin, separator, destination = entry[1:].partition(HISTORY_SEPARATOR)
        if not separator:
            raise ValueError(f"Cannot interpret {entry!r} as a move history entry.")
        # validates the glyph
        Piece.from_symbol(entry[0])
        return cls(Square.from_algebraic(origin), Square.from_algebraic(destination))


def deltas(from_square: Square, to_square: Square) -> Vector:
    return to_square.row - from_square.row, to_square.col - from_square.col


# --- PATH OBSTRUCTION ---
def has_obstacles(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Walk unit steps from just past `from_square` to just before `to_square`.
    Any occupied square in between blocks the sliding piece.

    Only defined for two different squares on the same row, column, or diagonal.
    """
    d_row, d_col = deltas(from_square, to_square)
    is_straight = (d_row == 0) != (d_col == 0)
    is_diagonal = d_row != 0 and abs(d_row) == abs(d_col)
    if not (is_straight or is_diagonal):
        raise ValueError(
            f"No straight or diagonal path between {from_square.to_algebraic()} and {to_square.to_algebraic()}"
        )

    step_row = (d_row > 0) - (d_row < 0)
    step_col = (d_col > 0) - (d_col < 0)
    row, col = from_square.row + step_row, from_square.col + step_col
    while (row, col) != (to_square.row, to_square.col):
        if not board.is_empty(Square(row, col)):
            return True
        row += step_row
        col += step_col
    return False


# --- MOVEMENT RULES ---
def is_legal_pawn_move(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """
    A pawn:
    - moves by a single square forward (only onto an empty square)
    - can move by two from its starting rank, if both squares are empty
    - takes diagonally forward, either an opponent's piece or on the en passant square
    """
    board = state.board
    pawn = board.piece(from_square)
    assert pawn is not None
    forward = PAWN_DIRECTION[pawn.color]
    d_row, d_col = deltas(from_square, to_square)

    if d_col == 0:
        if d_row == forward:
            return board.is_empty(to_square)
        if d_row == 2 * forward and from_square.row == PAWN_HOME_ROW[pawn.color]:
            skipped = Square(from_square.row + forward, from_square.col)
            return board.is_empty(skipped) and board.is_empty(to_square)
        return False

    if abs(d_col) == 1 and d_row == forward:
        target = board.piece(to_square)
        if target is not None:
            return target.color != pawn.color
        return to_square == state.en_passant_square

    return False


def is_legal_knight_move(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """Knights jump: |delta_row|, |delta_col| is (1, 2) or (2, 1)"""
    d_row, d_col = deltas(from_square, to_square)
    return sorted((abs(d_row), abs(d_col))) == [1, 2]


def is_legal_bishop_move(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    d_row, d_col = deltas(from_square, to_square)
    if d_row == 0 or abs(d_row) != abs(d_col):
        return False
    return not has_obstacles(state.board, from_square, to_square)


def is_legal_rook_move(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """Rooks move either horizontally or vertically"""
    d_row, d_col = deltas(from_square, to_square)
    if (d_row == 0) == (d_col == 0):
        return False
    return not has_obstacles(state.board, from_square, to_square)


def is_legal_queen_move(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_legal_rook_move(state, from_square, to_square) or is_legal_bishop_move(
        state, from_square, to_square
    )


def is_king_step(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """The king can move by a single square at the time."""
    d_row, d_col = deltas(from_square, to_square)
    return max(abs(d_row), abs(d_col)) == 1


def is_legal_castling(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """
    **you are allowed to castle if**

    * Castling rights are not yet revoked.
    * All squares between king and rook are empty.
    * None of the squares the king stands on, passes through or lands on is under attack.
    """
    direction = castling_direction_for_king_move(from_square, to_square)
    if direction is None:
        return False

    board = state.board
    king = board.piece(from_square)
    if king is None or king.color != direction.color:
        return False

    if not state.has_castling_right(direction):
        return False

    squares = CASTLING_RULES[direction]
    if board.piece(squares.rook_from) != Piece(PieceType.ROOK, king.color):
        return False

    if board.is_any_occupied(squares.squares_between()):
        return False

    opponent = king.color.opponent
    return not any(
        is_square_attacked(state, square, opponent) for square in squares.king_path()
    )


def is_legal_king_move(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """A single step in any direction, or castling (a two-column displacement along the back rank)"""
    return is_king_step(state, from_square, to_square) or is_legal_castling(
        state, from_square, to_square
    )


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[PositionState, Square, Square], bool]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.PAWN: is_legal_pawn_move,
    PieceType.KNIGHT: is_legal_knight_move,
    PieceType.BISHOP: is_legal_bishop_move,
    PieceType.ROOK: is_legal_rook_move,
    PieceType.QUEEN: is_legal_queen_move,
    PieceType.KING: is_legal_king_move,
}


def is_legal(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """
    Geometric legality of moving the piece on `from_square` to `to_square`.

    Does NOT check whose turn it is, nor whether the move leaves the mover's own king in check.
    """
    if from_square == to_square:
        return False

    piece = state.board.piece(from_square)
    if piece is None:
        return False

    # you can never land on your own piece
    target = state.board.piece(to_square)
    if target is not None and target.color == piece.color:
        return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(state, from_square, to_square)


# --- ATTACKING RULES ---
def is_pawn_attack(state: PositionState, from_square: Square, to_square: Square) -> bool:
    """
    Pawns attack both squares diagonally in front of them, occupied or not.
    (A pawn does not attack the square it can push to.)
    """
    pawn = state.board.piece(from_square)
    assert pawn is not None
    d_row, d_col = deltas(from_square, to_square)
    return abs(d_col) == 1 and d_row == PAWN_DIRECTION[pawn.color]


# -- STRATEGY PATTERN: ATTACKING RULES ---
# Same as the movement rules, except castling never attacks and pawns attack diagonally only
ATTACK_RULES: dict[PieceType, MoveRuleFn] = {
    **MOVEMENT_RULES,
    PieceType.PAWN: is_pawn_attack,
    PieceType.KING: is_king_step,
}


def is_square_attacked(state: PositionState, square: Square, by_color: Color) -> bool:
    """Could any piece of `by_color` move onto (capture on) the given square?"""
    board = state.board
    for attacker_square in board.locate_color(by_color):
        if attacker_square == square:
            continue
        attacker = board.piece(attacker_square)
        assert attacker is not None
        attack_rule = ATTACK_RULES[attacker.type]
        if attack_rule(state, attacker_square, square):
            return True
    return False


def is_king_in_check(state: PositionState, color: Color) -> bool:
    """Locate the king (fails hard if it is missing) and see if the opponent attacks it."""
    king_square = state.board.find_king(color)
    return is_square_attacked(state, king_square, color.opponent)
