"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.castling import (
    CASTLING_RULES,
    castling_direction_for_king_move,
    castling_direction_for_rook_square,
)
from src.chess.moves import Move, is_king_in_check, is_legal
from src.chess.pieces import Color, Piece, PieceType
from src.chess.position import PositionState
from src.chess.square import Square, all_squares
from src.core.config import Settings
from src.core.exceptions import InvalidFENError
from src.core.models import GameModel, MoveResult
from src.core.shared_types import Status

_log = logging.getLogger(__name__)

REJECTED = MoveResult(accepted=False)


# --- BOARD UPDATES ---
def is_en_passant_capture(state: PositionState, piece: Piece, move: Move) -> bool:
    """A pawn moving diagonally onto the en passant square"""
    return (
        piece.type == PieceType.PAWN
        and move.to_square == state.en_passant_square
        and move.from_square.col != move.to_square.col
    )


def is_castling_move(piece: Piece, move: Move) -> bool:
    """The king moving two columns"""
    return (
        piece.type == PieceType.KING
        and move.from_square.row == move.to_square.row
        and abs(move.to_square.col - move.from_square.col) == 2
    )


def move_pieces(state: PositionState, move: Move) -> Optional[Piece]:
    """
    Update the board only (no bookkeeping). Used for the real move as well as the simulated ones.
    ----

    1. Relocate the piece
    2. En passant: remove the pawn that got taken
    3. Castling: relocate the rook as well

    Returns the captured piece (if any)
    """
    board = state.board
    piece = board.piece(move.from_square)
    assert piece is not None

    en_passant = is_en_passant_capture(state, piece, move)
    captured = board.move_piece(move.from_square, move.to_square)

    if en_passant:
        # NOTE the pawn taken stands in the same column as the en passant square,
        # NOTE ,, ,, on the same row the moving pawn was originally standing at.
        captured = board.remove_piece(Square(move.from_square.row, move.to_square.col))

    if is_castling_move(piece, move):
        direction = castling_direction_for_king_move(move.from_square, move.to_square)
        if direction is not None:
            rook_squares = CASTLING_RULES[direction]
            board.move_piece(rook_squares.rook_from, rook_squares.rook_to)

    return captured


def leaves_king_in_check(state: PositionState, move: Move, color: Color) -> bool:
    """Return True if the king of `color` is attacked after making the move

    plan:
    1. Copy the state
    2. make the candidate move
    3. determine if king is in check on the new board
    """
    scratch = state.copy()
    move_pieces(scratch, move)
    return is_king_in_check(scratch, color)


def is_checkmate(state: PositionState, color: Color) -> bool:
    """
    Checkmate: you are in check and none of your legal moves gets you out of it.
    ----

    Tries every (own piece, destination) pair. Stops at the first move that escapes the check.
    """
    if not is_king_in_check(state, color):
        return False

    for from_square in state.board.locate_color(color):
        for to_square in all_squares():
            if not is_legal(state, from_square, to_square):
                continue
            if not leaves_king_in_check(state, Move(from_square, to_square), color):
                return False
    return True


def _revoke_castling_rights_if_needed(
    state: PositionState, piece: Piece, move: Move, captured: Optional[Piece]
) -> None:
    """
    Checks which rights should get revoked
    ----

    1. If you are moving your king (castling included) --> revoke both
    2. If you are moving your rook away from its corner --> revoke the right of that corner
    3. If you are taking your opponent's rook on its corner --> revoke that right of your opponent
    """
    if piece.type == PieceType.KING:
        state.revoke_all_castling_rights(piece.color)

    if piece.type == PieceType.ROOK:
        direction = castling_direction_for_rook_square(move.from_square)
        if direction is not None and direction.color == piece.color:
            state.revoke_castling_rights(direction)

    if captured is not None and captured.type == PieceType.ROOK:
        direction = castling_direction_for_rook_square(move.to_square)
        if direction is not None and direction.color == captured.color:
            state.revoke_castling_rights(direction)


def _determine_en_passant_square(piece: Piece, move: Move) -> Optional[Square]:
    """The possible en passant square for the next turn: the square a pawn skipped over."""
    rows_moved = move.to_square.row - move.from_square.row
    if piece.type == PieceType.PAWN and abs(rows_moved) == 2:
        return Square(move.from_square.row + rows_moved // 2, move.from_square.col)
    return None


def _feedback_text(state: PositionState, mover: Color) -> str:
    """Message for the presentation layer after the move is made"""
    if state.is_checkmate:
        return f"Checkmate! {mover.name.capitalize()} wins!"
    if state.is_check:
        return f"{state.color_to_move.name.capitalize()} is in check!"
    return ""


def apply_move(state: PositionState, move: Move) -> MoveResult:
    """
    Commit a move that is already known to be legal for the side to move.
    ----

    1. update the board (en passant capture / castling rook included)
    2. set or clear the en passant square
    3. revoke castling rights
    4. flip the turn (and update the move counters)
    5. recompute check / checkmate for the side that moves next
    """
    piece = state.board.piece(move.from_square)
    assert piece is not None
    history_entry = move.to_history(piece)

    captured = move_pieces(state, move)

    state.en_passant_square = _determine_en_passant_square(piece, move)
    _revoke_castling_rights_if_needed(state, piece, move, captured)

    # move counters
    if piece.type == PieceType.PAWN or captured is not None:
        state.half_move_clock = 0
    else:
        state.half_move_clock += 1
    if piece.color == Color.BLACK:
        state.num_turns += 1

    # NOTE update color to move AFTER the checks that depend on the last move made
    state.color_to_move = piece.color.opponent

    state.is_check = is_king_in_check(state, state.color_to_move)
    state.is_checkmate = state.is_check and is_checkmate(state, state.color_to_move)

    return MoveResult(
        accepted=True,
        check=state.is_check,
        checkmate=state.is_checkmate,
        history_entry=history_entry,
        feedback=_feedback_text(state, piece.color),
    )


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    state: PositionState
    history: list[str] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)

    @classmethod
    def new_game(cls, settings: Optional[Settings] = None) -> Self:
        """Start a game in the standard starting position (or the one from the settings)."""
        settings = settings or Settings()
        state = (
            PositionState.from_fen(settings.starting_fen)
            if settings.starting_fen
            else PositionState.starting_position()
        )
        return cls.from_state(state, settings)

    @classmethod
    def from_fen(cls, fen: str, settings: Optional[Settings] = None) -> Self:
        return cls.from_state(PositionState.from_fen(fen), settings or Settings())

    @classmethod
    def from_state(cls, state: PositionState, settings: Settings) -> Self:
        """
        Start playing from a loaded position
        ----

        1. the position must be consistent (kings, en passant square)
        2. the side that just moved cannot have left its king attacked: the king could be taken
        3. the flags are derived data: compute them for the side to move
        """
        state.validate()
        if is_king_in_check(state, state.color_to_move.opponent):
            raise InvalidFENError(
                f"{state.color_to_move.opponent.name.capitalize()} is in check while {state.color_to_move.name.lower()} is to move: {state.to_fen()}"
            )

        state.is_check = is_king_in_check(state, state.color_to_move)
        state.is_checkmate = state.is_check and is_checkmate(state, state.color_to_move)
        return cls(state=state, history=[], settings=settings)

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        return GameModel(
            current_fen=self.state.to_fen(),
            move_history=self.get_move_history(),
            status=self.status.value,
            winner=self.winner.name.lower() if self.winner else None,
        )

    @property
    def status(self) -> Status:
        if self.state.is_checkmate:
            return Status.CHECKMATE
        if self.state.is_check:
            return Status.CHECK
        return Status.IN_PROGRESS

    @property
    def winner(self) -> Optional[Color]:
        """Given it is checkmate, the side to move just got mated and the opponent must be the winner"""
        if not self.state.is_checkmate:
            return None
        return self.state.color_to_move.opponent

    def get_board(self) -> Board:
        """Snapshot for rendering. Changing it does not affect the game."""
        return self.state.board.copy()

    def get_move_history(self) -> list[str]:
        return list(self.history)

    def is_legal_move(self, from_square: Square, to_square: Square) -> bool:
        """
        Full check of a proposed move
        ----

        1. Game must not be over
        2. It must be your own piece, and your turn
        3. The piece must be able to make the move
        4. The move must not leave your own king in check (unless disabled in the settings)
        """
        if self.state.is_checkmate:
            return False

        piece = self.state.board.piece(from_square)
        if piece is None or piece.color != self.state.color_to_move:
            return False

        if not is_legal(self.state, from_square, to_square):
            return False

        if self.settings.enforce_king_safety and leaves_king_in_check(
            self.state, Move(from_square, to_square), piece.color
        ):
            return False
        return True

    def propose_move(self, from_square: Square, to_square: Square) -> MoveResult:
        """
        Attempt to make a move
        -----

        An illegal move is not an error: nothing changes and the result is simply not accepted.
        """
        move = Move(from_square, to_square)
        if not self.is_legal_move(from_square, to_square):
            _log.debug("Rejected move %s (%s to move)", move.to_uci(), self.state.color_to_move.name.lower())
            return REJECTED

        result = apply_move(self.state, move)
        assert result.history_entry is not None
        self.history.append(result.history_entry)

        _log.info("Played %s", result.history_entry)
        if result.checkmate:
            _log.info("Checkmate, %s wins", self.state.color_to_move.opponent.name.lower())
        return result
