"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.fen import is_valid_square, validate_fen_field
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

# Type aliases to make the models easier to read
SquareName = str
FENCharacter = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        return validate_fen_field(value)


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not is_valid_square(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class FeedbackRequest(BaseModel):
    # no game: feedback without a position
    game_id: Optional[UUID] = None
    hint: Optional[str] = None


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    fen_state: str
    # 8 rows (8th rank first) of 8 FEN characters, "" for an empty square
    board: list[list[FENCharacter]]
    color_to_move: Color
    status: Status
    winner: Optional[Color] = None
    move_history: list[str]


class MoveResponse(BaseModel):
    game_id: UUID
    accepted: bool
    check: bool
    checkmate: bool
    history_entry: Optional[str] = None
    feedback: str = ""
    fen_state: str


class MoveHistoryResponse(BaseModel):
    game_id: UUID
    move_history: list[str]


class FeedbackResponse(BaseModel):
    game_id: Optional[UUID] = None
    feedback: str
