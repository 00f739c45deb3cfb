"""Unit tests for src/api/models.py"""

from uuid import UUID, uuid4

import pytest

from src.api.models import CreateGameRequest, FeedbackRequest, GameResponse, MoveRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_valid_fen() -> None:
    """Test that CreateGameRequest accepts a valid FEN string."""
    valid_fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
    request = CreateGameRequest(starting_fen=valid_fen)
    assert request.starting_fen == valid_fen


def test_starting_fen_is_optional() -> None:
    """Should be able to not supply a starting FEN, and validator just returns None."""
    assert CreateGameRequest().starting_fen is None


@pytest.mark.parametrize(
    "invalid_fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0",  # only 5 space-separated values
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 extra",  # too many space-separated values
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e4 0 1",  # en passant square on the 4th rank
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX w KQkq - 0 1",  # unknown piece
        "mock mock mock mock mock mock",
    ],
)
def test_invalid_fen(invalid_fen: str) -> None:
    """Anything that is not a well-formed FEN string."""
    with pytest.raises(InvalidRequestError):
        CreateGameRequest(starting_fen=invalid_fen)


# -- Validation - MoveRequest --
def test_valid_square_names(mock_id: UUID) -> None:
    """Test that MoveRequest accepts correctly written squares in algebraic notation."""
    request = MoveRequest(game_id=mock_id, from_square="e2", to_square="e4")
    assert request.from_square == "e2"
    assert request.to_square == "e4"


@pytest.mark.parametrize(
    "square",
    [
        "nonsense",  # anything more than two characters.
        "11",  # First character is not a letter
        "aa",  # second character is not a number
        "i4",  # no i-file
        "a9",  # no 9th rank
        "a0",
    ],
)
def test_invalid_square(mock_id: UUID, square: str) -> None:
    """Test that an exception is raised when using invalid square name."""
    with pytest.raises(InvalidRequestError):
        MoveRequest(game_id=mock_id, from_square=square, to_square="e2")
    with pytest.raises(InvalidRequestError):
        MoveRequest(game_id=mock_id, from_square="e2", to_square=square)


# -- Responses --
def test_game_response_parses_string_values(mock_id: UUID) -> None:
    response = GameResponse(
        game_id=mock_id,
        fen_state="8/8/8/8/8/8/8/8 w - - 0 1",
        board=[[""] * 8 for _ in range(8)],
        color_to_move="white",
        status="checkmate",
        winner="black",
        move_history=[],
    )
    assert response.color_to_move == Color.WHITE
    assert response.status == Status.CHECKMATE
    assert response.winner == Color.BLACK


def test_feedback_request_without_game() -> None:
    request = FeedbackRequest(hint="what now?")
    assert request.game_id is None
    assert request.hint == "what now?"
