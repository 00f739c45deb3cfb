"""Orchestration of communication from the presentation layer to the business logic (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    FeedbackRequest,
    FeedbackResponse,
    GameResponse,
    GetGameRequest,
    MoveHistoryResponse,
    MoveRequest,
    MoveResponse,
)
from src.chess.board import Board
from src.chess.game import Game
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.config import Settings
from src.core.exceptions import GameStateError, RepositoryError
from src.core.shared_types import Color
from src.services.feedback import FeedbackProvider, RandomFeedbackProvider
from src.services.repository import GameRepository, GameSession

_log = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(
        self,
        repository: GameRepository,
        settings: Optional[Settings] = None,
        feedback_provider: Optional[FeedbackProvider] = None,
    ) -> None:
        self.repo = repository
        self.settings = settings or Settings()
        self.feedback_provider = feedback_provider or RandomFeedbackProvider(
            self.settings.feedback_seed
        )

    # -- presentation layer logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game, in the standard starting position unless a FEN is supplied."""
        settings = self.settings
        if request.starting_fen:
            settings = settings.model_copy(update={"starting_fen": request.starting_fen})

        game = Game.new_game(settings)
        session, game_id = self.repo.create_session(game)
        _log.info("Created game %s", game_id)
        return self._create_game_response(game_id, session.game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Read-only snapshot of the game, used for rendering."""
        session = self._fetch_session(request.game_id)
        with session.lock:
            return self._create_game_response(request.game_id, session.game)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Propose a move.
        ----
        A rejected move is reported back (accepted=False), not raised. Only moving after the game ended is an error.
        """
        session = self._fetch_session(request.game_id)
        from_square = Square.from_algebraic(request.from_square)
        to_square = Square.from_algebraic(request.to_square)

        # validate-and-apply is a critical section per game
        with session.lock:
            game = session.game
            if game.state.is_checkmate:
                raise GameStateError(
                    f"Game {request.game_id} is over. status: {game.status}"
                )
            result = game.propose_move(from_square, to_square)
            fen_state = game.state.to_fen()

        return MoveResponse(
            game_id=request.game_id,
            accepted=result.accepted,
            check=result.check,
            checkmate=result.checkmate,
            history_entry=result.history_entry,
            feedback=result.feedback,
            fen_state=fen_state,
        )

    def move_history(self, request: GetGameRequest) -> MoveHistoryResponse:
        session = self._fetch_session(request.game_id)
        with session.lock:
            history = session.game.get_move_history()
        return MoveHistoryResponse(game_id=request.game_id, move_history=history)

    def request_feedback(self, request: FeedbackRequest) -> FeedbackResponse:
        """
        Ask the feedback provider for a remark. Does not change the game.
        ----
        Without a game ID the provider gets no position. A given game ID must exist.
        """
        fen: Optional[str] = None
        if request.game_id is not None:
            session = self._fetch_session(request.game_id)
            with session.lock:
                fen = session.game.state.to_fen()
        feedback = self.feedback_provider.feedback(fen, request.hint)
        return FeedbackResponse(game_id=request.game_id, feedback=feedback)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game."""
        self.repo.delete_session(request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the Game to a GameResponse (for game with given ID.)"""
        model = game.to_model()
        return GameResponse(
            game_id=game_id,
            fen_state=model.current_fen,
            board=board_to_rows(game.get_board()),
            color_to_move=Color[game.state.color_to_move.name],
            status=model.status,
            winner=model.winner,
            move_history=model.move_history,
        )

    def _fetch_session(self, game_id: UUID) -> GameSession:
        """Attempt to find the game in the repository and raise error if it fails."""
        session = self.repo.get_session(game_id)
        if session is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return session


def board_to_rows(board: Board) -> list[list[str]]:
    """8 rows of FEN characters, starting at the 8th rank. Empty squares are ''."""
    rows: list[list[str]] = []
    for row in range(BOARD_DIMENSIONS[0]):
        fen_characters: list[str] = []
        for col in range(BOARD_DIMENSIONS[1]):
            piece = board.piece(Square(row, col))
            fen_characters.append(piece.to_fen() if piece is not None else "")
        rows.append(fen_characters)
    return rows
