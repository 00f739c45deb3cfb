"""Protocol repository + the in-memory implementation holding the running game sessions"""

import threading
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID, uuid4

from src.chess.game import Game


@dataclass
class GameSession:
    """A running game. Every move must be validated and applied while holding the lock."""

    game: Game
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameRepository(Protocol):
    """Session store orchestration"""

    def get_session(self, game_id: UUID) -> GameSession | None:
        """Get game by ID, if it exists."""
        ...

    def create_session(self, game: Game) -> tuple[GameSession, UUID]:
        """Store new game and return the session + newly created game ID."""
        ...

    def delete_session(self, game_id: UUID) -> GameSession | None:
        """Remove a game."""
        ...


class InMemoryGameRepository:
    """Sessions live in a dictionary for as long as the process runs (games are never persisted)"""

    def __init__(self) -> None:
        self._sessions: dict[UUID, GameSession] = {}
        self._lock = threading.Lock()

    def get_session(self, game_id: UUID) -> GameSession | None:
        with self._lock:
            return self._sessions.get(game_id)

    def create_session(self, game: Game) -> tuple[GameSession, UUID]:
        new_id = uuid4()
        session = GameSession(game)
        with self._lock:
            self._sessions[new_id] = session
        return session, new_id

    def delete_session(self, game_id: UUID) -> GameSession | None:
        with self._lock:
            return self._sessions.pop(game_id, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
