"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
The API layer (higher) and the domain layer (lower) both convert to/from the models defined here
(decouples the data model of each layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameModel:
    """Transport-safe snapshot of a chess game used between API, Service, and Game layers."""

    current_fen: str
    move_history: list[str]
    status: str
    winner: Optional[str] = None


@dataclass(frozen=True)
class MoveResult:
    """Outcome of proposing a single move."""

    accepted: bool
    check: bool = False
    checkmate: bool = False
    history_entry: Optional[str] = None
    feedback: str = ""
