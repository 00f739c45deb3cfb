"""
Feedback on the game, requested by the player.

Only a hook point: the default provider picks one of a few canned remarks at random, it does not look at the position.
Anything implementing FeedbackProvider can be plugged into the ChessService instead.
"""

import random
from typing import Optional, Protocol

FEEDBACK_OPTIONS: tuple[str, ...] = (
    "White seems to have a slight advantage in piece development.",
    "Black's pawn structure looks solid, providing good control of the center.",
    "Both players should focus on developing their minor pieces and castling soon.",
    "The current position looks fairly balanced. Look for opportunities to create weaknesses in your opponent's position.",
    "Consider controlling the center with your pawns and pieces to gain more space on the board.",
)


class FeedbackProvider(Protocol):
    def feedback(self, fen: Optional[str], hint: Optional[str] = None) -> str:
        """Remark on the position given as FEN (None when not tied to a game), optionally steered by a free-text hint."""
        ...


class RandomFeedbackProvider:
    """Uniform pick from FEEDBACK_OPTIONS. Ignores both the position and the hint."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def feedback(self, fen: Optional[str], hint: Optional[str] = None) -> str:
        return self._rng.choice(FEEDBACK_OPTIONS)
