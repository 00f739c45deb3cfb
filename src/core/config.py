"""
Runtime configuration.

Settings are plain pydantic models so they get validated the same way as the request models.
Values can be overridden with CHESS_* environment variables.
"""

import os
from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.chess.fen import validate_fen_field

ENV_PREFIX = "CHESS_"
TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    # Reject moves that leave your own king in check (standard chess).
    # Set to False to only check the geometry of a move.
    enforce_king_safety: bool = True
    # None means: the standard starting position
    starting_fen: Optional[str] = None
    # Seed for the random feedback provider (None = non-deterministic)
    feedback_seed: Optional[int] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        return validate_fen_field(value)

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> Self:
        """Build the settings from (a copy of) the environment."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        king_safety = env.get(f"{ENV_PREFIX}ENFORCE_KING_SAFETY")
        if king_safety is not None:
            values["enforce_king_safety"] = king_safety.strip().lower() in TRUTHY

        starting_fen = env.get(f"{ENV_PREFIX}STARTING_FEN")
        if starting_fen:
            values["starting_fen"] = starting_fen

        seed = env.get(f"{ENV_PREFIX}FEEDBACK_SEED")
        if seed:
            values["feedback_seed"] = int(seed)

        return cls(**values)
