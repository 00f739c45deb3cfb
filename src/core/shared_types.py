"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    CHECK = "check"
    CHECKMATE = "checkmate"


# --- NOTE the domain layer defines its own Color (src/chess/pieces.py).
# --- This string-valued version is what crosses the service/API boundary.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
