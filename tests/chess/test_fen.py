"""Unit tests for /src/chess/fen.py"""

import pytest

from src.chess.fen import (
    STARTING_FEN,
    is_valid_castling_rights,
    is_valid_color_code,
    is_valid_en_passant,
    is_valid_fen,
    is_valid_position,
    is_valid_square,
)


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_FEN,
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1 b kq - 3 9",
        "8/8/8/8/8/8/8/8 w - e3 0 1",
    ],
)
def test_valid_fen(fen: str) -> None:
    assert is_valid_fen(fen)


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0",  # only 5 parts
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",  # color
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQX - 0 1",  # castling
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq z9 0 1",  # en passant
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - a 1",  # counter
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",  # 7 ranks
    ],
)
def test_invalid_fen(fen: str) -> None:
    assert not is_valid_fen(fen)


@pytest.mark.parametrize(
    "position, expected",
    [
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", True),
        ("8/8/8/8/8/8/8/8", True),
        ("8/8/8/8/8/8/8/7", False),
        ("8/8/8/8/8/8/8/44x", False),
    ],
)
def test_valid_position(position: str, expected: bool) -> None:
    assert is_valid_position(position) is expected


def test_small_validators() -> None:
    assert is_valid_color_code("w") and is_valid_color_code("b")
    assert not is_valid_color_code("white")
    assert is_valid_castling_rights("KQkq") and is_valid_castling_rights("-")
    assert not is_valid_castling_rights("qk")
    assert is_valid_en_passant("-") and is_valid_en_passant("e6")
    assert is_valid_square("h8")
    assert not is_valid_square("h9")
    assert not is_valid_square("e10")


@pytest.mark.parametrize("en_passant", ["e3", "a6", "h3"])
def test_en_passant_on_skipped_rank(en_passant: str) -> None:
    assert is_valid_en_passant(en_passant)


@pytest.mark.parametrize("en_passant", ["e4", "d5", "a1", "h8", "e2", "e7"])
def test_en_passant_on_other_ranks(en_passant: str) -> None:
    """Only a pawn's double step creates an en passant square: it can only be on rank 3 or 6"""
    assert not is_valid_en_passant(en_passant)
    assert not is_valid_fen(f"4k3/8/8/8/8/3PK3/8/8 w - {en_passant} 0 1")


@pytest.mark.parametrize("square", ["a²", "e٣"])
def test_square_with_unicode_digit(square: str) -> None:
    """Other unicode digits must be rejected here, not crash later on int()"""
    assert not is_valid_square(square)
    assert not is_valid_en_passant(square)


def test_position_and_counters_with_unicode_digits() -> None:
    assert not is_valid_position("8/8/8/8/8/8/8/7²")
    assert not is_valid_fen("8/8/8/8/8/8/8/8 w - - ² 1")
    assert not is_valid_fen("8/8/8/8/8/8/8/8 w - - 0 ٣")
