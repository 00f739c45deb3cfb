"""Unit tests for src/services/feedback.py"""

from src.chess.fen import STARTING_FEN
from src.services.feedback import FEEDBACK_OPTIONS, RandomFeedbackProvider


def test_five_canned_remarks() -> None:
    assert len(FEEDBACK_OPTIONS) == 5
    assert len(set(FEEDBACK_OPTIONS)) == 5


def test_feedback_is_picked_from_catalog() -> None:
    provider = RandomFeedbackProvider()
    for _ in range(20):
        assert provider.feedback(STARTING_FEN) in FEEDBACK_OPTIONS


def test_seeded_provider_is_deterministic() -> None:
    first = RandomFeedbackProvider(seed=7)
    second = RandomFeedbackProvider(seed=7)
    assert [first.feedback(STARTING_FEN) for _ in range(10)] == [
        second.feedback(STARTING_FEN) for _ in range(10)
    ]


def test_hint_is_ignored() -> None:
    with_hint = RandomFeedbackProvider(seed=3)
    without_hint = RandomFeedbackProvider(seed=3)
    assert with_hint.feedback(STARTING_FEN, "tell me about my pawns") == without_hint.feedback(
        STARTING_FEN
    )


def test_all_remarks_eventually_show_up() -> None:
    provider = RandomFeedbackProvider(seed=0)
    seen = {provider.feedback(STARTING_FEN) for _ in range(500)}
    assert seen == set(FEEDBACK_OPTIONS)
