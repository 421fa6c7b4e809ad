import pytest

from wordle_heuristic.wordle_env import Color, FeedbackRecord, PositionFeedback

WORDS = [
    "apple", "crane", "plate", "slate", "ghost", "toast",
    "blush", "focal", "evade", "naval", "cigar", "rebut",
]

_PATTERN_COLORS = {"G": Color.GREEN, "Y": Color.YELLOW, ".": Color.GRAY}


def make_record(word, pattern):
    """Build a FeedbackRecord from e.g. ("crane", "..Y.G")."""
    return FeedbackRecord(tuple(
        PositionFeedback(ch, _PATTERN_COLORS[p]) for ch, p in zip(word, pattern)
    ))


@pytest.fixture
def words():
    return list(WORDS)
