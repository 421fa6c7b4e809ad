#!/usr/bin/env python3
from wordle_heuristic.wordle_env import Color, FeedbackRecord

_RESET = "\033[0m"
_COLOURS = {
    Color.GREEN: "\033[1;30;42m",   # green background
    Color.YELLOW: "\033[1;30;43m",  # yellow background
    Color.GRAY: "\033[1;37;100m",   # grey background
}
_PATTERN = {Color.GREEN: "G", Color.YELLOW: "Y", Color.GRAY: "."}


def render_feedback(record: FeedbackRecord) -> str:
    """Terminal string with every letter painted by its feedback colour."""
    return "".join(
        f"{_COLOURS[p.color]} {p.character.upper()} {_RESET}" for p in record.positions
    )


def feedback_pattern(record: FeedbackRecord) -> str:
    return "".join(_PATTERN[p.color] for p in record.positions)
