#!/usr/bin/env python3
from dataclasses import dataclass
from enum import IntEnum
from typing import FrozenSet, Iterable, Optional, Tuple

from wordle_heuristic.words import Word

# =========================
# Feedback model
# =========================


class Color(IntEnum):
    GRAY = 0
    YELLOW = 1
    GREEN = 2


@dataclass(frozen=True)
class PositionFeedback:
    character: str
    color: Color


@dataclass(frozen=True)
class FeedbackRecord:
    """Coloured outcome of one guess, one PositionFeedback per index."""

    positions: Tuple[PositionFeedback, ...]

    @property
    def word(self) -> str:
        return "".join(p.character for p in self.positions)

    @property
    def is_win(self) -> bool:
        return all(p.color == Color.GREEN for p in self.positions)

    def chars_with(self, color: Color) -> set:
        return {p.character for p in self.positions if p.color == color}

    def word_passes_green(self, word: Word) -> bool:
        return all(
            word.characters[i] == p.character
            for i, p in enumerate(self.positions)
            if p.color == Color.GREEN
        )

    def word_passes_yellow(self, word: Word) -> bool:
        for p in self.positions:
            if p.color != Color.YELLOW:
                continue
            if not word.has_char(p.character):
                return False
            first = word.characters.index(p.character)
            if self.positions[first].color == Color.GREEN:
                return False
        return True

    def word_passes_gray(self, word: Word) -> bool:
        # a gray duplicate of a green/yellow letter says nothing about absence
        placed = self.chars_with(Color.GREEN) | self.chars_with(Color.YELLOW)
        return not any(
            word.has_char(p.character)
            for p in self.positions
            if p.color == Color.GRAY and p.character not in placed
        )

    def matches(self, word: Word) -> bool:
        return (
            self.word_passes_green(word)
            and self.word_passes_yellow(word)
            and self.word_passes_gray(word)
        )


def compute_feedback(guess: Word, secret: Word) -> FeedbackRecord:
    """
    Colour each position of `guess` against `secret`:
    GREEN  = same letter at the same index
    YELLOW = letter occurs anywhere in the secret
    GRAY   = otherwise
    Then every YELLOW whose letter is GREEN somewhere in the same guess is
    turned GRAY. Yellows are not capped by remaining multiplicity.
    """
    if len(guess) != len(secret):
        raise ValueError(
            f"Guess {guess} and secret {secret} differ in length"
        )
    colors = []
    for g, s in zip(guess.characters, secret.characters):
        if g == s:
            colors.append(Color.GREEN)
        elif secret.has_char(g):
            colors.append(Color.YELLOW)
        else:
            colors.append(Color.GRAY)

    green_chars = {g for g, c in zip(guess.characters, colors) if c == Color.GREEN}
    for i, ch in enumerate(guess.characters):
        if colors[i] == Color.YELLOW and ch in green_chars:
            colors[i] = Color.GRAY

    return FeedbackRecord(
        tuple(PositionFeedback(ch, c) for ch, c in zip(guess.characters, colors))
    )


# =========================
# Constraint aggregation
# =========================


@dataclass(frozen=True)
class ConstraintState:
    green_by_position: Tuple[Optional[str], ...]
    yellow_set: FrozenSet[str]
    gray_chars: FrozenSet[str]

    @property
    def green_chars(self) -> FrozenSet[str]:
        return frozenset(c for c in self.green_by_position if c is not None)

    @property
    def known_chars(self) -> FrozenSet[str]:
        return self.green_chars | self.yellow_set


def aggregate_constraints(history: Iterable[FeedbackRecord], length: int) -> ConstraintState:
    """
    Rebuild green / yellow / gray knowledge from the full feedback history.
    Later greens at the same index overwrite earlier ones.
    """
    green = [None] * length
    yellow = set()
    gray = set()
    for record in history:
        for i, p in enumerate(record.positions):
            if p.color == Color.GREEN:
                green[i] = p.character
            elif p.color == Color.YELLOW:
                yellow.add(p.character)
            else:
                gray.add(p.character)

    green_chars = {c for c in green if c is not None}
    yellow -= green_chars
    gray -= yellow | green_chars
    return ConstraintState(tuple(green), frozenset(yellow), frozenset(gray))


def passes_gray(word: Word, state: ConstraintState) -> bool:
    return not any(word.has_char(c) for c in state.gray_chars)


def passes_green(word: Word, state: ConstraintState) -> bool:
    return all(
        c is None or word.characters[i] == c
        for i, c in enumerate(state.green_by_position)
    )


def passes_yellow(word: Word, state: ConstraintState) -> bool:
    # presence only; yellow positions are not excluded here
    return all(word.has_char(c) for c in state.yellow_set)


def passes_all(word: Word, state: ConstraintState) -> bool:
    return passes_gray(word, state) and passes_green(word, state) and passes_yellow(word, state)
