#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from wordle_heuristic.config import CONFIG
from wordle_heuristic.scoring import rank_words
from wordle_heuristic.wordle_env import (
    ConstraintState,
    FeedbackRecord,
    aggregate_constraints,
    compute_feedback,
    passes_gray,
    passes_green,
    passes_yellow,
)
from wordle_heuristic.words import Word, as_word, to_words

# =========================
# Guess engine
# =========================

MAX_GUESSES = CONFIG["max_guesses"]
BUCKET_KEYS = ("g", "v", "y", "gv", "gy", "yv", "gvy")


class NoCandidatesError(RuntimeError):
    """No unguessed word is left to propose."""


class InvalidStateError(RuntimeError):
    """A guess was submitted to a game that is already over."""


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


def consistent_words(pool: Sequence[Word], history: Sequence[FeedbackRecord]) -> List[Word]:
    """Words that agree with every feedback record in history."""
    return [w for w in pool if all(record.matches(w) for record in history)]


@dataclass(frozen=True)
class GuessEvent:
    try_number: int
    record: FeedbackRecord
    state: GameState
    budget_exceeded: bool
    pool: Sequence[Word] = field(repr=False)
    history: Tuple[FeedbackRecord, ...] = field(repr=False)

    @property
    def remaining(self) -> int:
        """Consistent candidates left after this guess; computed on access."""
        return len(consistent_words(self.pool, self.history))


class GuessEngine:
    """
    Plays one game against a known secret.

    candidate_pool is every dictionary word not guessed yet; it only shrinks.
    Constraints are always recomputed from the full history.
    """

    def __init__(
        self,
        secret,
        words: Sequence,
        weights: Sequence[float] = CONFIG["default_weights"],
        char_weights: Optional[Dict[str, float]] = None,
        max_tries: int = MAX_GUESSES,
        halt_on_budget_exceeded: bool = CONFIG["halt_on_budget_exceeded"],
        on_guess: Optional[Callable[[GuessEvent], None]] = None,
    ):
        self.secret = as_word(secret, CONFIG["word_length"])
        self.length = len(self.secret)
        self.candidate_pool: List[Word] = to_words(words, self.length)
        self.weights = tuple(weights)
        self.char_weights = char_weights or {}
        self.max_tries = max_tries
        self.halt_on_budget_exceeded = halt_on_budget_exceeded
        self.on_guess = on_guess
        self.history: List[FeedbackRecord] = []
        self.state = GameState.IN_PROGRESS
        self.budget_exceeded = False

    @property
    def tries(self) -> int:
        return len(self.history)

    def constraints(self) -> ConstraintState:
        return aggregate_constraints(self.history, self.length)

    def candidate_filter(self, word: Word, state: Optional[ConstraintState] = None) -> bool:
        state = state or self.constraints()
        return passes_gray(word, state) and passes_green(word, state) and passes_yellow(word, state)

    def consistent_candidates(self) -> List[Word]:
        """Pool words that agree with every feedback record seen so far."""
        return consistent_words(self.candidate_pool, self.history)

    def submit_guess(self, word) -> FeedbackRecord:
        if self.state != GameState.IN_PROGRESS:
            raise InvalidStateError(f"Game already {self.state.value}")
        guess = as_word(word, self.length)
        record = compute_feedback(guess, self.secret)
        self.history.append(record)
        self.candidate_pool = [w for w in self.candidate_pool if w != guess]

        if record.is_win:
            self.state = GameState.WON
        elif self.tries >= self.max_tries:
            self.budget_exceeded = True
            if self.halt_on_budget_exceeded:
                self.state = GameState.LOST

        if self.on_guess is not None:
            self.on_guess(GuessEvent(
                try_number=self.tries,
                record=record,
                state=self.state,
                budget_exceeded=self.budget_exceeded,
                # candidate_pool is rebound on every guess, never mutated in place
                pool=self.candidate_pool,
                history=tuple(self.history),
            ))
        return record

    def buckets(self, state: ConstraintState) -> Dict[str, List[Word]]:
        """Group the pool by which of the gray/green/yellow filters each word passes."""
        graded = [
            (w, passes_gray(w, state), passes_green(w, state), passes_yellow(w, state))
            for w in self.candidate_pool
        ]
        return {
            "g": [w for w, g, v, y in graded if g],
            "v": [w for w, g, v, y in graded if v],
            "y": [w for w, g, v, y in graded if y],
            "gv": [w for w, g, v, y in graded if g and v],
            "gy": [w for w, g, v, y in graded if g and y],
            "yv": [w for w, g, v, y in graded if v and y],
            "gvy": [w for w, g, v, y in graded if g and v and y],
        }

    def select_guess(self) -> Word:
        if not self.candidate_pool:
            raise NoCandidatesError("No words remaining")
        if len(self.candidate_pool) == 1:
            return self.candidate_pool[0]

        state = self.constraints()
        buckets = self.buckets(state)
        smallest = min(len(buckets[k]) for k in BUCKET_KEYS)
        key = next(k for k in BUCKET_KEYS if len(buckets[k]) == smallest)
        if not buckets[key]:
            raise NoCandidatesError(
                f"Bucket {key!r} is empty; feedback history is inconsistent with the dictionary"
            )
        return rank_words(self.weights, buckets[key], state, self.char_weights)[0][0]

    def play(self) -> GameState:
        while self.state == GameState.IN_PROGRESS:
            self.submit_guess(self.select_guess())
        return self.state


def play_game(secret, words: Sequence, **kwargs) -> GuessEngine:
    """Run a full game and return the finished engine (history, state, tries)."""
    engine = GuessEngine(secret, words, **kwargs)
    engine.play()
    return engine
