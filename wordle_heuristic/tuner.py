#!/usr/bin/env python3
"""
tuner.py

Random-search tuner for the guess-scoring weights.

For each generation:
  - sample a random parameter vector (each coordinate uniform in param_range),
  - play one game per training secret with those weights,
  - measure performance as "average tries to solve" (lost games count as
    fail_penalty),
  - keep the vector with the lowest average seen so far.

There is no convergence test; the search runs for exactly `generations`
iterations. Only the first three coordinates weight the scoring criteria
(novelty, diversity, value); the rest are carried along and reported.
"""

import random
from dataclasses import dataclass, field
from functools import partial
from multiprocessing import Pool, cpu_count
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from wordle_heuristic.config import CONFIG
from wordle_heuristic.engine import GameState, GuessEngine
from wordle_heuristic.vocab import letter_weights
from wordle_heuristic.words import to_words

FAIL_PENALTY = CONFIG["fail_penalty"]


# ----------------------------- Results ------------------------------------ #

@dataclass
class GenerationStats:
    generation: int
    avg: float
    best_avg: float
    params: Tuple[float, ...]


@dataclass
class TrainingResult:
    best_avg: float
    best_params: Tuple[float, ...]
    history: List[GenerationStats] = field(default_factory=list)


# ----------------------------- Sampling ----------------------------------- #

def random_params(rng: random.Random, n: int = CONFIG["num_params"]) -> Tuple[float, ...]:
    low, high = CONFIG["param_range"]
    return tuple(rng.uniform(low, high) for _ in range(n))


def sample_secrets(words: Sequence, sample_size: int, rng: random.Random) -> list:
    """Shuffle a copy of the dictionary and take the first sample_size words."""
    pool = list(words)
    rng.shuffle(pool)
    return pool[:sample_size]


# ----------------------------- Evaluation --------------------------------- #

def simulate_single_game(
    secret,
    words: Sequence,
    params: Sequence[float],
    char_weights: Dict[str, float],
    max_guesses: int = CONFIG["max_guesses"],
    halt_on_budget_exceeded: bool = CONFIG["halt_on_budget_exceeded"],
) -> float:
    """
    Play one game with the given weights.

    Returns the number of tries used, or FAIL_PENALTY if the game was lost.
    """
    engine = GuessEngine(
        secret,
        words,
        weights=params[:3],
        char_weights=char_weights,
        max_tries=max_guesses,
        halt_on_budget_exceeded=halt_on_budget_exceeded,
    )
    if engine.play() == GameState.LOST:
        return FAIL_PENALTY
    return float(engine.tries)


def evaluate_params(
    params: Sequence[float],
    secrets: Sequence,
    words: Sequence,
    char_weights: Dict[str, float],
    parallel: bool = CONFIG["parallel_eval"],
    **game_kwargs,
) -> float:
    """
    Mean tries over all secrets. Lower is better.

    With parallel=True each game runs in a worker of a multiprocessing.Pool;
    games share no state, so the result is identical.
    """
    if not secrets:
        raise ValueError("Need at least one secret to evaluate parameters")

    if parallel:
        play = partial(
            simulate_single_game,
            words=words,
            params=params,
            char_weights=char_weights,
            **game_kwargs,
        )
        with Pool(cpu_count()) as pool:
            scores = pool.map(play, secrets)
    else:
        scores = [
            simulate_single_game(s, words, params, char_weights, **game_kwargs)
            for s in secrets
        ]
    return sum(scores) / len(scores)


# ----------------------------- Search loop -------------------------------- #

def train(
    words: Sequence,
    generations: int = CONFIG["generations"],
    sample_size: int = CONFIG["train_sample_size"],
    rng: Optional[random.Random] = None,
    char_weights: Optional[Dict[str, float]] = None,
    on_generation: Optional[Callable[[GenerationStats], None]] = None,
    parallel: bool = CONFIG["parallel_eval"],
    **game_kwargs,
) -> TrainingResult:
    """
    Simple random search over scoring weights.

    Each generation draws a fresh secret sample and a fresh parameter vector.
    best_avg never increases from one generation to the next.
    """
    if rng is None:
        rng = random.Random(CONFIG["random_seed"])
    words = to_words(words)
    if char_weights is None:
        char_weights = letter_weights(words)

    result = TrainingResult(best_avg=float("inf"), best_params=())

    for gen in range(generations):
        params = random_params(rng)
        secrets = sample_secrets(words, sample_size, rng)
        avg = evaluate_params(params, secrets, words, char_weights, parallel=parallel, **game_kwargs)

        if avg < result.best_avg:
            result.best_avg = avg
            result.best_params = params

        stats = GenerationStats(
            generation=gen + 1,
            avg=avg,
            best_avg=result.best_avg,
            params=params,
        )
        result.history.append(stats)
        if on_generation is not None:
            on_generation(stats)

    return result
