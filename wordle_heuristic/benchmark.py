#!/usr/bin/env python3
"""
Play the heuristic solver against many secrets and write a CSV for
guess distribution analysis, and plot training curves from a TrainingResult.
"""

import csv
import random
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt

from wordle_heuristic.config import CONFIG
from wordle_heuristic.engine import GameState, play_game
from wordle_heuristic.render import feedback_pattern
from wordle_heuristic.tuner import TrainingResult, sample_secrets
from wordle_heuristic.vocab import letter_weights
from wordle_heuristic.words import to_words

FIELDNAMES = ["game_idx", "secret", "guesses_used", "solved", "patterns"]


def run_guess_benchmark(
    words: Sequence,
    num_games: int,
    out_path: Path,
    weights: Sequence[float] = CONFIG["default_weights"],
    rng: Optional[random.Random] = None,
) -> List[Dict]:
    """Play num_games games, write one CSV row per game, return the rows."""
    if rng is None:
        rng = random.Random(CONFIG["random_seed"])
    words = to_words(words)
    char_weights = letter_weights(words)

    rows = []
    solved_count = 0
    total_guesses = 0

    secrets = sample_secrets(words, num_games, rng)
    for i, secret in enumerate(secrets):
        engine = play_game(secret, words, weights=weights[:3], char_weights=char_weights)
        solved = int(engine.state == GameState.WON and engine.tries <= CONFIG["max_guesses"])
        solved_count += solved
        total_guesses += engine.tries

        rows.append({
            "game_idx": i,
            "secret": str(secret),
            "guesses_used": engine.tries,
            "solved": solved,
            "patterns": " ".join(feedback_pattern(r) for r in engine.history),
        })

        if (i + 1) % 10 == 0:
            print(f"[bench] finished {i+1}/{len(secrets)} games")

    with Path(out_path).open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)

    played = len(rows)
    avg_guesses = total_guesses / played if played else 0.0
    solve_rate = solved_count / played if played else 0.0
    print(f"[bench] wrote {out_path}")
    print(f"[bench] avg_guesses={avg_guesses:.3f}, solve_rate={solve_rate*100:.1f}% "
          f"over {played} games")
    return rows


def plot_training_curve(result: TrainingResult, out_path: Path) -> None:
    """Per-generation average (dashed) and best-so-far average (solid)."""
    gens = [s.generation for s in result.history]
    avg = [s.avg for s in result.history]
    best = [s.best_avg for s in result.history]

    plt.figure()
    plt.plot(gens, best, marker="o", linestyle="-", color="tab:blue", label="Best so far")
    plt.plot(gens, avg, marker="s", linestyle="--", color="tab:orange", label="Generation avg")
    plt.xlabel("Generation")
    plt.ylabel("Average tries (lower is better)")
    plt.title("Random-search weight tuning")
    plt.legend()
    plt.grid(True, which="both", linestyle="--", linewidth=0.5)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
