#!/usr/bin/env python3
"""
Command line entry point.

Usage:
    wordle-heuristic play [--secret apple] [--words words.txt]
    wordle-heuristic train --generations 10 --sample-size 100 [--plot curve.png]
    wordle-heuristic bench --games 100 --out guess_bench.csv
"""

import argparse
import random
import time
from pathlib import Path

from wordle_heuristic.benchmark import plot_training_curve, run_guess_benchmark
from wordle_heuristic.config import CONFIG
from wordle_heuristic.engine import GameState, GuessEngine
from wordle_heuristic.render import render_feedback
from wordle_heuristic.tuner import train
from wordle_heuristic.vocab import letter_weights, load_dictionary


def print_guess(event):
    print(f"{render_feedback(event.record)}  ({event.try_number})")
    if CONFIG["debug"]:
        print(f"[play] consistent candidates left: {event.remaining}")
    if event.budget_exceeded and event.try_number == CONFIG["max_guesses"] and not event.record.is_win:
        print("LOSE D:")


def print_generation(stats):
    print(
        f"Generation {stats.generation:02d} | "
        f"Avg tries: {stats.avg:.3f} | "
        f"Best avg tries: {stats.best_avg:.3f}"
    )
    print(f"  Params: {[round(p, 2) for p in stats.params]}")


def demo_game(words, secret=None, weights=CONFIG["default_weights"], halt=False, rng=None):
    """Play one game against `secret` (a word drawn with `rng` if None)."""
    if secret is None:
        if rng is None:
            rng = random.Random(CONFIG["random_seed"])
        secret = rng.choice(words)
    print("\n=== Demo game with heuristic solver ===")

    engine = GuessEngine(
        secret,
        words,
        weights=weights,
        char_weights=letter_weights(words),
        halt_on_budget_exceeded=halt,
        on_guess=print_guess,
    )
    state = engine.play()

    if state == GameState.WON:
        print(f"WIN :D in {engine.tries} guesses")
    else:
        print(f"Failed to solve within {engine.max_tries} guesses.")
    print(f"Secret was: {secret}")
    return engine


def run_training(words, generations, sample_size, seed, parallel, plot=None):
    start_time = time.time()
    result = train(
        words,
        generations=generations,
        sample_size=sample_size,
        rng=random.Random(seed),
        on_generation=print_generation,
        parallel=parallel,
    )
    elapsed = time.time() - start_time
    print("\n=== Finished training ===")
    print(f"[train] Done in {elapsed:.1f}s. Best avg tries = {result.best_avg:.3f}")
    print(f"[train] Best params: {list(result.best_params)}")
    if plot:
        plot_training_curve(result, Path(plot))
        print(f"[train] Wrote training curve to {plot}")
    return result


def build_parser():
    parser = argparse.ArgumentParser(description="Heuristic Wordle solver and weight tuner.")
    parser.add_argument("--words", type=str, default=None, help="Local word list, one word per line.")
    parser.add_argument("--seed", type=int, default=CONFIG["random_seed"])
    sub = parser.add_subparsers(dest="command", required=True)

    p_play = sub.add_parser("play", help="Play one game and print every guess.")
    p_play.add_argument("--secret", type=str, default=None)
    p_play.add_argument("--halt-on-budget", action="store_true",
                        help=f"Stop after {CONFIG['max_guesses']} misses instead of playing on.")

    p_train = sub.add_parser("train", help="Random search for scoring weights.")
    p_train.add_argument("--generations", type=int, default=CONFIG["generations"])
    p_train.add_argument("--sample-size", type=int, default=CONFIG["train_sample_size"])
    p_train.add_argument("--parallel", action="store_true", default=CONFIG["parallel_eval"])
    p_train.add_argument("--plot", type=str, default=None, help="Output PNG for the training curve.")

    p_bench = sub.add_parser("bench", help="Write a guess distribution CSV.")
    p_bench.add_argument("--games", type=int, default=100)
    p_bench.add_argument("--out", type=str, default="guess_bench.csv")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    words = load_dictionary(args.words)

    if args.command == "play":
        secret = args.secret.lower() if args.secret else None
        if secret is not None and secret not in words:
            parser.error(f"secret {secret!r} is not in the word list")
        demo_game(words, secret=secret, halt=args.halt_on_budget, rng=random.Random(args.seed))
    elif args.command == "train":
        run_training(words, args.generations, args.sample_size, args.seed, args.parallel, args.plot)
    elif args.command == "bench":
        run_guess_benchmark(words, args.games, Path(args.out), rng=random.Random(args.seed))


if __name__ == "__main__":
    main()
