"""Heuristic Wordle solver with a random-search weight tuner."""
