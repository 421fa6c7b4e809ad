#!/usr/bin/env python3

CONFIG = {
    # Randomness / reproducibility
    "random_seed": 42,

    # Word / game settings
    "word_length": 5,
    "max_guesses": 6,
    "fail_penalty": 10.0,
    # False keeps guessing past max_guesses until the secret is found
    "halt_on_budget_exceeded": False,

    # Scoring weights used when nobody supplies a vector
    "default_weights": (1.0, 1.0, 1.0),

    # Random-search training
    "generations": 10,
    "train_sample_size": 100,
    "num_params": 4,
    "param_range": (0.0, 100.0),
    "parallel_eval": False,

    # Online vocabulary
    # GitHub repo: ed-fish/wordle-vocab, vocab.json
    "vocab_url": "https://raw.githubusercontent.com/ed-fish/wordle-vocab/main/vocab.json",
    "vocab_timeout": 10,

    # Logging
    "debug": False,
}
