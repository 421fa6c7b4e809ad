#!/usr/bin/env python3
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import requests

from wordle_heuristic.config import CONFIG

# =========================
# Wordle vocabulary
# =========================

# Contains a "vocab" object (~2k answer words) and an "other" object (~10k allowed guesses).
WORD_VOCAB_URL = CONFIG["vocab_url"]

FALLBACK_WORDS = [
    "cigar", "rebut", "sissy", "humph", "awake",
    "blush", "focal", "evade", "naval", "serve",
    "apple", "crane", "slate", "toast", "ghost",
]


def clean_words(words, length: int = CONFIG["word_length"]) -> List[str]:
    """Lowercase, keep alphabetic words of the right length, dedup keeping order."""
    out = (w.strip().lower() for w in words)
    return list(dict.fromkeys(w for w in out if len(w) == length and w.isalpha()))


def load_word_lists(url: str = WORD_VOCAB_URL, timeout: float = CONFIG["vocab_timeout"]) -> Tuple[List[str], List[str]]:
    """
    Download Wordle vocabulary from the online JSON.
    Returns (secret_words, allowed_guesses).
    If download fails, falls back to a tiny local list (so the solver still runs).
    """
    try:
        print(f"[vocab] Downloading Wordle vocab from {url} ...")
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()

        vocab = data["vocab"]          # main answer list
        other = data.get("other", [])  # extra acceptable guesses
    except (requests.RequestException, KeyError, ValueError) as e:
        print("[vocab] WARNING: failed to load online word list, using tiny fallback:", e)
        fallback = clean_words(FALLBACK_WORDS)
        return fallback, fallback[:]

    secret_words = clean_words(vocab)
    all_words = clean_words(list(vocab) + list(other))
    print(f"[vocab] Loaded {len(secret_words)} secret words and {len(all_words)} allowed guesses.")
    return secret_words, all_words


def load_word_file(path, length: int = CONFIG["word_length"]) -> List[str]:
    """Read one word per line from a local file."""
    with Path(path).open("r", encoding="utf-8") as f:
        return clean_words(f.read().split(), length)


def letter_weights(words: Sequence) -> Dict[str, float]:
    """Relative frequency of each letter over the whole corpus."""
    counts = Counter("".join(str(w) for w in words))
    total = sum(counts.values()) or 1
    return {ch: c / total for ch, c in counts.items()}


def load_dictionary(path: Optional[str] = None) -> List[str]:
    if path:
        words = load_word_file(path)
        print(f"[vocab] Loaded {len(words)} words from {path}")
        return words
    # answer list only; the 10k extra guesses slow training down a lot
    secret_words, _ = load_word_lists()
    return secret_words
