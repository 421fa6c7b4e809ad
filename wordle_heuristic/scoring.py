#!/usr/bin/env python3
from typing import Dict, List, Optional, Sequence, Tuple

from wordle_heuristic.wordle_env import ConstraintState
from wordle_heuristic.words import Word

# =========================
# Scoring heuristic
# =========================


def score_word(
    word: Word,
    state: ConstraintState,
    char_weights: Optional[Dict[str, float]] = None,
) -> Tuple[float, float, float]:
    """
    Return (novelty, diversity, value) for a candidate word:
    - novelty: letters not already known green/yellow, over L
    - diversity: distinct letters, over L
    - value: summed per-letter corpus weight, over L
    """
    char_weights = char_weights or {}
    length = len(word)
    known = state.known_chars
    novelty = sum(1 for c in word.characters if c not in known) / length
    diversity = len(set(word.characters)) / length
    value = sum(char_weights.get(c, 0.0) for c in word.characters) / length
    return novelty, diversity, value


def rank_words(
    weights: Sequence[float],
    words: Sequence[Word],
    state: ConstraintState,
    char_weights: Optional[Dict[str, float]] = None,
) -> List[Tuple[Word, float]]:
    """
    Rank words by the dot product of their score vector with the first three
    weights, best first. Equal totals keep their original order.
    """
    w_novelty, w_diversity, w_value = weights[:3]
    graded = []
    for word in words:
        novelty, diversity, value = score_word(word, state, char_weights)
        total = novelty * w_novelty + diversity * w_diversity + value * w_value
        graded.append((word, total))
    graded.sort(key=lambda item: item[1], reverse=True)
    return graded
