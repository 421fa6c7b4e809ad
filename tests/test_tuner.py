import random

import pytest

from wordle_heuristic.tuner import (
    FAIL_PENALTY,
    evaluate_params,
    random_params,
    sample_secrets,
    simulate_single_game,
    train,
)
from wordle_heuristic.vocab import letter_weights
from wordle_heuristic.words import Word


def test_random_params_range_and_seed():
    a = random_params(random.Random(7))
    b = random_params(random.Random(7))
    assert a == b
    assert len(a) == 4
    assert all(0.0 <= p < 100.0 for p in a)


def test_sample_secrets_without_replacement(words):
    original = list(words)
    sample = sample_secrets(words, 5, random.Random(3))
    assert len(sample) == 5
    assert len(set(sample)) == 5
    assert set(sample) <= set(words)
    assert words == original


def test_sample_larger_than_dictionary(words):
    assert sorted(sample_secrets(words, 100, random.Random(3))) == sorted(words)


def test_simulated_loss_scores_fail_penalty():
    # all-zero weights tie every word, so "crane" is guessed first and misses
    score = simulate_single_game(
        "apple", ["crane", "apple"], (0, 0, 0, 0), {},
        max_guesses=1, halt_on_budget_exceeded=True,
    )
    assert score == FAIL_PENALTY


def test_simulated_win_counts_tries():
    assert simulate_single_game("crane", ["crane", "apple"], (0, 0, 0, 0), {}) == 1.0
    assert simulate_single_game("apple", ["crane", "apple"], (0, 0, 0, 0), {}) == 2.0


def test_evaluate_params_is_mean(words):
    table = letter_weights(words)
    params = (1.0, 1.0, 1.0, 1.0)
    single = [simulate_single_game(s, words, params, table) for s in words[:3]]
    assert evaluate_params(params, words[:3], words, table) == pytest.approx(sum(single) / 3)


def test_evaluate_params_needs_secrets(words):
    with pytest.raises(ValueError):
        evaluate_params((1, 1, 1, 1), [], words, {})


def test_train_keeps_best(words):
    seen = []
    result = train(words, generations=4, sample_size=4, rng=random.Random(11), on_generation=seen.append)
    assert len(result.history) == 4
    assert seen == result.history
    assert result.best_avg <= result.history[0].avg
    assert result.best_avg == min(s.avg for s in result.history)
    best = [s.best_avg for s in result.history]
    assert best == sorted(best, reverse=True)
    assert result.best_params in [s.params for s in result.history]
    assert len(result.best_params) == 4


def test_train_is_deterministic_for_a_seed(words):
    a = train(words, generations=3, sample_size=3, rng=random.Random(5))
    b = train(words, generations=3, sample_size=3, rng=random.Random(5))
    assert a.best_avg == b.best_avg
    assert a.best_params == b.best_params


def test_train_accepts_word_objects(words):
    result = train([Word(w) for w in words], generations=1, sample_size=2, rng=random.Random(1))
    assert result.best_avg >= 1.0


def test_parallel_evaluation_matches_sequential(words):
    table = letter_weights(words)
    secrets = [Word(w) for w in words]
    params = (1.0, 2.0, 3.0, 4.0)
    sequential = evaluate_params(params, secrets, words, table, parallel=False)
    parallel = evaluate_params(params, secrets, words, table, parallel=True)
    assert parallel == pytest.approx(sequential)


def test_parallel_training_matches_sequential(words):
    a = train(words, generations=2, sample_size=3, rng=random.Random(8), parallel=False)
    b = train(words, generations=2, sample_size=3, rng=random.Random(8), parallel=True)
    assert a.best_params == b.best_params
    assert a.best_avg == pytest.approx(b.best_avg)
