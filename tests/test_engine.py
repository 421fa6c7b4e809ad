import pytest

import wordle_heuristic.engine as engine_mod
from wordle_heuristic.engine import (
    GameState,
    GuessEngine,
    InvalidStateError,
    NoCandidatesError,
    play_game,
)
from wordle_heuristic.vocab import letter_weights
from wordle_heuristic.words import Word

from conftest import WORDS


def test_initial_state(words):
    engine = GuessEngine("apple", words)
    assert engine.state == GameState.IN_PROGRESS
    assert engine.history == []
    assert [str(w) for w in engine.candidate_pool] == words


def test_end_to_end_apple(words):
    engine = GuessEngine("apple", words, char_weights=letter_weights(words))
    while engine.state == GameState.IN_PROGRESS:
        before = list(engine.candidate_pool)
        guess = engine.select_guess()
        assert guess in before
        engine.submit_guess(guess)
        assert len(engine.candidate_pool) <= len(before)
    assert engine.state == GameState.WON
    assert engine.history[-1].is_win
    assert engine.tries <= len(words)


@pytest.mark.parametrize("secret", WORDS)
def test_every_dictionary_secret_is_solved(secret, words):
    engine = play_game(secret, words, char_weights=letter_weights(words))
    assert engine.state == GameState.WON
    assert engine.history[-1].word == secret
    guessed = [r.word for r in engine.history]
    assert len(guessed) == len(set(guessed))


def test_forced_move_skips_scoring(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("scoring should not run for a forced move")

    monkeypatch.setattr(engine_mod, "rank_words", boom)
    engine = GuessEngine("apple", ["apple"])
    assert engine.select_guess() == Word("apple")


def test_no_candidates_error():
    engine = GuessEngine("crane", ["apple"])
    engine.submit_guess("apple")
    with pytest.raises(NoCandidatesError):
        engine.select_guess()


def test_secret_missing_from_dictionary_raises(words):
    engine = GuessEngine("zzzzz", words)
    with pytest.raises(NoCandidatesError):
        engine.play()
    assert engine.state == GameState.IN_PROGRESS


def test_submit_after_win_is_rejected(words):
    engine = GuessEngine("apple", words)
    engine.submit_guess("apple")
    assert engine.state == GameState.WON
    with pytest.raises(InvalidStateError):
        engine.submit_guess("crane")


def test_halt_on_budget_exceeded(words):
    engine = GuessEngine("apple", words, max_tries=1, halt_on_budget_exceeded=True)
    engine.submit_guess("crane")
    assert engine.state == GameState.LOST
    assert engine.budget_exceeded
    with pytest.raises(InvalidStateError):
        engine.submit_guess("apple")
    assert engine.play() == GameState.LOST


def test_play_continues_past_budget_by_default(words):
    engine = GuessEngine("apple", words, max_tries=1, halt_on_budget_exceeded=False)
    engine.submit_guess("crane")
    assert engine.state == GameState.IN_PROGRESS
    assert engine.budget_exceeded
    assert engine.play() == GameState.WON


def test_candidate_filter_after_feedback(words):
    engine = GuessEngine("apple", words)
    engine.submit_guess("crane")
    assert engine.candidate_filter(Word("apple"))
    assert engine.candidate_filter(Word("plate"))
    assert not engine.candidate_filter(Word("ghost"))
    assert not engine.candidate_filter(Word("focal"))


def test_buckets_and_selection(words):
    engine = GuessEngine("apple", words)
    engine.submit_guess("crane")
    buckets = engine.buckets(engine.constraints())
    assert [str(w) for w in buckets["gvy"]] == ["apple", "plate", "slate", "evade"]
    assert len(buckets["g"]) == 7
    assert str(engine.select_guess()) in {"apple", "plate", "slate", "evade"}


def test_first_guess_uses_whole_pool_when_nothing_known(words):
    engine = GuessEngine("apple", words, weights=(0, 0, 0))
    # every bucket holds the full pool and all scores tie, so pool order wins
    assert engine.select_guess() == Word(words[0])


def test_consistent_candidates(words):
    engine = GuessEngine("apple", words)
    engine.submit_guess("crane")
    consistent = {str(w) for w in engine.consistent_candidates()}
    assert "apple" in consistent
    assert "ghost" not in consistent
    assert "crane" not in consistent


def test_on_guess_hook_receives_every_guess(words):
    events = []
    engine = GuessEngine("apple", words, on_guess=events.append)
    engine.play()
    assert [e.try_number for e in events] == list(range(1, engine.tries + 1))
    assert events[-1].state == GameState.WON
    assert events[-1].record.is_win
    assert events[-1].remaining >= 0


def test_invalid_word_length_rejected(words):
    engine = GuessEngine("apple", words)
    with pytest.raises(ValueError):
        engine.submit_guess("pear")


def test_guess_event_remaining_is_snapshot_of_that_guess(words):
    events = []
    engine = GuessEngine("apple", words, on_guess=events.append)
    engine.submit_guess("crane")
    after_crane = len(engine.consistent_candidates())
    engine.submit_guess("ghost")
    assert events[0].remaining == after_crane
    assert events[1].remaining == len(engine.consistent_candidates())
    assert events[0].pool is not engine.candidate_pool
