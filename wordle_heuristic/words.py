#!/usr/bin/env python3
from collections import Counter
from typing import List

from wordle_heuristic.config import CONFIG

VOWELS = "aeiou"
WORD_LENGTH = CONFIG["word_length"]


class InvalidLength(ValueError):
    """Raised when a word does not have exactly the configured length."""


class Word:
    """
    Immutable fixed-length word.

    - characters: tuple of single characters, len == length
    - vowels / consonants: characters split by VOWELS, order kept
    - repeated_characters: char -> count, only for chars seen more than once
    """

    __slots__ = ("characters", "vowels", "consonants", "repeated_characters")

    def __init__(self, text: str, length: int = WORD_LENGTH):
        if len(text) != length:
            raise InvalidLength(
                f"Word {text!r} has {len(text)} characters, expected {length}"
            )
        chars = tuple(text)
        counts = Counter(chars)
        object.__setattr__(self, "characters", chars)
        object.__setattr__(self, "vowels", tuple(c for c in chars if c in VOWELS))
        object.__setattr__(self, "consonants", tuple(c for c in chars if c not in VOWELS))
        object.__setattr__(
            self,
            "repeated_characters",
            {ch: n for ch, n in counts.items() if n > 1},
        )

    def __setattr__(self, name, value):
        raise AttributeError("Word is immutable")

    def has_char(self, char: str) -> bool:
        return char in self.characters

    def __len__(self):
        return len(self.characters)

    def __getitem__(self, index):
        return self.characters[index]

    def __iter__(self):
        return iter(self.characters)

    def __str__(self):
        return "".join(self.characters)

    def __repr__(self):
        return f"Word({str(self)!r})"

    def __eq__(self, other):
        if isinstance(other, Word):
            return self.characters == other.characters
        return NotImplemented

    def __hash__(self):
        return hash(self.characters)

    def __reduce__(self):
        return Word, (str(self), len(self))


def as_word(text, length: int = WORD_LENGTH) -> Word:
    return text if isinstance(text, Word) else Word(text, length)


def to_words(texts, length: int = WORD_LENGTH) -> List[Word]:
    """Wrap strings as Words (Words pass through), raising InvalidLength on the first bad one."""
    return [as_word(t, length) for t in texts]

