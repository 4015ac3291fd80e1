"""
Ranking and scoring of candidate alphabets.

A permutation of the 26 letters induces a rank for every letter (its index).
A word is "ascending" under that permutation when the ranks of its letters
never decrease from left to right. The score of a permutation is the number
of ascending words in the corpus.

Two scorers are provided: `count_ascending`, a plain per-word walk that works
on any iterable of strings, and `score`, which evaluates a whole `Corpus` at
once with numpy. They must always agree.
"""
from __future__ import annotations

import math

import numpy as np


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
N_LETTERS = len(ALPHABET)

# letter -> code 0..25, the index used by rank arrays
LETTER_CODES = {c: i for i, c in enumerate(ALPHABET)}


class InvalidPermutationError(ValueError):
    """The candidate is not a bijection over the 26 letters."""


class UnscoreableWordError(ValueError):
    """A word contains a character with no rank in the alphabet."""

    def __init__(self, word, char):
        self.word = word
        self.char = char
        super().__init__(
            f"word {word!r} contains {char!r}, which is not in {ALPHABET}")


def validate_permutation(permutation: str) -> None:
    """Raise InvalidPermutationError unless every letter appears exactly once."""
    if len(permutation) != N_LETTERS or set(permutation) != set(ALPHABET):
        raise InvalidPermutationError(
            f"not a permutation of {ALPHABET}: {permutation!r}")


def build_ranking(permutation: str) -> dict[str, int]:
    """Map each letter to its 0-based index in the permutation."""
    validate_permutation(permutation)
    return {c: i for i, c in enumerate(permutation)}


def rank_array(permutation: str) -> np.ndarray:
    """Ranking as an array: ranks[LETTER_CODES[c]] = rank of c."""
    validate_permutation(permutation)
    ranks = np.empty(N_LETTERS, dtype=np.int16)
    for i, c in enumerate(permutation):
        ranks[LETTER_CODES[c]] = i
    return ranks


def is_ascending(word: str, ranking: dict[str, int]) -> bool:
    """True if the ranks of the letters of word are non-decreasing."""
    prev = -math.inf
    for ch in word:
        try:
            current = ranking[ch]
        except KeyError:
            raise UnscoreableWordError(word, ch) from None
        if current < prev:
            return False
        prev = current
    return True


def count_ascending(words, permutation: str) -> int:
    """Reference scorer: number of ascending words in any iterable."""
    ranking = build_ranking(permutation)
    return sum(1 for w in words if is_ascending(w, ranking))


def score(permutation: str, corpus) -> int:
    """Number of ascending corpus words under permutation.

    A word is not ascending iff one of its adjacent letter pairs is a
    descent, so the whole corpus is checked with one lookup and one
    comparison over all pairs.
    """
    ranks = rank_array(permutation)
    n_words = len(corpus)
    if n_words == 0:
        return 0

    char_ranks = ranks[corpus.codes]
    descents = char_ranks[corpus.pair_left] > char_ranks[corpus.pair_right]

    broken = np.zeros(n_words, dtype=bool)
    broken[corpus.pair_word[descents]] = True
    return n_words - int(broken.sum())
