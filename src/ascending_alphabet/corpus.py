"""
Word corpus: loaded once, shared read-only by every scoring call.

Besides the words themselves a Corpus keeps a flat numpy encoding used by
`scoring.score`:

    codes       letter code (0..25) of every character, words concatenated
    pair_left   index into codes of the first char of each adjacent pair
    pair_right  index of the second char (pair_left + 1)
    pair_word   index of the word each pair belongs to

Pairs never straddle two words.
"""
from __future__ import annotations

import functools
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from .scoring import ALPHABET, UnscoreableWordError


UNKNOWN_CHAR_POLICIES = ("error", "skip")

_LETTERS = frozenset(ALPHABET)


class CorpusLoadError(OSError):
    """The corpus file could not be read."""


@dataclass(frozen=True, eq=False)
class Corpus:
    words: tuple[str, ...]
    skipped: int = 0
    codes: np.ndarray = field(init=False, repr=False)
    pair_left: np.ndarray = field(init=False, repr=False)
    pair_right: np.ndarray = field(init=False, repr=False)
    pair_word: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        for word in self.words:
            bad = set(word) - _LETTERS
            if bad:
                raise UnscoreableWordError(word, min(bad))

        joined = "".join(self.words).encode("ascii")
        codes = np.fromiter(joined, dtype=np.intp, count=len(joined)) - ord("A")
        lengths = np.fromiter((len(w) for w in self.words), dtype=np.intp,
                              count=len(self.words))
        word_of_char = np.repeat(np.arange(len(self.words)), lengths)
        same_word = word_of_char[:-1] == word_of_char[1:]
        pair_left = np.flatnonzero(same_word)

        # frozen dataclass: assign derived arrays through object.__setattr__
        object.__setattr__(self, "codes", codes)
        object.__setattr__(self, "pair_left", pair_left)
        object.__setattr__(self, "pair_right", pair_left + 1)
        object.__setattr__(self, "pair_word", word_of_char[pair_left])
        for arr in (self.codes, self.pair_left, self.pair_right,
                    self.pair_word):
            arr.flags.writeable = False

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    @property
    def n_chars(self) -> int:
        return int(self.codes.size)

    @classmethod
    def from_words(cls, words, unknown_chars="error") -> "Corpus":
        """Build a corpus, applying the unknown-character policy.

        "error" raises UnscoreableWordError on the first offending word,
        "skip" drops such words and records how many in `skipped`.
        """
        if unknown_chars not in UNKNOWN_CHAR_POLICIES:
            raise ValueError(f"unknown_chars must be one of "
                             f"{UNKNOWN_CHAR_POLICIES}, got {unknown_chars!r}")
        words = tuple(words)
        if unknown_chars == "skip":
            kept = tuple(w for w in words if set(w) <= _LETTERS)
            return cls(kept, skipped=len(words) - len(kept))
        return cls(words)

    @classmethod
    def empty(cls) -> "Corpus":
        return cls(())


def read_words(path: Path) -> list[str]:
    """Read newline-separated words, one per line."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"Cannot read corpus {path}: {e}") from e
    return text.splitlines()


@functools.lru_cache(maxsize=None)
def load_corpus(path: Path, unknown_chars: str = "error") -> Corpus:
    """Load and cache the corpus at path for the rest of the process."""
    return Corpus.from_words(read_words(path), unknown_chars=unknown_chars)
