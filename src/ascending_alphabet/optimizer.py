"""
Coordinate ascent over letter positions.

Each coordinate step takes one letter out of the current best permutation
and tries it at all 26 positions of the remaining 25 letters, keeping a
candidate only when it beats the running highscore. A sweep applies one
step per letter of the traversal order; sweeps repeat until the highscore
stops changing.
"""
from __future__ import annotations

from dataclasses import dataclass

from .scoring import ALPHABET, N_LETTERS, score


@dataclass(frozen=True)
class Result:
    """Best score found and the permutation that achieved it."""
    score: int
    permutation: str


def insert_letter(residual: str, letter: str, index: int) -> str:
    """Splice letter into residual at index."""
    return residual[:index] + letter + residual[index:]


def coordinate_step(best, highscore, letter, corpus):
    """Find the best position of one letter, the others held fixed.

    Comparison is strict, so among equal scores the lowest insertion index
    is kept.

    Returns: (highscore, best)
    """
    residual = best.replace(letter, "")
    for i in range(N_LETTERS):
        candidate = insert_letter(residual, letter, i)
        s = score(candidate, corpus)
        if s > highscore:
            highscore = s
            best = candidate
    return highscore, best


def optimize(traversal_order, corpus, on_step=None) -> Result:
    """Coordinate ascent from the identity alphabet to a fixed point.

    Args:
        traversal_order: the 26 letters in the order they are repositioned
        corpus: Corpus to score against
        on_step: optional callback(letter, highscore, permutation) called
            after every coordinate step

    Returns: Result(highscore, best permutation)
    """
    best = ALPHABET
    highscore = -1

    while True:
        prev_high = highscore
        for letter in traversal_order:
            highscore, best = coordinate_step(best, highscore, letter, corpus)
            if on_step is not None:
                on_step(letter, highscore, best)
        if highscore == prev_high:
            break

    return Result(highscore, best)
