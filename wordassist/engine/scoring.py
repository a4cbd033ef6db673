"""
Letter-frequency suggestion heuristic.

Idea:
  - Build a 29-slot letter histogram over the CURRENT candidate set; every
    occurrence counts, so a repeated letter adds twice.
  - Only words with five distinct letters are eligible as suggestions (words
    with repeats stay candidates for filtering).
  - Score = product of the histogram counts of the word's five letters. A
    product needs every letter to be common, a sum would not.
  - A letter with count 0 contributes 1 (unseen-symbol sentinel), so the
    score is never forced to zero.

Ties keep the candidates' input order (Python's sort is stable).
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .word import ALPHABET, Word

DEFAULT_TOP = 3


def letter_counts(candidates: Iterable[Word]) -> np.ndarray:
    """Occurrences of each alphabet symbol across all candidates (shape (29,))."""
    idx = [i for w in candidates for i in w.indices()]
    return np.bincount(np.asarray(idx, dtype=np.intp), minlength=len(ALPHABET))


def score_word(word: Word, counts: np.ndarray) -> int:
    # Python ints: five counts of a large list overflow int64.
    s = 1
    for i in word.indices():
        c = int(counts[i])
        s *= c if c > 0 else 1
    return s


def ranked(candidates: Sequence[Word]) -> List[Tuple[Word, int]]:
    """All eligible (word, score) pairs, best first."""
    counts = letter_counts(candidates)
    scored = [(w, score_word(w, counts)) for w in candidates if not w.has_duplicate_letter()]
    scored.sort(key=lambda ws: ws[1], reverse=True)
    return scored


def suggest(candidates: Sequence[Word], k: int = DEFAULT_TOP) -> List[Word]:
    """
    Top-`k` suggested next guesses (fewer if the eligible pool is smaller,
    empty for an empty candidate set). Does not modify `candidates`.
    """
    if k < 0:
        raise ValueError(f"k must be >= 0; got {k}")
    return [w for w, _ in ranked(candidates)[:k]]
