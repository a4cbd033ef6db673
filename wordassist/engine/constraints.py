"""
Candidate filtering for one (guess, feedback) round.

Given:
  - the guess that was played
  - the five per-letter replies for it
  - the current candidate list

Return:
  - the candidates consistent with every reply, in their original order.

Per position i, a candidate w survives iff:
  CORRECT : w[i] == guess[i]
  PRESENT : w[i] != guess[i] and guess[i] occurs somewhere in w
  ABSENT  : guess[i] occurs nowhere in w

Known limitation: ABSENT is read as "this letter is not in the word at all".
When a guess repeats a letter and the game marks one copy CORRECT/PRESENT and
the other ABSENT, the true answer is filtered out. Callers must treat an empty
result as "no dictionary word matches", not as a crash.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Union

from .feedback import Feedback, Reply, parse_feedback
from .word import Word

log = logging.getLogger(__name__)


def as_word(guess: Union[Word, str]) -> Word:
    return guess if isinstance(guess, Word) else Word.parse(guess)


def is_consistent(word: Word, guess: Word, feedback: Feedback) -> bool:
    """True if `word` could still be the answer after `guess` got `feedback`."""
    for i, reply in enumerate(feedback):
        g = guess[i]
        if reply is Reply.CORRECT:
            if word[i] != g:
                return False
        elif reply is Reply.ABSENT:
            if g in word:
                return False
        elif word[i] == g or g not in word:
            return False
    return True


def filter_candidates(
        guess: Union[Word, str],
        feedback: Union[Feedback, str],
        candidates: Iterable[Word],
) -> List[Word]:
    """
    Keep only candidates consistent with `feedback` for `guess`.

    Raises:
      MalformedGuess    : `guess` is a string that is not a valid word
      MalformedFeedback : `feedback` is not five known replies

    Returns:
      New list (order preserved; input is not modified). May be empty.
    """
    g = as_word(guess)
    fb = parse_feedback(feedback)

    out = [w for w in candidates if is_consistent(w, g, fb)]
    log.debug("filter %s -> %d candidate(s) left", g, len(out))
    return out
