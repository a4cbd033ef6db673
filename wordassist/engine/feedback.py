"""
Per-letter feedback for one guess.

Conventions:
  - Reply.CORRECT : letter is in the answer at this position      ('C' / 'G')
  - Reply.PRESENT : letter is in the answer, at another position  ('W' / 'Y')
  - Reply.ABSENT  : letter is not in the answer                   ('N' / '-')

A Feedback is a plain tuple of five Reply values. Two textual notations are
accepted when parsing: the interactive C/W/N letters ("(C)orrect",
"(W)rong location", "(N)ot in word") and the G/Y/- pattern strings.

feedback_of() is the game's own scoring rule (two-pass, duplicate-safe):
  1) First pass marks all exact matches and counts the answer's unmatched
     letters.
  2) Second pass marks PRESENT only while the letter still has remaining count.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Tuple, Union

from .errors import MalformedFeedback
from .word import WORD_LENGTH, Word


class Reply(Enum):
    CORRECT = "C"
    PRESENT = "W"
    ABSENT = "N"

    @property
    def pattern_char(self) -> str:
        return _PATTERN_CHARS[self]


Feedback = Tuple[Reply, ...]

_PATTERN_CHARS = {Reply.CORRECT: "G", Reply.PRESENT: "Y", Reply.ABSENT: "-"}

# Accepted input symbols (upper-cased before lookup)
_SYMBOLS = {
    "C": Reply.CORRECT, "G": Reply.CORRECT,
    "W": Reply.PRESENT, "Y": Reply.PRESENT,
    "N": Reply.ABSENT, "-": Reply.ABSENT, ".": Reply.ABSENT,
}


def parse_reply(symbol: str) -> Reply:
    """Parse one reply symbol (C/W/N or G/Y/-), case-insensitive."""
    try:
        return _SYMBOLS[symbol.strip().upper()]
    except KeyError:
        raise MalformedFeedback(f"unknown reply symbol: {symbol!r}") from None


def parse_feedback(value: Union[str, Feedback]) -> Feedback:
    """
    Normalize `value` to a five-tuple of Reply.

    Strings may mix notations ("CNWcc", "G-Y--") and may separate symbols with
    whitespace or commas. Sequences of Reply are checked for length.
    """
    if isinstance(value, str):
        symbols = [ch for ch in value if not (ch.isspace() or ch == ",")]
        replies = tuple(parse_reply(ch) for ch in symbols)
    else:
        replies = tuple(value)
        if not all(isinstance(r, Reply) for r in replies):
            raise MalformedFeedback(f"feedback must contain Reply values: {value!r}")

    if len(replies) != WORD_LENGTH:
        raise MalformedFeedback(
            f"feedback must have {WORD_LENGTH} replies, got {len(replies)}")
    return replies


def format_pattern(feedback: Feedback) -> str:
    """Render feedback as a G/Y/- pattern string, e.g. 'GY--G'."""
    return "".join(r.pattern_char for r in feedback)


def feedback_of(target: Word, guess: Word) -> Feedback:
    """
    Feedback the game gives for `guess` when `target` is the hidden answer.

    Examples (as patterns):
      feedback_of(level, belle) -> "-GYYY"
      feedback_of(level, lemon) -> "GG---"
    """
    replies = [Reply.ABSENT] * WORD_LENGTH

    # Pass 1: exact matches; collect leftover answer letters for pass 2.
    remaining: Counter = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            replies[i] = Reply.CORRECT
        else:
            remaining[t] += 1

    # Pass 2: PRESENT is capped by the answer's true multiplicity.
    for i, g in enumerate(guess):
        if replies[i] is Reply.CORRECT:
            continue
        if remaining[g] > 0:
            replies[i] = Reply.PRESENT
            remaining[g] -= 1

    return tuple(replies)
