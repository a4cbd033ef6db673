"""
Lightweight guess validation for interactive input.

A guess is acceptable iff:
  - it parses as a five-letter alphabet word (case-insensitive)
  - if `allowed` is given, it is one of those words

Unlike filter_candidates(), this never raises; the CLI uses it to decide
whether to re-prompt.
"""

from typing import Iterable, Optional, Set

from .word import Word


def validate_guess(text: str, allowed: Optional[Iterable[Word]] = None) -> bool:
    w = Word.from_text(text) if isinstance(text, str) else None
    if w is None:
        return False
    if allowed is None:
        return True

    # If you call this in a tight loop, pass a set.
    allowed_set: Set[Word] = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return w in allowed_set
