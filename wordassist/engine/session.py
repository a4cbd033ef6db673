"""
Explicit state of one assistant session.

Each round is a pure transition:
    advance(state, guess, feedback) -> new state
so the interactive loop (or the self-play harness) only threads a value
through; nothing is kept in module globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from .constraints import as_word, filter_candidates
from .feedback import Feedback, parse_feedback
from .scoring import DEFAULT_TOP, suggest
from .word import Word


class Status(Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    # zero candidates: no dictionary word matches the feedback given
    CONTRADICTION = "contradiction"


@dataclass(frozen=True)
class SessionState:
    candidates: Tuple[Word, ...]
    guesses: int = 0
    history: Tuple[Tuple[Word, Feedback], ...] = ()

    @property
    def status(self) -> Status:
        n = len(self.candidates)
        if n == 0:
            return Status.CONTRADICTION
        if n == 1:
            return Status.SOLVED
        return Status.IN_PROGRESS

    @property
    def answer(self) -> Optional[Word]:
        return self.candidates[0] if self.status is Status.SOLVED else None

    def suggestions(self, k: int = DEFAULT_TOP) -> List[Word]:
        return suggest(self.candidates, k)


def start(candidates: Iterable[Word]) -> SessionState:
    return SessionState(candidates=tuple(candidates))


def advance(
        state: SessionState,
        guess: Union[Word, str],
        feedback: Union[Feedback, str],
) -> SessionState:
    """Apply one round of feedback and return the next state."""
    g = as_word(guess)
    fb = parse_feedback(feedback)
    return SessionState(
        candidates=tuple(filter_candidates(g, fb, state.candidates)),
        guesses=state.guesses + 1,
        history=state.history + ((g, fb),),
    )
