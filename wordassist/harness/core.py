"""
Self-play harness.

- run_case:  play one game against a known answer, always taking the top
             suggestion (or the sole/first candidate when nothing is eligible).
- run_batch: run many answers in sequence (optionally a sample prefix).
- summarize: aggregate win rate / mean guesses / contradictions.

Feedback comes from the game's own scoring (feedback_of), while filtering
uses the assistant's simplified ABSENT rule. A game can therefore end in
"contradiction" when the answer repeats a letter; that outcome is reported,
not hidden.

These functions are UI-agnostic so they can be reused by the CLI or tests.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from wordassist.engine import Word, advance, feedback_of, start, suggest

log = logging.getLogger(__name__)

WORDLE_MAX_TURNS = 6


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def _next_guess(candidates: Sequence[Word]) -> Word:
    if len(candidates) == 1:
        return candidates[0]
    top = suggest(candidates, 1)
    # every candidate repeats a letter: fall back to source order
    return top[0] if top else candidates[0]


def run_case(answer: Word, words: Iterable[Word], *,
             max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    Play one game until solved, contradiction, or the turn budget runs out.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), status (str),
            time_ms (float), history (tuple[(Word, Feedback)])
    """
    _check_turns(max_turns)

    state = start(words)
    status = "out_of_turns"

    t0 = time.perf_counter()
    for _ in range(max_turns):
        if not state.candidates:
            status = "contradiction"
            break
        guess = _next_guess(state.candidates)
        state = advance(state, guess, feedback_of(answer, guess))
        if guess == answer:
            status = "solved"
            break
    else:
        if not state.candidates:
            status = "contradiction"

    dt = (time.perf_counter() - t0) * 1000.0
    if status == "contradiction":
        log.debug("contradiction for %s after %d guess(es)", answer, state.guesses)
    return {
        "answer": str(answer),
        "success": status == "solved",
        "guesses": state.guesses,
        "status": status,
        "time_ms": dt,
        "history": state.history,
    }


def run_batch(
        answers: Sequence[Word],
        words: Sequence[Word],
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: Optional[int] = None,
        on_result: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is given only the first K answers
    are used. `on_result` is called after each case (progress reporting).
    """
    _check_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for ans in pool:
        r = run_case(ans, words, max_turns=max_turns)
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out


def summarize(results: Sequence[Dict]) -> Dict:
    solved = [r for r in results if r["success"]]
    games = len(results)
    return {
        "games": games,
        "solved": len(solved),
        "win_rate": (len(solved) / games) if games else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in solved) / len(solved)) if solved else 0.0,
        "contradictions": sum(1 for r in results if r["status"] == "contradiction"),
    }
