# apps/cli/play.py
"""
Interactive assistant.

This script:
  1) Validates and loads the word list (prints a one-line summary).
  2) Each round prints the remaining count and the top suggestions, reads the
     guess you played and the game's per-letter reply (C/N/W), and echoes the
     guess in the game's colors.
  3) Stops when one word is left (the answer) or none is (the feedback
     contradicts every dictionary word).

Usage:
    python -m apps.cli.play data/words_sv.txt
    python -m apps.cli.play data/words_sv.dat --mode fixed --show-scores
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from colorama import Back, Fore, Style, just_fix_windows_console

from wordassist.datasets import load_wordlist, pretty_summary
from wordassist.datasets.io import DEFAULT_RECORD_SIZE, MODES
from wordassist.engine import (
    Feedback, MalformedFeedback, Reply, SourceUnavailable, Status, Word,
    advance, parse_feedback, ranked, start, validate_guess,
)
from wordassist.engine.feedback import parse_reply
from wordassist.engine.scoring import DEFAULT_TOP

# Feedback variant -> terminal style (presentation only)
STYLES = {
    Reply.CORRECT: Back.GREEN + Fore.BLACK,
    Reply.PRESENT: Back.LIGHTYELLOW_EX + Fore.BLACK,
    Reply.ABSENT: Back.BLACK + Fore.WHITE,
}

Prompt = Callable[[str], str]


def render(word: Word, feedback: Feedback, color: bool = True) -> str:
    """Guess letters separated by spaces, styled per reply when `color`."""
    if not color:
        return " ".join(word)
    return " ".join(STYLES[r] + ch + Style.RESET_ALL for ch, r in zip(word, feedback))


def read_guess(prompt: Prompt) -> Word:
    while True:
        text = prompt("Guess: ")
        if validate_guess(text):
            return Word.parse(text)
        print(f"Not a five-letter word: {text.strip()!r}")


def read_feedback(word: Word, prompt: Prompt) -> Feedback:
    """
    Ask for each letter's reply until one of C/N/W is given. A whole pattern
    (e.g. 'CNNWC') typed at the first prompt answers all five at once.
    """
    replies = []
    for i, ch in enumerate(word):
        while True:
            text = prompt(f"Letter {i + 1} ('{ch}'): (C)orrect, (N)ot in word, (W)rong Location? ").strip()
            if i == 0 and len(text) > 1:
                try:
                    return parse_feedback(text)
                except MalformedFeedback:
                    continue
            if text.upper() not in ("C", "N", "W"):
                continue
            replies.append(parse_reply(text))
            break
    return tuple(replies)


def _format_suggestions(candidates, top: int, show_scores: bool) -> str:
    best = ranked(candidates)[:top]
    if show_scores:
        return ", ".join(f"{w} ({s})" for w, s in best)
    return ", ".join(str(w) for w, _ in best)


def play(words, *, top: int = DEFAULT_TOP, show_scores: bool = False,
         color: bool = True, prompt: Optional[Prompt] = None) -> int:
    """
    Run the interactive loop over `words`. Returns the process exit code:
    0 when an answer is found, 1 on contradiction.
    """
    prompt = prompt or input
    state = start(words)
    print(f"Initial word list contains {len(state.candidates)} words.")

    while state.status is Status.IN_PROGRESS:
        print(f"{state.guesses} guesses made, {len(state.candidates)} 5-letter words remaining")
        print(f"Suggested guesses: {_format_suggestions(state.candidates, top, show_scores)}")
        guess = read_guess(prompt)
        fb = read_feedback(guess, prompt)
        print(render(guess, fb, color))
        state = advance(state, guess, fb)

    if state.status is Status.SOLVED:
        print(f"Answer should be {state.answer}")
        return 0
    print("No word in the dictionary matches the given feedback.")
    return 1


def main(argv: Optional[list] = None) -> int:
    ap = argparse.ArgumentParser(description="wordassist — interactive five-letter word assistant")
    ap.add_argument("wordlist", help="path to the word list")
    ap.add_argument("--mode", choices=MODES, default="text",
                    help="record layout: UTF-8 lines (text) or ISO-8859-1 fixed records (fixed)")
    ap.add_argument("--record-size", type=int, default=DEFAULT_RECORD_SIZE,
                    help="bytes per record in fixed mode (5 letters + separator)")
    ap.add_argument("--top", type=int, default=DEFAULT_TOP, help="number of suggestions to show")
    ap.add_argument("--show-scores", action="store_true", help="print each suggestion's score")
    ap.add_argument("--no-color", action="store_true", help="plain (uncolored) feedback echo")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)
    if args.top < 0:
        ap.error("--top must be >= 0")
    if args.record_size < 5:
        ap.error("--record-size must be >= 5")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    just_fix_windows_console()

    try:
        words, rep = load_wordlist(args.wordlist, args.mode, args.record_size)
    except SourceUnavailable as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(pretty_summary(rep))

    try:
        return play(words, top=args.top, show_scores=args.show_scores, color=not args.no_color)
    except KeyboardInterrupt:
        print("", file=sys.stderr)
        return 130
    except EOFError:
        print("\ninput closed", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
