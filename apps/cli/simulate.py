# apps/cli/simulate.py
"""
CLI entry point for self-play runs.

This script:
  1) Loads the word list once (prints counts + SHA) and the answers to play
     (defaults to the word list itself).
  2) Plays every answer (or a seeded sample) with the assistant's top
     suggestion each turn, with a live progress indicator, and writes:
       - CSV:  one row per game with its guess:pattern trail
       - JSON: manifest with config, word-list identity, summary

Usage:
    python -m apps.cli.simulate data/words_sv.txt --sample 200 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordassist.datasets import load_wordlist, load_words, pretty_summary
from wordassist.datasets.io import DEFAULT_RECORD_SIZE, MODES
from wordassist.engine import SourceUnavailable
from wordassist.harness import WORDLE_MAX_TURNS, run_case, summarize
from wordassist.harness.io import build_manifest, run_id, write_manifest, write_results


def main(argv=None) -> int:
    """
    Parse CLI args, load the word list, run the batch with progress, and
    write outputs.
    """
    ap = argparse.ArgumentParser(description="wordassist — self-play evaluation")
    ap.add_argument("wordlist", help="path to the word list (candidate universe)")
    ap.add_argument("--answers", help="answers to play (default: every word of the word list)")
    ap.add_argument("--mode", choices=MODES, default="text", help="record layout of both files")
    ap.add_argument("--record-size", type=int, default=DEFAULT_RECORD_SIZE,
                    help="bytes per record in fixed mode")
    ap.add_argument("--sample", type=int, help="play only K answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS, help="turn budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)
    if args.max_turns < 1:
        ap.error("--max-turns must be >= 1")
    if args.record_size < 5:
        ap.error("--record-size must be >= 5")
    if args.sample is not None and args.sample < 1:
        ap.error("--sample must be >= 1")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Load lists; the word-list report comes from the same read
    try:
        words, rep = load_wordlist(args.wordlist, args.mode, args.record_size)
        answers = (load_words(args.answers, args.mode, args.record_size)
                   if args.answers else list(words))
    except SourceUnavailable as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(pretty_summary(rep))

    # 2) Choose cases (deterministic sample by seed)
    if args.sample is not None and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = answers
    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(ans, words, max_turns=args.max_turns))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    summary = summarize(results)
    rid = run_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"selfplay_{rid}.csv"
    manifest_path = outdir / f"selfplay_{rid}_manifest.json"

    write_results(results, csv_path)
    write_manifest(build_manifest(rid, config=vars(args), wordlist=rep, summary=summary),
                   manifest_path)

    print(f"Solved {summary['solved']}/{summary['games']} "
          f"(win rate {summary['win_rate']:.1%}, mean guesses {summary['mean_guesses']:.2f}, "
          f"contradictions {summary['contradictions']})")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
