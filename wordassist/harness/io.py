"""
Report writers for self-play runs.

- format_trail:   render a game's (Word, Feedback) history as "trace:-GGYG crane:GGGGG"
- write_results:  one CSV row per game (answer, status, guesses, time, trail)
- build_manifest / write_manifest: JSON run record with the word-list report
  and the batch summary
- run_id:         UTC timestamp used to name a run's files
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Sequence, Tuple
import csv
import json
import datetime as dt

from wordassist.engine import Feedback, Word, format_pattern

RESULT_FIELDS = ["answer", "status", "guesses", "time_ms", "trail"]
MANIFEST_VERSION = 1


def format_trail(history: Iterable[Tuple[Word, Feedback]]) -> str:
    return " ".join(f"{w}:{format_pattern(fb)}" for w, fb in history)


def write_results(results: Sequence[Dict], path: Path | str) -> str:
    """Write per-game rows; the guess/feedback history becomes one `trail` column."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "answer": r["answer"],
                "status": r["status"],
                "guesses": r["guesses"],
                "time_ms": f"{r['time_ms']:.3f}",
                "trail": format_trail(r["history"]),
            })
    return str(p)


def run_id(now: dt.datetime | None = None) -> str:
    """e.g. 20261019T142233Z"""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.strftime("%Y%m%dT%H%M%SZ")


def build_manifest(rid: str, *, config: Dict, wordlist: Dict, summary: Dict) -> Dict:
    """
    Run record. `wordlist` is a validator report; only its identifying fields
    are kept so two runs on the same list can be matched by sha256.
    """
    return {
        "version": MANIFEST_VERSION,
        "run_id": rid,
        "config": {k: v for k, v in config.items() if v is not None},
        "wordlist": {k: wordlist[k] for k in ("path", "mode", "count", "unique_count", "sha256")},
        "summary": summary,
    }


def write_manifest(manifest: Dict, path: Path | str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return str(p)
