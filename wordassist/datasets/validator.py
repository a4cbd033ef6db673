"""
Word-list validator.

What this module does:
- Read one word list in either record layout ("text" or "fixed").
- Count valid words, invalid records and duplicates; compute SHA-256 of the
  raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line
  summary for the CLIs.

validate_wordlist() reports a missing file instead of raising; load_wordlist()
returns the words together with the report so CLIs read the source once.

Typical use:
    from wordassist.datasets import load_wordlist, pretty_summary
    words, rep = load_wordlist("data/words_sv.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordassist.engine import Word

from .io import DEFAULT_RECORD_SIZE, iter_records, parse_record


@dataclass
class WordlistReport:
    path: str            # file path (as given)
    mode: str            # "text" or "fixed"
    exists: bool         # did the file exist on disk?
    records: int         # raw records read
    count: int           # valid words (duplicates included)
    unique_count: int    # distinct valid words
    invalid_records: int
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def load_wordlist(path: str, mode: str = "text",
                  record_size: int = DEFAULT_RECORD_SIZE) -> Tuple[List[Word], Dict]:
    """
    Load a word list and build its report from the same single read.

    `passed` is strict: at least one valid word and no invalid records.
    Duplicates are only reported as an issue; the loader keeps them.

    Raises SourceUnavailable if the file cannot be read.
    """
    h = hashlib.sha256()
    records = 0
    valid: List[Word] = []
    for rec in iter_records(path, mode, record_size, digest=h):
        records += 1
        w = parse_record(rec)
        if w is not None:
            valid.append(w)
    invalid = records - len(valid)
    unique = len(set(valid))

    issues: List[str] = []
    if not valid:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"{invalid} invalid record(s) skipped")
    if unique != len(valid):
        issues.append(f"{len(valid) - unique} duplicate word(s)")

    rep = WordlistReport(
        path=str(path),
        mode=mode,
        exists=True,
        records=records,
        count=len(valid),
        unique_count=unique,
        invalid_records=invalid,
        sha256=h.hexdigest(),
        passed=bool(valid) and invalid == 0,
        issues=issues,
    )
    return valid, asdict(rep)


def validate_wordlist(path: str, mode: str = "text",
                      record_size: int = DEFAULT_RECORD_SIZE) -> Dict:
    """Report only; a missing file gives `exists=False` instead of raising."""
    if not Path(path).exists():
        rep = WordlistReport(str(path), mode, False, 0, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)
    return load_wordlist(path, mode, record_size)[1]


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=12972 (uniq=12972, invalid=3, sha=abc123def456) | text | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"words: missing ({report['path']}) | {status}"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_records']}, sha={sha}) "
        f"| {report['mode']} | {status}"
    )
