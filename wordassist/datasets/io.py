"""
Word-list loading.

Two record layouts are supported:
  - "text"  : UTF-8, one word per line (accented letters are multi-byte)
  - "fixed" : ISO-8859-1, fixed-width records of `record_size` bytes; the
              first five bytes are the letters (default 6 = 5 letters + '\\n')

Loading is lenient: records that are not five alphabet letters are dropped.
Only an unreadable source is an error (SourceUnavailable).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from wordassist.engine import SourceUnavailable, Word
from wordassist.engine.word import WORD_LENGTH

log = logging.getLogger(__name__)

MODES = ("text", "fixed")
DEFAULT_RECORD_SIZE = WORD_LENGTH + 1

Record = Union[str, bytes]


def _check_mode(mode: str, record_size: int) -> None:
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}; got {mode!r}")
    if record_size < WORD_LENGTH:
        raise ValueError(f"record_size must be >= {WORD_LENGTH}; got {record_size}")


def iter_records(p: Path | str, mode: str = "text",
                 record_size: int = DEFAULT_RECORD_SIZE, digest=None) -> Iterator[Record]:
    """
    Stream raw records from `p`: stripped text lines or `record_size`-byte
    chunks. A trailing partial fixed record is ignored.

    The file is read once; if `digest` (a hashlib object) is given, every raw
    byte read is fed to it, so a pipe or FIFO can be loaded and hashed together.
    A UTF-8 byte-order mark on the first text line is dropped.
    """
    _check_mode(mode, record_size)
    p = Path(p)
    try:
        with p.open("rb") as f:
            if mode == "text":
                for i, raw in enumerate(f):
                    if digest is not None:
                        digest.update(raw)
                    yield raw.decode("utf-8-sig" if i == 0 else "utf-8", errors="replace").strip()
            else:
                for chunk in iter(lambda: f.read(record_size), b""):
                    if digest is not None:
                        digest.update(chunk)
                    if len(chunk) == record_size:
                        yield chunk
    except OSError as e:
        raise SourceUnavailable(f"cannot read word list {p}: {e}") from e


def parse_record(rec: Record) -> Word | None:
    return Word.from_bytes(rec) if isinstance(rec, bytes) else Word.from_text(rec)


def load_words(p: Path | str, mode: str = "text",
               record_size: int = DEFAULT_RECORD_SIZE) -> List[Word]:
    """
    Load all valid words from `p` in file order (duplicates kept).

    Raises:
      SourceUnavailable : file missing or unreadable
      ValueError        : unknown mode / record_size < 5
    """
    words: List[Word] = []
    skipped = 0
    for rec in iter_records(p, mode, record_size):
        w = parse_record(rec)
        if w is None:
            skipped += 1
        else:
            words.append(w)
    log.debug("loaded %d word(s) from %s, skipped %d record(s)", len(words), p, skipped)
    return words


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def write_records(words: Iterable[Word], p: Path | str,
                  record_size: int = DEFAULT_RECORD_SIZE) -> str:
    """
    Write words as fixed-width ISO-8859-1 records, padded with '\\n' bytes up
    to `record_size`. Returns the string path written.
    """
    _check_mode("fixed", record_size)
    pad = b"\n" * (record_size - WORD_LENGTH)
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("wb") as f:
        for w in words:
            f.write(w.to_bytes() + pad)
    return str(p)
