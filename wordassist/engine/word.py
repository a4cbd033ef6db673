"""
Five-letter word value type over the 29-letter alphabet.

Alphabet (table order, used by the frequency table):
  a..z  -> 0..25
  å     -> 26
  ä     -> 27
  ö     -> 28

The three accented letters are also the ISO-8859-1 bytes 229, 228, 246, which
is how fixed-width word-list records store them.

A Word can only be built through its factories, so every Word in the system is
already five valid, lower-case letters:
  - Word.parse(text)       strict; raises MalformedGuess (live user input)
  - Word.from_text(text)   lenient; returns None (dictionary cleaning)
  - Word.from_bytes(rec)   lenient; ISO-8859-1 record, returns None
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from .errors import MalformedGuess

WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyzåäö"
LETTER_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


def is_letter(ch: str) -> bool:
    """True if `ch` is one (lower-case) alphabet symbol."""
    return ch in LETTER_INDEX


@dataclass(frozen=True)
class Word:
    letters: str

    def __post_init__(self):
        if len(self.letters) != WORD_LENGTH or not all(is_letter(c) for c in self.letters):
            raise MalformedGuess(f"not a {WORD_LENGTH}-letter word: {self.letters!r}")

    # ---- factories ----

    @classmethod
    def parse(cls, text: str) -> "Word":
        """
        Strict factory for user input. Surrounding whitespace is stripped and
        case is folded; anything else wrong raises MalformedGuess.
        """
        if not isinstance(text, str):
            raise MalformedGuess(f"guess must be a string, got {type(text).__name__}")
        return cls(unicodedata.normalize("NFC", text.strip()).lower())

    @classmethod
    def from_text(cls, text: str) -> Optional["Word"]:
        try:
            return cls.parse(text)
        except MalformedGuess:
            return None

    @classmethod
    def from_bytes(cls, record: bytes) -> Optional["Word"]:
        """Decode the first five bytes of a fixed-width ISO-8859-1 record."""
        if len(record) < WORD_LENGTH:
            return None
        return cls.from_text(record[:WORD_LENGTH].decode("iso-8859-1"))

    # ---- helpers ----

    def has_duplicate_letter(self) -> bool:
        return len(set(self.letters)) != WORD_LENGTH

    def indices(self) -> list[int]:
        """Alphabet index of each position."""
        return [LETTER_INDEX[c] for c in self.letters]

    def to_bytes(self) -> bytes:
        return self.letters.encode("iso-8859-1")

    def __getitem__(self, i: int) -> str:
        return self.letters[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __len__(self) -> int:
        return WORD_LENGTH

    def __contains__(self, ch: str) -> bool:
        return ch in self.letters

    def __str__(self) -> str:
        return self.letters

    def __repr__(self) -> str:
        return f"Word({self.letters!r})"
