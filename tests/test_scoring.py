import numpy as np
import pytest
from wordassist.engine import ALPHABET, Word, letter_counts, ranked, score_word, suggest


def words(*ws):
    return [Word.parse(w) for w in ws]


def test_letter_counts_counts_every_occurrence():
    counts = letter_counts(words("apple", "åsnor"))
    assert counts.shape == (len(ALPHABET),)
    assert counts[ALPHABET.index("p")] == 2
    assert counts[ALPHABET.index("a")] == 1
    assert counts[ALPHABET.index("å")] == 1
    assert counts.sum() == 10


def test_letter_counts_empty():
    counts = letter_counts([])
    assert counts.shape == (29,) and counts.sum() == 0


def test_score_is_product_with_unseen_sentinel():
    counts = letter_counts(words("crane", "crate", "trace"))
    # c=3 r=3 a=3 n=1 e=3
    assert score_word(Word.parse("crane"), counts) == 3 * 3 * 3 * 1 * 3
    # b, l, u, m, y are all unseen -> 1 each
    assert score_word(Word.parse("blumy"), counts) == 1


def test_score_does_not_overflow():
    counts = np.full(len(ALPHABET), 10 ** 6, dtype=np.int64)
    assert score_word(Word.parse("crane"), counts) == 10 ** 30


def test_suggest_ranks_by_score_and_skips_duplicates():
    cands = words("eerie", "crane", "crate", "trace", "plumb")
    out = suggest(cands)
    assert Word.parse("eerie") not in out
    assert out[:3] == words("crate", "trace", "crane")
    assert all(not w.has_duplicate_letter() for w in out)


def test_suggest_tie_keeps_input_order():
    cands = words("abcde", "edcba", "bcdea")
    assert suggest(cands) == cands
    assert suggest(list(reversed(cands))) == list(reversed(cands))


def test_suggest_limits_and_empty():
    assert suggest([]) == []
    assert suggest(words("apple", "eerie")) == []
    assert len(suggest(words("crane", "slate"))) == 2
    assert len(suggest(words("crane", "slate", "pious", "bumpy"))) == 3
    assert suggest(words("crane", "slate"), k=0) == []
    with pytest.raises(ValueError):
        suggest(words("crane"), k=-1)


def test_suggest_is_pure_and_idempotent():
    cands = words("crane", "slate", "pious", "bumpy", "apple")
    before = list(cands)
    assert suggest(cands) == suggest(cands)
    assert cands == before


def test_ranked_scores_descending():
    scores = [s for _, s in ranked(words("crane", "slate", "pious", "bumpy"))]
    assert scores == sorted(scores, reverse=True)
