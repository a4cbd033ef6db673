"""
Convert a word list between the two record layouts.

Features:
- Reads with the lenient loader (invalid records are dropped, case folded).
- Writes UTF-8 lines (--to text) or ISO-8859-1 fixed records (--to fixed).
- Optional stable dedupe (keeps first occurrence, preserves order).

Usage:
    python -m script.convert_wordlist --in data/words_sv.txt --out data/words_sv.dat --to fixed --dedupe
"""

import argparse

from wordassist.datasets import load_words, write_lines, write_records
from wordassist.datasets.io import DEFAULT_RECORD_SIZE


def unique_preserve_order(words: list) -> list:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Convert a word list between text and fixed-width records.")
    ap.add_argument("--in", dest="inp", required=True, help="input word list")
    ap.add_argument("--out", dest="out", required=True, help="output file")
    ap.add_argument("--to", choices=["text", "fixed"], required=True, help="output layout")
    ap.add_argument("--record-size", type=int, default=DEFAULT_RECORD_SIZE,
                    help="bytes per fixed record (input and output)")
    ap.add_argument("--dedupe", action="store_true", help="drop repeated words (first one wins)")
    args = ap.parse_args(argv)

    # input is the other layout
    src_mode = "fixed" if args.to == "text" else "text"
    words = load_words(args.inp, src_mode, args.record_size)
    out = unique_preserve_order(words) if args.dedupe else words

    if args.to == "fixed":
        write_records(out, args.out, args.record_size)
    else:
        write_lines((str(w) for w in out), args.out)
    print(f"Input: {args.inp} ({len(words)} words) -> Output: {args.out} ({len(out)} words, {args.to})")


if __name__ == "__main__":
    main()
